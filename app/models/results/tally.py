"""Raw vote tally - input schema validated before normalization."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from app.models.results.result import ResultStatus

# Older documents used "counting" for constituencies still being counted
LEGACY_STATUSES = {"counting": ResultStatus.PARTIAL}


class VoteTally(BaseModel):
    """Vote counts for one constituency, keyed by (possibly free-text) party."""

    constituency_id: str = Field(alias="constituencyId")
    party_votes: dict[str, StrictInt] = Field(alias="partyVotes", default_factory=dict)
    status: ResultStatus = ResultStatus.PENDING
    updated_by: str | None = Field(alias="updatedBy", default=None)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("constituency_id")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("constituency id is blank")
        return v

    @field_validator("party_votes")
    @classmethod
    def _non_negative(cls, v: dict[str, int]) -> dict[str, int]:
        negative = sorted(k for k, n in v.items() if n < 0)
        if negative:
            raise ValueError(f"negative vote count for {', '.join(negative)}")
        return v

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v):
        if v is None or v == "":
            return ResultStatus.PENDING
        if isinstance(v, str):
            v = v.strip().lower()
            return LEGACY_STATUSES.get(v, v)
        return v
