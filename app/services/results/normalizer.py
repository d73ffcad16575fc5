"""Per-constituency result normalizer.

Turns a raw vote tally (free-text party keys, any status) into a canonical
Result: merged canonical party votes, alliance roll-up, winner, margin.
Derived fields are always recomputed; nothing derived is read from input.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from app.models.results import Result, ResultStatus, VoteTally
from app.reference import ReferenceData, default_reference, normalize_constituency_id
from app.services.results.errors import InvalidTallyError
from helpers import formulas


def _describe(err: dict) -> str:
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def validate_tally(raw: VoteTally | Mapping[str, Any]) -> VoteTally:
    """Check a raw tally before it is persisted or normalized.

    Raises InvalidTallyError listing every problem found (negative or
    non-integer counts, unknown status, blank constituency id).
    """
    if isinstance(raw, VoteTally):
        return raw

    try:
        return VoteTally.model_validate(raw)
    except ValidationError as e:
        cid = raw.get("constituency_id") or raw.get("constituencyId")
        raise InvalidTallyError(cid, [_describe(err) for err in e.errors()]) from e


def alliance_votes(party_votes: Mapping[str, int], reference: ReferenceData) -> dict[str, int]:
    """Sum canonical party votes per alliance. Every alliance is present."""
    result = {a.id: 0 for a in reference.alliances}
    result.setdefault(reference.others.id, 0)
    for party_id, votes in party_votes.items():
        alliance_id = reference.alliance_id_for(party_id)
        result[alliance_id] = result.get(alliance_id, 0) + votes
    return result


def normalize_result(
    raw: VoteTally | Mapping[str, Any],
    reference: ReferenceData | None = None,
    updated_at: datetime | None = None,
) -> Result:
    """Build the canonical Result for one constituency."""
    ref = reference or default_reference
    tally = validate_tally(raw)

    party_votes = formulas.merge_counts(
        (ref.normalize_party_key(key), votes) for key, votes in sorted(tally.party_votes.items())
    )
    total = sum(party_votes.values())
    margin = formulas.margin(party_votes)

    winner = None
    if tally.status == ResultStatus.COMPLETED:
        winner = formulas.leader(party_votes)

    return Result(
        constituency_id=normalize_constituency_id(tally.constituency_id),
        party_votes=dict(formulas.rank_votes(party_votes)),
        alliance_votes=alliance_votes(party_votes, ref),
        winner_party_id=winner,
        winner_alliance_id=ref.alliance_id_for(winner) if winner else None,
        runner_up_party_id=formulas.runner_up(party_votes),
        total_votes=total,
        margin=margin,
        margin_percentage=formulas.percentage(margin, total),
        status=tally.status,
        updated_at=updated_at,
        updated_by=tally.updated_by,
    )
