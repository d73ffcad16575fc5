"""Results API views - thin layer over services."""

from collections.abc import Mapping
from typing import Any

from app.container import container
from app.models.results import Result
from app.reference import ReferenceData, constituency_name
from app.services.results import InvalidTallyError
from helpers import formulas
from web.api.errors import NotFoundError, ValidationError, validate_constituency_id

from .schemas import PartyVotesItem, ResultResponse, ResultsResponse


def _to_response(result: Result, reference: ReferenceData) -> ResultResponse:
    items = []
    for party_id, votes in result.party_votes.items():
        party = reference.get_party(party_id) or reference.other_party
        items.append(
            PartyVotesItem(
                party_id=party_id,
                party_name=party.short_name,
                party_color=party.color,
                votes=votes,
                percentage=round(formulas.percentage(votes, result.total_votes), 2),
            )
        )

    return ResultResponse(
        constituency_id=result.constituency_id,
        constituency_name=constituency_name(result.constituency_id),
        status=str(result.status),
        party_votes=items,
        alliance_votes=result.alliance_votes,
        winner_party_id=result.winner_party_id,
        winner_alliance_id=result.winner_alliance_id,
        runner_up_party_id=result.runner_up_party_id,
        total_votes=result.total_votes,
        margin=result.margin,
        margin_percentage=round(result.margin_percentage, 2),
        updated_at=result.updated_at,
        updated_by=result.updated_by,
    )


def get_result(constituency_id: str) -> ResultResponse:
    """Get the result for one constituency."""
    cid = validate_constituency_id(constituency_id)
    result = container.election.get_result(cid)
    if result is None:
        raise NotFoundError(f"No result for {cid}")
    return _to_response(result, container.election.reference())


def list_results() -> ResultsResponse:
    """Get all stored results."""
    reference = container.election.reference()
    items = [_to_response(r, reference) for r in container.election.get_results()]
    return ResultsResponse(items=items, total=len(items))


def submit_result(payload: Mapping[str, Any], updated_by: str | None = None) -> ResultResponse:
    """Store a vote tally for a constituency."""
    cid = payload.get("constituency_id") or payload.get("constituencyId") or ""
    validate_constituency_id(cid)

    try:
        result = container.election.submit_result(payload, updated_by=updated_by)
    except InvalidTallyError as e:
        raise ValidationError(str(e), problems=e.problems) from e

    return _to_response(result, container.election.reference())
