"""National aggregator - party/alliance seat counts and election summary.

Pure and total over its input: no I/O, no state between calls. Every
observable ordering is an explicit sort, so the same results always give
the same output (pin ``as_of`` to make ``last_updated`` identical too).
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from loguru import logger

import settings
from app.models.reference import Party
from app.models.results import AllianceSeatCount, ElectionSummary, Result, ResultStatus, SeatCount
from app.reference import ReferenceData, default_reference
from helpers import formulas


@dataclass(frozen=True)
class ElectionConfig:
    """Fixed national constants."""

    total_seats: int = 300
    required_majority: int = 151
    total_registered_voters: int = 0

    @classmethod
    def from_settings(cls) -> "ElectionConfig":
        return cls(
            total_seats=settings.TOTAL_SEATS,
            required_majority=settings.REQUIRED_MAJORITY,
            total_registered_voters=settings.TOTAL_REGISTERED_VOTERS,
        )


def _seat_sort_key(sc: SeatCount | AllianceSeatCount, key: str) -> tuple:
    return (-sc.seats, -sc.total_votes, key)


def _empty_seat_count(party: Party, ref: ReferenceData) -> SeatCount:
    return SeatCount(
        party_id=party.id,
        party_name=party.name,
        party_color=party.color,
        alliance_id=ref.alliance_id_of(party),
    )


def count_party_seats(
    results: Iterable[Result],
    parties: Iterable[Party],
    reference: ReferenceData | None = None,
) -> tuple[dict[str, SeatCount], int, int]:
    """Accumulate seats, leads and votes per party.

    Returns (seat counts by party id, total votes cast, declared seats).
    Party ids not among ``parties`` land in the "other" bucket.
    """
    ref = reference or default_reference
    other = ref.other_party
    counts = {p.id: _empty_seat_count(p, ref) for p in parties}

    def bucket(party_id: str) -> SeatCount:
        if party_id in counts:
            return counts[party_id]
        logger.debug("Party {} not in party list, counted as {}", party_id, other.id)
        if other.id not in counts:
            counts[other.id] = _empty_seat_count(other, ref)
        return counts[other.id]

    total_votes = 0
    declared = 0

    for result in results:
        total_votes += result.total_votes
        for party_id, votes in result.party_votes.items():
            bucket(party_id).total_votes += votes

        if result.status == ResultStatus.COMPLETED:
            declared += 1
            if result.winner_party_id:
                bucket(result.winner_party_id).seats += 1
        elif result.status == ResultStatus.PARTIAL:
            leader = formulas.leader(result.party_votes)
            if leader:
                bucket(leader).leading_seats += 1

    for sc in counts.values():
        sc.vote_percentage = formulas.percentage(sc.total_votes, total_votes)

    return counts, total_votes, declared


def rank_seat_counts(counts: Iterable[SeatCount]) -> list[SeatCount]:
    """Drop parties with no seats, leads or votes; sort by seats, then votes."""
    active = [sc for sc in counts if sc.is_active]
    return sorted(active, key=lambda sc: _seat_sort_key(sc, sc.party_id))


def group_by_alliance(
    seat_counts: list[SeatCount],
    total_votes: int,
    reference: ReferenceData | None = None,
) -> list[AllianceSeatCount]:
    """Roll party seat counts up into alliances (reference table order)."""
    ref = reference or default_reference
    alliances = list(ref.alliances)
    if ref.others.id not in {a.id for a in alliances}:
        alliances.append(ref.others)

    members: dict[str, list[SeatCount]] = {a.id: [] for a in alliances}
    for sc in seat_counts:
        alliance_id = sc.alliance_id if sc.alliance_id in members else ref.others.id
        members[alliance_id].append(sc)

    result = []
    for alliance in alliances:
        parties = sorted(members[alliance.id], key=lambda sc: _seat_sort_key(sc, sc.party_id))
        votes = sum(sc.total_votes for sc in parties)
        result.append(
            AllianceSeatCount(
                alliance_id=alliance.id,
                alliance_name=alliance.name,
                alliance_color=alliance.color,
                seats=sum(sc.seats for sc in parties),
                leading_seats=sum(sc.leading_seats for sc in parties),
                total_votes=votes,
                vote_percentage=formulas.percentage(votes, total_votes),
                parties=parties,
            )
        )
    return result


def aggregate(
    results: Iterable[Result],
    parties: Iterable[Party] | None = None,
    reference: ReferenceData | None = None,
    config: ElectionConfig | None = None,
    as_of: datetime | None = None,
) -> tuple[list[SeatCount], list[AllianceSeatCount], ElectionSummary]:
    """Aggregate constituency results into national totals.

    Returns (party seat counts, alliance seat counts, summary).
    """
    ref = reference or default_reference
    cfg = config or ElectionConfig.from_settings()
    results = list(results)

    counts, total_votes, declared = count_party_seats(
        results, ref.parties if parties is None else parties, ref
    )
    party_seat_counts = rank_seat_counts(counts.values())
    alliance_seat_counts = group_by_alliance(party_seat_counts, total_votes, ref)

    summary = ElectionSummary(
        total_seats=cfg.total_seats,
        declared_seats=declared,
        required_majority=cfg.required_majority,
        party_seat_counts=party_seat_counts,
        total_votes_cast=total_votes,
        total_registered_voters=cfg.total_registered_voters,
        national_turnout=formulas.turnout(total_votes, cfg.total_registered_voters),
        last_updated=as_of or datetime.now(timezone.utc),
    )

    logger.debug(
        "Aggregated {} results: {} declared, {} votes, {} active parties",
        len(results),
        declared,
        total_votes,
        len(party_seat_counts),
    )
    return party_seat_counts, alliance_seat_counts, summary
