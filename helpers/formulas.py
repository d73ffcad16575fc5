"""Pure vote-count formulas - no dependencies, easily testable."""


def percentage(part: int | float, total: int | float) -> float:
    """Share of total in percent, 0.0 when total is zero."""
    return part / total * 100 if total else 0.0


def rank_votes(votes: dict[str, int]) -> list[tuple[str, int]]:
    """Entries ordered by votes desc, then key asc."""
    return sorted(votes.items(), key=lambda kv: (-kv[1], kv[0]))


def leader(votes: dict[str, int]) -> str | None:
    """Top vote-getter, None when nobody has votes."""
    ranked = rank_votes(votes)
    if not ranked or ranked[0][1] <= 0:
        return None
    return ranked[0][0]


def runner_up(votes: dict[str, int]) -> str | None:
    """Second place among parties with votes."""
    ranked = [kv for kv in rank_votes(votes) if kv[1] > 0]
    return ranked[1][0] if len(ranked) > 1 else None


def margin(votes: dict[str, int]) -> int:
    """Gap between 1st and 2nd place. Unopposed winner keeps all its votes."""
    counts = [v for _, v in rank_votes(votes) if v > 0]

    if not counts:
        return 0
    if len(counts) == 1:
        return counts[0]
    return counts[0] - counts[1]


def merge_counts(pairs) -> dict[str, int]:
    """Sum (key, count) pairs into a dict; repeated keys accumulate."""
    result: dict[str, int] = {}
    for key, count in pairs:
        result[key] = result.get(key, 0) + count
    return result


def turnout(votes_cast: int, registered: int) -> float:
    """Votes cast as a percentage of registered voters."""
    return percentage(votes_cast, registered)
