"""Result engine errors."""


class InvalidTallyError(ValueError):
    """Vote tally rejected before a Result is built."""

    def __init__(self, constituency_id: str | None, problems: list[str]):
        self.constituency_id = constituency_id
        self.problems = problems
        where = constituency_id or "<unknown constituency>"
        super().__init__(f"Invalid tally for {where}: {'; '.join(problems)}")
