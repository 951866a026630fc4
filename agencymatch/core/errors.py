"""Exceptions raised by the match engine."""


class InvalidInputError(ValueError):
    """A precondition on an engine input was violated.

    ``field`` names the offending attribute (e.g. ``budget_min``).
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
