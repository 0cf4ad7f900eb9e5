"""Show catalog domain errors."""

from showvote.domain.exceptions import ShowVoteError


class InvalidShowDataError(ShowVoteError):
    """Raised when a show record fails domain validation.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")
