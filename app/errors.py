class ValidationError(Exception):
    """Raised by a store when asked to persist an invalid comment.

    ``errors`` holds one human-readable message per offending field.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class StoreUnavailable(Exception):
    """Raised when the persistence backend cannot be reached."""

    def __init__(self, message: str = "Comment store unavailable") -> None:
        super().__init__(message)
