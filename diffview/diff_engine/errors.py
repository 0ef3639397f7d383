"""Exception classes for the diff engine."""


class DiffViewError(Exception):
    """Base exception for diffview errors."""

    pass


class FileTooLarge(DiffViewError):
    """Raised when an input exceeds the content size ceiling.

    No partial diff is attempted for such inputs.
    """

    def __init__(self, name: str, size: int, limit: int) -> None:
        self.name = name
        self.size = size
        self.limit = limit
        super().__init__(
            f"File '{name}' is {size:,} characters, exceeding the {limit // (1024 * 1024)}MB limit"
        )


class InvalidJson(DiffViewError, ValueError):
    """Raised when JSON-aware rendering is requested but the text does not parse.

    The renderer recovers from this by falling back to the flat line view.
    """

    pass
