"""Exceptions raised by union-find structures."""


class UnionFindError(Exception):
    """Base class for all union-find errors."""


class CyclicStructureError(UnionFindError):
    """Raised when a union would make a parent chain loop back on itself."""


class UnknownHandleError(UnionFindError, LookupError):
    """Raised when a forest handle does not refer to a stored element."""

    def __init__(self, handle: object) -> None:
        super().__init__(f"Unknown handle: {handle!r}")
        self.handle = handle
