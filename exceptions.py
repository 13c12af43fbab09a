class LibraryError(Exception):
    """Base exception for library catalog errors."""


class ValidationError(LibraryError, ValueError):
    """Invalid input: empty title/author or a missing book."""


class NotFoundError(LibraryError, LookupError):
    """No catalog entry equals the requested book."""
