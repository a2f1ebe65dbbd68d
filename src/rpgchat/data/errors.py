"""Exceptions raised while loading content tables."""


class DataError(Exception):
    """Base exception for the content-table layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when a definition entry has the wrong shape or field types."""


class DataReferenceError(DataError):
    """Raised when a definition points at an entry another table lacks."""
