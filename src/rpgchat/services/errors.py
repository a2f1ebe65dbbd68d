"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a character, item or enemy cannot be built from the content tables."""


class SaveLoadError(Exception):
    """Raised when a session snapshot cannot be encoded or decoded."""
