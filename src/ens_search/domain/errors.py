"""Errors raised by the name search core."""


class EnsSearchError(Exception):
    """Base error for this package."""


class ConfigError(EnsSearchError):
    """Raised when required environment configuration is missing or invalid."""

    def __init__(self, variable: str, message: str) -> None:
        super().__init__(message)
        self.variable = variable


class SourceError(EnsSearchError):
    """Raised when an input source cannot be opened or read."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source


class OracleError(EnsSearchError):
    """Raised when the availability query for a name fails."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
