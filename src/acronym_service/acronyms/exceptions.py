"""Custom exceptions for acronym lookups."""


class AcronymError(Exception):
    """Base exception for acronym errors."""

    pass


class SourceError(AcronymError):
    """The acronym source document could not be retrieved."""

    pass


class SourceNotFoundError(SourceError):
    """The source page or file does not exist."""

    pass


class SourceFetchError(SourceError):
    """Transport, timeout, server or I/O failure while fetching the source."""

    pass


class FunctionNotRegisteredError(AcronymError):
    """Parser function is unknown or disabled for this session."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Parser function '{name}' is not registered")
        self.name = name
