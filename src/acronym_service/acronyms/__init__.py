"""Acronym lookup core.

Provides the per-parse acronym store, the two parser functions and the
sources the acronym JSON document is read from.

Usage:
    from acronym_service.acronyms import AcronymExtension, FileSource

    extension = AcronymExtension(FileSource("./data/messages"))
    session = extension.new_session()

    session.call("acronym", ["btw"])  # "by the way"
    session.call("acronymexists", ["xyz", "", "", "no"])  # "no"
"""

from .exceptions import (
    AcronymError,
    FunctionNotRegisteredError,
    SourceError,
    SourceFetchError,
    SourceNotFoundError,
)
from .functions import PARSER_FUNCTIONS, ParserArguments, acronym, acronymexists
from .hooks import AcronymExtension, ParserSession
from .sources import AcronymSource, FileSource, InMemorySource, MediaWikiSource, create_source
from .store import (
    DEFAULT_ACRONYM_SRC,
    DEFAULT_CATEGORY,
    AcronymConfig,
    AcronymStore,
    sanitize,
)

__all__ = [
    # Store
    "AcronymConfig",
    "AcronymStore",
    "DEFAULT_ACRONYM_SRC",
    "DEFAULT_CATEGORY",
    "sanitize",
    # Parser functions
    "PARSER_FUNCTIONS",
    "ParserArguments",
    "acronym",
    "acronymexists",
    # Sessions
    "AcronymExtension",
    "ParserSession",
    # Sources
    "AcronymSource",
    "FileSource",
    "InMemorySource",
    "MediaWikiSource",
    "create_source",
    # Exceptions
    "AcronymError",
    "FunctionNotRegisteredError",
    "SourceError",
    "SourceFetchError",
    "SourceNotFoundError",
]
