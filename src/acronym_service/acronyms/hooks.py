"""Parser lifecycle glue: function registration and per-parse sessions.

The host creates one ParserSession per parse (first-call init) and calls
clear_state() between pages. Each session owns exactly one AcronymStore, so
the acronym document is loaded at most once per parse and a new parse always
sees the latest version of it.
"""

from collections.abc import Sequence

from acronym_service.logging_config import get_logger

from .exceptions import FunctionNotRegisteredError
from .functions import PARSER_FUNCTIONS, Expander, ParserArguments, ParserFunction
from .sources import AcronymSource
from .store import AcronymConfig, AcronymStore

logger = get_logger(__name__)


class AcronymExtension:
    """Immutable extension setup shared by all parse sessions.

    Args:
        source: Source of the acronym JSON document
        config: Extension configuration (defaults when None)
    """

    def __init__(self, source: AcronymSource, config: AcronymConfig | None = None) -> None:
        self.source = source
        self.config = config or AcronymConfig()

    @property
    def enabled_functions(self) -> list[str]:
        """Names of the parser functions that get registered."""
        if self.config.disabled:
            return []
        return [
            name for name in PARSER_FUNCTIONS if name not in self.config.disabled_functions
        ]

    def create_store(self) -> AcronymStore:
        return AcronymStore(self.source, self.config)

    def new_session(self) -> "ParserSession":
        return ParserSession(self)


class ParserSession:
    """State for a single parse: one store and the registered functions."""

    def __init__(self, extension: AcronymExtension) -> None:
        self.extension = extension
        self.functions: dict[str, ParserFunction] = {
            name: PARSER_FUNCTIONS[name] for name in extension.enabled_functions
        }
        self.store = extension.create_store()

    def clear_state(self) -> None:
        """Start over with a fresh, unloaded store."""
        self.store = self.extension.create_store()

    def call(
        self,
        name: str,
        tokens: Sequence[str],
        expand: Expander | None = None,
    ) -> str:
        """Invoke a registered parser function.

        Args:
            name: Parser function name ("acronym" or "acronymexists")
            tokens: Raw argument tokens
            expand: Host expansion callback for the tokens

        Returns:
            The function's output text

        Raises:
            FunctionNotRegisteredError: If the function is unknown or disabled
        """
        handler = self.functions.get(name.strip().lower())
        if handler is None:
            logger.debug("acronyms.session.not_registered", function=name)
            raise FunctionNotRegisteredError(name)
        return handler(self.store, ParserArguments(tokens, expand))
