"""Handlers for the ``acronym`` and ``acronymexists`` parser functions.

Usage in wikitext:

    {{#acronym: [category |] acronym [| property [| not found]]}}
    {{#acronymexists: [category |] acronym [| found [| not found]]}}

When the second argument is empty, the first argument is the acronym and the
default category is used. Handlers return plain strings; the host is
responsible for any further processing of the output.
"""

from collections.abc import Callable, Sequence

from .store import AcronymStore, sanitize

Expander = Callable[[str], str]


class ParserArguments:
    """Ordered parser function arguments with on-demand expansion.

    Each raw token is expanded through the host's ``expand`` callback only
    when its value is needed, and at most once per position.

    Args:
        tokens: Raw (unexpanded) argument tokens, in call order
        expand: Host expansion callback; identity when omitted
    """

    def __init__(self, tokens: Sequence[str], expand: Expander | None = None) -> None:
        self._tokens = list(tokens)
        self._expand = expand
        self._expanded: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._tokens)

    def has(self, index: int) -> bool:
        """True if the position was supplied with a non-empty raw token."""
        return 0 <= index < len(self._tokens) and bool(self._tokens[index])

    def expand(self, index: int) -> str:
        """Expanded value of a position; "" for positions that were not supplied."""
        if not 0 <= index < len(self._tokens):
            return ""
        if index not in self._expanded:
            token = self._tokens[index]
            self._expanded[index] = self._expand(token) if self._expand else token
        return self._expanded[index]

    def expanded_positions(self) -> list[int]:
        """Positions expanded so far, in ascending order."""
        return sorted(self._expanded)

    def category_and_acronym(self) -> tuple[str, str]:
        """Apply the argument shift: with no second argument, the first is the acronym."""
        if not self.has(1):
            return "", self.expand(0)
        return self.expand(0), self.expand(1)

    def fallback(self, index: int, default: str = "") -> str:
        """Expanded position if supplied, else the default."""
        return self.expand(index) if self.has(index) else default


def acronym(store: AcronymStore, args: ParserArguments) -> str:
    """Resolve an acronym to its normalised form, or to one of its properties.

    Arguments: [category,] acronym, property, not-found text.
    """
    category, name = args.category_and_acronym()
    prop = args.expand(2) if args.has(2) else ""

    name = sanitize(name)
    category = sanitize(category)
    prop = sanitize(prop)

    store.update()
    normalized = store.normalize(name, category)

    if not normalized:
        return args.fallback(3)

    if not prop:
        return normalized

    result = store.get_property(normalized, prop)
    if result is not None:
        return result
    return args.fallback(3)


def acronymexists(store: AcronymStore, args: ParserArguments) -> str:
    """Report whether an acronym exists.

    Arguments: [category,] acronym, found text (default "yes"), not-found text.
    """
    category, name = args.category_and_acronym()

    name = sanitize(name)
    category = sanitize(category)

    store.update()

    if store.exists(name, category):
        return args.fallback(2, "yes")
    return args.fallback(3)


ParserFunction = Callable[[AcronymStore, ParserArguments], str]

PARSER_FUNCTIONS: dict[str, ParserFunction] = {
    "acronym": acronym,
    "acronymexists": acronymexists,
}
