"""Lazily loaded store of acronyms and their properties.

One AcronymStore belongs to exactly one parse session. It starts empty and
uninitialised; the first call to update() fetches and parses the JSON
document once, and the data then stays fixed for the life of the instance.
A new parse gets a new store rather than a refreshed one.

Source document format:

    {
      "acronyms": {"<category>": {"<acronym>": "<normalised form>", ...}, ...},
      "properties": {"<normalised form>": {"<property>": "<value>", ...}, ...}
    }

Both top-level keys are optional. A missing or malformed document leaves the
store empty, which is the normal "no acronyms configured" state.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from acronym_service.config import Settings
from acronym_service.logging_config import get_logger

from .exceptions import SourceError
from .sources import AcronymSource

logger = get_logger(__name__)

DEFAULT_ACRONYM_SRC = "Acronyms"
DEFAULT_CATEGORY = "all"


def sanitize(value: str) -> str:
    """Trim surrounding whitespace and lower-case (Unicode-aware).

    Applied to category names, acronym keys, normalised forms and property
    names. Never applied to property values.
    """
    return value.strip().lower()


@dataclass(frozen=True)
class AcronymConfig:
    """Extension configuration, passed explicitly to stores and sessions.

    Attributes:
        disabled: Register no parser functions at all
        disabled_functions: Parser function names that are not registered
        default_category: Category used when a lookup names none ("" = "all")
        source_name: Page holding the JSON document, without ".json"
                     ("" = "Acronyms")
    """

    disabled: bool = False
    disabled_functions: frozenset[str] = field(default_factory=frozenset)
    default_category: str = ""
    source_name: str = ""

    @property
    def category(self) -> str:
        """Resolved default category."""
        return self.default_category or DEFAULT_CATEGORY

    @property
    def source_page(self) -> str:
        """Resolved source page name, suffixed with ".json"."""
        return f"{self.source_name or DEFAULT_ACRONYM_SRC}.json"

    @classmethod
    def from_settings(cls, settings: Settings) -> "AcronymConfig":
        return cls(
            disabled=settings.acronym_disabled,
            disabled_functions=settings.acronym_disabled_functions_set,
            default_category=sanitize(settings.acronym_default_category),
            source_name=settings.acronym_source.strip(),
        )


def _as_text(value: Any) -> str | None:
    """Coerce a JSON scalar to text; None for anything that is not a string or number."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class AcronymStore:
    """Per-parse cache of acronym mappings and acronym properties.

    Lookup methods expect already-sanitised arguments; only the stored data is
    sanitised here. Lookups never raise: a miss is False or None.

    Example:
        >>> store = AcronymStore(InMemorySource({"Acronyms.json": doc}))
        >>> store.update()
        >>> store.normalize("btw")
        'by the way'
    """

    def __init__(self, source: AcronymSource, config: AcronymConfig | None = None) -> None:
        self.source = source
        self.config = config or AcronymConfig()
        self.initialized = False
        self.acronyms: dict[str, dict[str, str]] = {}
        self.properties: dict[str, dict[str, str]] = {}

    @property
    def stats(self) -> dict[str, Any]:
        """Counts describing the loaded data."""
        return {
            "initialized": self.initialized,
            "categories": len(self.acronyms),
            "acronyms": sum(len(entries) for entries in self.acronyms.values()),
            "properties": len(self.properties),
        }

    def _resolve_category(self, category: str | None) -> str:
        return category if category else self.config.category

    def exists(self, acronym: str, category: str | None = None) -> bool:
        """Check whether the acronym exists in the category.

        Args:
            acronym: Sanitised acronym
            category: Sanitised category; empty or None means the default

        Returns:
            True if the category holds the acronym with a non-empty value
        """
        entries = self.acronyms.get(self._resolve_category(category))
        return bool(entries) and bool(entries.get(acronym))

    def normalize(self, acronym: str, category: str | None = None) -> str | None:
        """Return the normalised form of the acronym, or None if it does not exist."""
        category = self._resolve_category(category)
        if not self.exists(acronym, category):
            return None
        return self.acronyms[category][acronym]

    def has_property(self, acronym: str, prop: str) -> bool:
        """Check whether a normalised acronym has a non-empty property value."""
        props = self.properties.get(acronym)
        return bool(props) and bool(props.get(prop))

    def get_property(self, acronym: str, prop: str) -> str | None:
        """Return a property of a normalised acronym, or None."""
        if not self.has_property(acronym, prop):
            return None
        return self.properties[acronym][prop]

    def update(self) -> None:
        """Load the acronym data, once.

        The initialised flag is set before loading, so a failed or empty load
        is never retried by this instance.
        """
        if self.initialized:
            return

        self.initialized = True
        self.acronyms = {}
        self.properties = {}

        page = self.config.source_page
        try:
            raw = self.source.fetch(page)
        except SourceError as e:
            logger.warning("acronyms.store.source_unavailable", page=page, error=str(e))
            return

        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # RecursionError: nesting deeper than the decoder can follow
            logger.warning("acronyms.store.invalid_json", page=page, error=str(e))
            return

        if not parsed or not isinstance(parsed, dict):
            logger.info("acronyms.store.empty", page=page)
            return

        acronyms = parsed.get("acronyms")
        if acronyms and isinstance(acronyms, dict):
            self._load_acronyms(acronyms)

        properties = parsed.get("properties")
        if properties and isinstance(properties, dict):
            self._load_properties(properties)

        logger.info("acronyms.store.loaded", page=page, **self.stats)

    def _load_acronyms(self, data: dict[str, Any]) -> None:
        for category, content in data.items():
            san_cat = sanitize(category)
            if not san_cat or not isinstance(content, dict):
                continue
            entries = self.acronyms.setdefault(san_cat, {})
            for key, value in content.items():
                text = _as_text(value)
                if text is None:
                    continue
                san_key = sanitize(key)
                san_val = sanitize(text)
                if not san_key or not san_val:
                    continue
                entries[san_key] = san_val

    def _load_properties(self, data: dict[str, Any]) -> None:
        for key, content in data.items():
            san_key = sanitize(key)
            if not san_key or not isinstance(content, dict):
                continue
            props = self.properties.setdefault(san_key, {})
            for prop_key, prop_val in content.items():
                text = _as_text(prop_val)
                if text is None:
                    continue
                # Values are stored verbatim, empty ones included
                props[sanitize(prop_key)] = text
