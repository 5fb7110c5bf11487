"""Sources for the raw acronym JSON document.

A source answers one question: given a page name such as ``Acronyms.json``,
what is its raw text? Three backends are provided:

- InMemorySource: fixed pages held in a dict (tests, embedding)
- FileSource: one file per page in a local directory
- MediaWikiSource: the raw content of a page on a remote wiki

Sources raise SourceNotFoundError / SourceFetchError. Callers that want the
"no acronyms configured" behaviour (the store) catch SourceError themselves.
"""

from abc import ABC, abstractmethod
from pathlib import Path

import httpx

from acronym_service.config import Settings
from acronym_service.logging_config import get_logger

from .exceptions import SourceFetchError, SourceNotFoundError

logger = get_logger(__name__)


class AcronymSource(ABC):
    """Abstract base class for acronym document sources."""

    @abstractmethod
    def fetch(self, name: str) -> str:
        """Return the raw text of the named page.

        Args:
            name: Page name, including the ".json" suffix

        Returns:
            Raw page text (not parsed)

        Raises:
            SourceNotFoundError: If the page does not exist
            SourceFetchError: If the page exists but could not be read
        """
        pass


class InMemorySource(AcronymSource):
    """Source backed by a dict of page name to page text."""

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages: dict[str, str] = dict(pages or {})

    def fetch(self, name: str) -> str:
        try:
            return self.pages[name]
        except KeyError:
            raise SourceNotFoundError(f"No page named {name!r}") from None


class FileSource(AcronymSource):
    """Source reading ``<directory>/<name>`` as UTF-8 text."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def fetch(self, name: str) -> str:
        # Page names map to a single file directly inside the directory
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise SourceNotFoundError(f"Invalid page name {name!r}")

        path = self.directory / name
        if not path.is_file():
            raise SourceNotFoundError(f"File not found: {path}")

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFetchError(f"Unable to read {path}: {e}") from e


class MediaWikiSource(AcronymSource):
    """Source fetching raw page content from a MediaWiki installation.

    Requests ``<index_url>?title=<namespace>:<name>&action=raw``, the same
    page the wiki itself reads its acronym message from. A single attempt is
    made per fetch; failures are reported, not retried.

    Args:
        index_url: URL of the wiki's index.php
        namespace: Namespace holding the page (default "MediaWiki")
        timeout_seconds: HTTP request timeout
        user_agent: User-Agent header for requests
        client: Optional pre-built httpx.Client (used as-is, not closed)
    """

    def __init__(
        self,
        index_url: str,
        namespace: str = "MediaWiki",
        timeout_seconds: int = 10,
        user_agent: str = "AcronymService/0.1 (+acronym lookup)",
        client: httpx.Client | None = None,
    ) -> None:
        self.index_url = index_url
        self.namespace = namespace
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._client = client

    def page_title(self, name: str) -> str:
        """Full page title, with namespace prefix when one is configured."""
        return f"{self.namespace}:{name}" if self.namespace else name

    def fetch(self, name: str) -> str:
        params = {"title": self.page_title(name), "action": "raw"}

        if self._client is not None:
            return self._get(self._client, params)

        with httpx.Client(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        ) as client:
            return self._get(client, params)

    def _get(self, client: httpx.Client, params: dict[str, str]) -> str:
        title = params["title"]
        try:
            response = client.get(self.index_url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise SourceFetchError(f"Timeout fetching {title}: {e}") from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise SourceNotFoundError(f"Page {title} does not exist") from e
            raise SourceFetchError(f"HTTP error {e.response.status_code}: {e}") from e
        except httpx.RequestError as e:
            raise SourceFetchError(f"Request error: {e}") from e

        logger.debug(
            "acronyms.source.fetched",
            title=title,
            size=len(response.content),
        )
        return response.text


def create_source(settings: Settings) -> AcronymSource:
    """Build the configured acronym source.

    Args:
        settings: Application settings

    Returns:
        FileSource or MediaWikiSource, per ``acronym_source_backend``

    Raises:
        ValueError: If the mediawiki backend is selected without an index URL
    """
    if settings.acronym_source_backend == "mediawiki":
        if not settings.mediawiki_index_url:
            raise ValueError(
                "MEDIAWIKI_INDEX_URL must be set when ACRONYM_SOURCE_BACKEND=mediawiki"
            )
        return MediaWikiSource(
            index_url=settings.mediawiki_index_url,
            namespace=settings.mediawiki_namespace,
            timeout_seconds=settings.source_timeout_seconds,
            user_agent=settings.source_user_agent,
        )
    return FileSource(settings.acronym_source_dir)
