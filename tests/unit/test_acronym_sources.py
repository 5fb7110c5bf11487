"""Unit tests for acronym document sources."""

from pathlib import Path

import httpx
import pytest

from acronym_service.acronyms import (
    FileSource,
    InMemorySource,
    MediaWikiSource,
    SourceFetchError,
    SourceNotFoundError,
    create_source,
)
from acronym_service.config import Settings


class TestInMemorySource:
    def test_fetch(self) -> None:
        assert InMemorySource({"Acronyms.json": "{}"}).fetch("Acronyms.json") == "{}"

    def test_missing(self) -> None:
        with pytest.raises(SourceNotFoundError):
            InMemorySource().fetch("Acronyms.json")


class TestFileSource:
    def test_fetch(self, tmp_path: Path) -> None:
        (tmp_path / "Acronyms.json").write_text('{"acronyms": {}}', encoding="utf-8")

        assert FileSource(tmp_path).fetch("Acronyms.json") == '{"acronyms": {}}'

    def test_unicode_content(self, tmp_path: Path) -> None:
        (tmp_path / "Acronyms.json").write_text('{"é": "ü"}', encoding="utf-8")

        assert FileSource(str(tmp_path)).fetch("Acronyms.json") == '{"é": "ü"}'

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError):
            FileSource(tmp_path).fetch("Acronyms.json")

    @pytest.mark.parametrize("name", ["", "..", "../Acronyms.json", "sub/Acronyms.json", "a\\b"])
    def test_rejects_paths(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(SourceNotFoundError):
            FileSource(tmp_path).fetch(name)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        (tmp_path / "Acronyms.json").write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(SourceFetchError):
            FileSource(tmp_path).fetch("Acronyms.json")


def make_wiki_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestMediaWikiSource:
    """Tests for MediaWikiSource using httpx.MockTransport."""

    def test_fetch_raw_page(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"acronyms": {}}')

        source = MediaWikiSource(
            "https://wiki.example.org/index.php",
            client=make_wiki_client(handler),
        )

        assert source.fetch("Acronyms.json") == '{"acronyms": {}}'
        assert seen[0].url.params["title"] == "MediaWiki:Acronyms.json"
        assert seen[0].url.params["action"] == "raw"
        assert seen[0].url.path == "/index.php"

    def test_page_title_without_namespace(self) -> None:
        source = MediaWikiSource("https://wiki.example.org/index.php", namespace="")

        assert source.page_title("Acronyms.json") == "Acronyms.json"

    def test_not_found(self) -> None:
        source = MediaWikiSource(
            "https://wiki.example.org/index.php",
            client=make_wiki_client(lambda request: httpx.Response(404)),
        )

        with pytest.raises(SourceNotFoundError):
            source.fetch("Acronyms.json")

    def test_server_error(self) -> None:
        source = MediaWikiSource(
            "https://wiki.example.org/index.php",
            client=make_wiki_client(lambda request: httpx.Response(503)),
        )

        with pytest.raises(SourceFetchError):
            source.fetch("Acronyms.json")

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        source = MediaWikiSource(
            "https://wiki.example.org/index.php",
            client=make_wiki_client(handler),
        )

        with pytest.raises(SourceFetchError, match="Timeout"):
            source.fetch("Acronyms.json")

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        source = MediaWikiSource(
            "https://wiki.example.org/index.php",
            client=make_wiki_client(handler),
        )

        with pytest.raises(SourceFetchError, match="Request error"):
            source.fetch("Acronyms.json")


class TestCreateSource:
    def test_file_backend_is_default(self, tmp_path: Path) -> None:
        source = create_source(Settings(acronym_source_dir=str(tmp_path)))

        assert isinstance(source, FileSource)
        assert source.directory == tmp_path

    def test_mediawiki_backend(self) -> None:
        source = create_source(
            Settings(
                acronym_source_backend="mediawiki",
                mediawiki_index_url="https://wiki.example.org/index.php",
                mediawiki_namespace="Project",
                source_timeout_seconds=3,
            )
        )

        assert isinstance(source, MediaWikiSource)
        assert source.page_title("Acronyms.json") == "Project:Acronyms.json"
        assert source.timeout_seconds == 3

    def test_mediawiki_backend_requires_url(self) -> None:
        with pytest.raises(ValueError, match="MEDIAWIKI_INDEX_URL"):
            create_source(
                Settings(acronym_source_backend="mediawiki", mediawiki_index_url=None)
            )
