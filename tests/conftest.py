"""Pytest configuration and shared fixtures."""

import json
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from acronym_service.acronyms import (
    AcronymConfig,
    AcronymExtension,
    AcronymStore,
    InMemorySource,
)
from acronym_service.dependencies import get_extension
from acronym_service.main import app

# Load .env.test at the very start of test suite (before any fixtures run)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


ACRONYM_DOC: dict[str, Any] = {
    "acronyms": {
        "all": {
            "btw": "by the way",
            " FYI ": "For Your Information",
            "imo": "in my opinion",
        },
        "Chat": {
            "brb": "be right back",
            "btw": "between",
        },
    },
    "properties": {
        "by the way": {
            "tone": "casual",
            " Link ": "  Glossary#By the way ",
            "empty": "",
        },
        "be right back": {
            "tone": "informal",
        },
    },
}


def make_source(document: Any = None, raw: str | None = None) -> InMemorySource:
    """Build a source holding Acronyms.json from a document or raw text."""
    if raw is None:
        raw = json.dumps(ACRONYM_DOC if document is None else document)
    return InMemorySource({"Acronyms.json": raw})


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def source() -> InMemorySource:
    """Source holding the standard test document."""
    return make_source()


@pytest.fixture
def store(source: InMemorySource) -> AcronymStore:
    """Loaded store over the standard test document."""
    store = AcronymStore(source)
    store.update()
    return store


@pytest.fixture
def extension(source: InMemorySource) -> AcronymExtension:
    """Extension with default configuration over the standard test document."""
    return AcronymExtension(source, AcronymConfig())


# ============================================================================
# HTTP Client Fixtures
# ============================================================================


@pytest.fixture
def client(extension: AcronymExtension) -> Generator[TestClient, None, None]:
    """Synchronous test client with the test extension injected."""
    app.dependency_overrides[get_extension] = lambda: extension
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_extension, None)


@pytest.fixture
async def async_client(extension: AcronymExtension) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with the test extension injected."""
    app.dependency_overrides[get_extension] = lambda: extension
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_extension, None)


@pytest.fixture
def make_store() -> Any:
    """Factory for unloaded stores over an arbitrary document or raw text."""

    def _make(
        document: Any = None,
        raw: str | None = None,
        config: AcronymConfig | None = None,
    ) -> AcronymStore:
        return AcronymStore(make_source(document, raw), config)

    return _make
