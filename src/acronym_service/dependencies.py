"""Shared FastAPI dependencies.

The AcronymExtension is built once per process from settings. It holds no
per-parse state, so sharing it between requests is safe; every request
creates its own ParserSession (and therefore its own store) from it.

Tests replace it through ``app.dependency_overrides[get_extension]``.
"""

from functools import lru_cache

from acronym_service.acronyms import AcronymConfig, AcronymExtension, create_source
from acronym_service.config import settings


@lru_cache(maxsize=1)
def get_extension() -> AcronymExtension:
    """Get the process-wide AcronymExtension built from settings."""
    return AcronymExtension(
        source=create_source(settings),
        config=AcronymConfig.from_settings(settings),
    )
