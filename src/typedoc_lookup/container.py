"""Dependency injection container.

Owns the engine (API model + symbol index) and the docs service whose
sessions must outlive a single tool call. Call configure() to override
default settings (e.g. in tests).
"""

from __future__ import annotations

from functools import cached_property

import structlog

from typedoc_lookup.config import Settings, get_settings
from typedoc_lookup.engine import DocsEngine
from typedoc_lookup.services.docs_service import DocsService

log = structlog.get_logger()


class Container:
    """Builds the engine once and shares it with every request.

    Caching strategy:
    - Engine: process-scoped (loaded and indexed once, read-only)
    - Docs service: process-scoped (holds the live sessions)
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @cached_property
    def engine(self) -> DocsEngine:
        """Load the API model and build the engine on first access."""
        log.info("loading_api_model", path=str(self.settings.docs_path))
        return DocsEngine.load(self.settings)

    @cached_property
    def docs_service(self) -> DocsService:
        return DocsService(self.engine, max_sessions=self.settings.max_sessions)


# --- Global container lifecycle ---

_container: Container | None = None


def configure(settings: Settings) -> Container:
    """Initialize the global container with explicit settings (e.g. tests)."""
    global _container
    _container = Container(settings)
    return _container


def get_container() -> Container:
    """Get the global container, auto-configuring with default Settings if needed."""
    global _container
    if _container is None:
        _container = Container(get_settings())
    return _container
