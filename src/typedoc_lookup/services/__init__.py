"""Query orchestration services."""

from typedoc_lookup.services.docs_service import DocsService, DocsSession
from typedoc_lookup.services.presentation import PresentationBuilder

__all__ = ["DocsService", "DocsSession", "PresentationBuilder"]
