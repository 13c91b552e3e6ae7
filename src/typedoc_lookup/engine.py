"""The docs engine: one loaded API model and everything derived from it.

Built once, synchronously, before any query is served. Read-only afterwards;
query handlers receive it by reference.
"""

from __future__ import annotations

import time
from pathlib import Path

import structlog
from pydantic import ValidationError

from typedoc_lookup.config import Settings
from typedoc_lookup.errors import ModelLoadError
from typedoc_lookup.index import SymbolIndex
from typedoc_lookup.models import SymbolNode
from typedoc_lookup.profiling import profiled
from typedoc_lookup.rendering import DeclarationRenderer, TypeRenderer
from typedoc_lookup.resolver import IdentifierResolver
from typedoc_lookup.sources import SourceLocator

log = structlog.get_logger()


def load_api_model(path: Path) -> SymbolNode:
    """Read and validate a TypeDoc JSON API model.

    Raises:
        ModelLoadError: The file is missing, unreadable or not a valid model.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ModelLoadError(f"Cannot read API model {path}: {e}") from e

    try:
        return SymbolNode.model_validate_json(data)
    except ValidationError as e:
        raise ModelLoadError(f"Invalid API model {path}: {e}") from e


class DocsEngine:
    """Owns the API model, its symbol index and the renderers built on them."""

    def __init__(self, root: SymbolNode, settings: Settings) -> None:
        self.root = root
        self.settings = settings
        self.index = SymbolIndex.build(root)
        self.resolver = IdentifierResolver(threshold=settings.fuzzy_threshold)
        self.types = TypeRenderer(
            root=root,
            index=self.index,
            resolver=self.resolver,
            docs_base_url=settings.docs_base_url,
            max_members=settings.max_union_members,
        )
        self.declarations = DeclarationRenderer(self.types)
        self.locator = SourceLocator.from_settings(settings)

    @classmethod
    def load(cls, settings: Settings) -> DocsEngine:
        """Load the API model named by the settings and build the engine.

        Raises:
            ModelLoadError: Loading or indexing failed. The engine must not
                serve queries in that case.
        """
        t0 = time.perf_counter()
        with profiled("engine_load"):
            root = load_api_model(settings.docs_path)
            try:
                engine = cls(root, settings)
            except RecursionError as e:
                raise ModelLoadError(f"API model {settings.docs_path} is nested too deeply") from e

        log.info(
            "api_model_loaded",
            path=str(settings.docs_path),
            symbols_count=len(engine.index),
            duration_ms=round((time.perf_counter() - t0) * 1000, 1),
        )
        return engine
