"""Source location resolution."""

from typedoc_lookup.sources.locator import SourceLocator, VendoredPath
from typedoc_lookup.sources.sourcemap import OriginalPosition, SourceMapConsumer, SourceMapError

__all__ = [
    "OriginalPosition",
    "SourceLocator",
    "SourceMapConsumer",
    "SourceMapError",
    "VendoredPath",
]
