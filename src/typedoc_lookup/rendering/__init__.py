"""Markdown rendering of types, declarations and comments."""

from typedoc_lookup.rendering.comments import format_comment_text
from typedoc_lookup.rendering.declarations import DeclarationRenderer
from typedoc_lookup.rendering.links import INTRINSIC_LINKS, docs_link
from typedoc_lookup.rendering.types import PLACEHOLDER, TypeRenderer

__all__ = [
    "INTRINSIC_LINKS",
    "PLACEHOLDER",
    "DeclarationRenderer",
    "TypeRenderer",
    "docs_link",
    "format_comment_text",
]
