"""Comment text formatting."""

import re

from typedoc_lookup.models import ReferenceType
from typedoc_lookup.rendering.types import TypeRenderer

# {@link Identifier} or {@link Identifier | display text}
LINK_PATTERN = re.compile(r"\{@link\s+([A-Za-z$_][\w$]*(?:\.[A-Za-z$_][\w$]*)*)(?:\s*\|\s*(.+?))?\s*\}")

# A newline that is not part of a paragraph break.
SOFT_NEWLINE = re.compile(r"(?<!\n)\n(?!\n)")


def format_comment_text(text: str, renderer: TypeRenderer) -> str:
    """Rewrite ``{@link}`` tags as rendered references and unwrap soft line breaks."""

    def _replace(match: re.Match[str]) -> str:
        display = match.group(2).strip() if match.group(2) else None
        return renderer.render(ReferenceType(name=match.group(1)), display_name=display)

    return SOFT_NEWLINE.sub(" ", LINK_PATTERN.sub(_replace, text))
