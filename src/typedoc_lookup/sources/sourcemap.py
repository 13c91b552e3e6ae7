"""Original-position lookups over one source map.

Wraps the ``sourcemap`` package's decoded index. Lines are 1-based and
columns 0-based on both sides, matching what the mozilla ``source-map``
consumer reports.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

import sourcemap
from sourcemap.exceptions import SourceMapDecodeError

if TYPE_CHECKING:
    from sourcemap.objects import SourceMapIndex

# The decoder trusts the document's shape; malformed fields surface as these.
_MALFORMED = (SourceMapDecodeError, ValueError, LookupError, TypeError, AttributeError)


class SourceMapError(ValueError):
    """The document is not a decodable source map."""


@dataclass(frozen=True, slots=True)
class OriginalPosition:
    source: str
    line: int
    column: int
    name: str | None = None


class SourceMapConsumer:
    """Lookup table over one parsed source map.

    Use as a context manager; the decoded index is released on exit and
    lookups afterwards raise.
    """

    def __init__(self, index: "SourceMapIndex") -> None:
        self._index: "SourceMapIndex | None" = index

    @classmethod
    def from_json(cls, text: str) -> Self:
        """Decode a source map document.

        Raises:
            SourceMapError: The text is not JSON, or not a well-formed map.
        """
        try:
            index = sourcemap.loads(text)
        except _MALFORMED as e:
            raise SourceMapError(f"undecodable source map ({type(e).__name__}: {e})") from e
        return cls(index)

    @property
    def closed(self) -> bool:
        return self._index is None

    def close(self) -> None:
        self._index = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def original_position_for(self, line: int, column: int) -> OriginalPosition | None:
        """Original position of a generated one.

        Picks the closest mapping at or before ``column`` on the same
        generated line. Returns None when there is none, or when that mapping
        carries no original position.
        """
        if self._index is None:
            raise SourceMapError("source map consumer is closed")
        if line < 1 or column < 0:
            return None

        try:
            token = self._index.lookup(line - 1, column)
        except LookupError:
            return None

        # The index falls back across lines; only the requested line counts.
        if token.dst_line != line - 1 or token.src is None:
            return None
        return OriginalPosition(
            source=token.src,
            line=token.src_line + 1,
            column=token.src_col,
            name=token.name or None,
        )
