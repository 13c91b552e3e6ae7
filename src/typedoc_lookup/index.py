"""Identity-to-path lookup over the API model."""

from collections.abc import Mapping
from types import MappingProxyType

import structlog

from typedoc_lookup.models import SymbolNode, SymbolPath

log = structlog.get_logger()

# Child-bearing fields walked when indexing, in walk order.
CHILD_FIELDS = ("parameters", "children", "type_parameters", "signatures")


class SymbolIndex:
    """Immutable map from declaration id to the full path of that declaration.

    Paths exclude the model root. Only descendants with a non-zero id are
    recorded, and only those are descended into.
    """

    def __init__(self, paths: Mapping[int, SymbolPath]) -> None:
        self._paths: Mapping[int, SymbolPath] = MappingProxyType(dict(paths))

    @classmethod
    def build(cls, root: SymbolNode) -> "SymbolIndex":
        """Walk the model once and record every identified descendant."""
        paths: dict[int, SymbolPath] = {}
        cls._walk(root, (), paths)
        log.debug("symbol_index_built", symbols_count=len(paths))
        return cls(paths)

    @classmethod
    def _walk(cls, node: SymbolNode, parents: SymbolPath, paths: dict[int, SymbolPath]) -> None:
        for field in CHILD_FIELDS:
            for child in getattr(node, field):
                if not child.id:
                    continue
                path = (*parents, child)
                paths[child.id] = path
                cls._walk(child, path, paths)

    def lookup_by_id(self, symbol_id: int | None) -> SymbolPath | None:
        """Path of the declaration with this id, or None."""
        if not symbol_id:
            return None
        return self._paths.get(symbol_id)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, symbol_id: object) -> bool:
        return symbol_id in self._paths
