"""Dotted identifier resolution, exact or fuzzy."""

from difflib import SequenceMatcher

import structlog

from typedoc_lookup.errors import UnresolvedSymbol
from typedoc_lookup.models import SymbolNode, SymbolPath

log = structlog.get_logger()

# Each name character left outside a matching window costs 1 / LOCATION_DISTANCE,
# so a whole-name match outranks the same text found inside a longer name.
LOCATION_DISTANCE = 100

DEFAULT_THRESHOLD = 0.8


def similarity(query: str, name: str) -> float:
    """Case-insensitive similarity of a query to a declaration name, in [0, 1].

    Scores the whole name and every same-length window of it, so that a query
    close to a prefix or inner run of a slightly longer name still ranks high.
    """
    q = query.lower()
    n = name.lower()
    if not q or not n:
        return 0.0

    best = SequenceMatcher(None, q, n).ratio()
    penalty = (len(n) - len(q)) / LOCATION_DISTANCE
    for start in range(len(n) - len(q) + 1):
        window = n[start : start + len(q)]
        score = SequenceMatcher(None, q, window).ratio() - penalty
        if score > best:
            best = score
    return best


class IdentifierResolver:
    """Resolves ``A.B.C`` into the chain of declarations it names."""

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        self.threshold = threshold

    def resolve(self, start: SymbolNode, identifier: str, exact: bool = False) -> SymbolPath:
        """Resolve a dotted identifier below ``start``.

        Args:
            start: Declaration whose children hold the first segment.
            identifier: Dotted identifier, e.g. ``Worker.getPlayer``.
            exact: Match names literally instead of fuzzily.

        Returns:
            The matched declarations, outermost first. Never includes ``start``.

        Raises:
            UnresolvedSymbol: A segment has no match, or a non-terminal
                segment matched a declaration without children.
        """
        path = self.try_resolve(start, identifier, exact)
        if path is None:
            log.debug("symbol_unresolved", identifier=identifier, exact=exact)
            raise UnresolvedSymbol(identifier)
        return path

    def try_resolve(self, start: SymbolNode, identifier: str, exact: bool = False) -> SymbolPath | None:
        """Like ``resolve``, but returns None instead of raising."""
        base, sep, rest = identifier.partition(".")
        child = self.match_child(start, base, exact)
        if child is None:
            return None
        if not sep:
            return (child,)
        if not child.children:
            return None

        tail = self.try_resolve(child, rest, exact)
        if tail is None:
            return None
        return (child, *tail)

    def match_child(self, parent: SymbolNode, name: str, exact: bool) -> SymbolNode | None:
        """Best child of ``parent`` for one identifier segment."""
        if exact:
            return next((c for c in parent.children if c.name == name), None)

        # Ties keep the first child in declared order.
        best: SymbolNode | None = None
        best_score = self.threshold
        for child in parent.children:
            score = similarity(name, child.name)
            if score >= best_score and (best is None or score > best_score):
                best = child
                best_score = score
        return best
