"""Pagination over the definitions of one symbol."""

from typedoc_lookup.models import NavigationAction, NavigationAffordance, ReflectionKind, SymbolNode

_SIGNATURE_KINDS = frozenset(
    {ReflectionKind.METHOD, ReflectionKind.FUNCTION, ReflectionKind.CONSTRUCTOR}
)


def definitions_for(symbol: SymbolNode) -> list[SymbolNode]:
    """Concrete definitions of a symbol.

    Callables have one definition per call signature (overload). Every other
    kind is its own single definition.
    """
    if symbol.kind in _SIGNATURE_KINDS and symbol.signatures:
        return list(symbol.signatures)
    return [symbol]


class DefinitionSelector:
    """Selected-definition state of one docs session.

    ``selected_index`` always lies in ``[0, len(definitions) - 1]``; moving
    past either end is a no-op.
    """

    def __init__(self, definitions: list[SymbolNode]) -> None:
        if not definitions:
            raise ValueError("a symbol has at least one definition")
        self.definitions = definitions
        self.selected_index = 0

    @classmethod
    def for_symbol(cls, symbol: SymbolNode) -> "DefinitionSelector":
        return cls(definitions_for(symbol))

    @property
    def count(self) -> int:
        return len(self.definitions)

    @property
    def selected(self) -> SymbolNode:
        return self.definitions[self.selected_index]

    @property
    def can_next(self) -> bool:
        return self.selected_index < self.count - 1

    @property
    def can_previous(self) -> bool:
        return self.selected_index > 0

    def next(self) -> bool:
        """Select the next definition. Returns whether the selection moved."""
        if not self.can_next:
            return False
        self.selected_index += 1
        return True

    def previous(self) -> bool:
        """Select the previous definition. Returns whether the selection moved."""
        if not self.can_previous:
            return False
        self.selected_index -= 1
        return True

    def apply(self, action: NavigationAction) -> bool:
        if NavigationAction(action) == NavigationAction.NEXT:
            return self.next()
        return self.previous()

    def affordances(self) -> list[NavigationAffordance]:
        """Previous/next buttons reflecting the current selection."""
        return [
            NavigationAffordance(
                label="Previous Definition",
                action=NavigationAction.PREVIOUS,
                enabled=self.can_previous,
            ),
            NavigationAffordance(
                label="Next Definition",
                action=NavigationAction.NEXT,
                enabled=self.can_next,
            ),
        ]
