"""Recursive rendering of type expressions to Markdown.

Output uses inline code spans for type text and Markdown links for anything
that can be cross-referenced, e.g.::

    [`Worker`](https://.../classes/Worker)`<`[`string`](https://...)`>`

Rendering is total: type expressions this package does not understand render
as the placeholder `` `?` `` rather than raising.
"""

from collections.abc import Callable

from typedoc_lookup.index import SymbolIndex
from typedoc_lookup.models import (
    ArrayType,
    IndexedAccessType,
    IntersectionType,
    IntrinsicType,
    LiteralType,
    PredicateType,
    QueryType,
    ReferenceType,
    ReflectionKind,
    ReflectionType,
    SymbolNode,
    SymbolPath,
    TupleType,
    TypeExpr,
    UnionType,
)
from typedoc_lookup.rendering.links import INTRINSIC_LINKS, docs_link
from typedoc_lookup.resolver import IdentifierResolver

PLACEHOLDER = "`?`"
DEFAULT_MAX_MEMBERS = 10

# A strategy turns a reference into the path it points at, or None.
ResolutionStrategy = Callable[[ReferenceType], SymbolPath | None]


class TypeRenderer:
    """Renders type expressions against one API model.

    Holds only read-only collaborators, so every call is pure: the same type
    expression always renders to the same text.
    """

    def __init__(
        self,
        root: SymbolNode,
        index: SymbolIndex,
        resolver: IdentifierResolver,
        docs_base_url: str,
        max_members: int = DEFAULT_MAX_MEMBERS,
    ) -> None:
        self.root = root
        self.index = index
        self.resolver = resolver
        self.docs_base_url = docs_base_url
        self.max_members = max_members
        self.strategies: tuple[ResolutionStrategy, ...] = (
            self._resolve_by_id,
            self._resolve_by_name,
        )
        self._handlers: dict[type, Callable[[TypeExpr, bool, str | None], str]] = {
            ReferenceType: self._render_reference,
            IntrinsicType: self._render_intrinsic,
            LiteralType: self._render_literal,
            UnionType: self._render_union,
            IntersectionType: self._render_intersection,
            QueryType: self._render_query,
            PredicateType: self._render_predicate,
            ReflectionType: self._render_reflection_type,
            IndexedAccessType: self._render_indexed_access,
            ArrayType: self._render_array,
            TupleType: self._render_tuple,
        }

    def render(
        self,
        expr: TypeExpr | None,
        is_return: bool = False,
        display_name: str | None = None,
    ) -> str:
        """Render a type expression.

        Args:
            expr: The type expression. None renders as the placeholder.
            is_return: Whether the expression is a return type.
            display_name: Text to show instead of the referenced name.

        Returns:
            Markdown text.
        """
        handler = self._handlers.get(type(expr))
        if handler is None:
            return PLACEHOLDER
        return handler(expr, is_return, display_name)

    def resolve_reference(self, ref: ReferenceType) -> SymbolPath | None:
        """Path a reference points at; the first strategy that finds one wins."""
        for strategy in self.strategies:
            path = strategy(ref)
            if path is not None:
                return path
        return None

    def _resolve_by_id(self, ref: ReferenceType) -> SymbolPath | None:
        return self.index.lookup_by_id(ref.id)

    def _resolve_by_name(self, ref: ReferenceType) -> SymbolPath | None:
        return self.resolver.try_resolve(self.root, ref.name, exact=True)

    # --- Variants ---

    def _render_reference(self, expr: ReferenceType, is_return: bool, display_name: str | None) -> str:
        if expr.type_arguments:
            out = self.render(expr.model_copy(update={"type_arguments": None}), is_return, display_name)
            out += "`<`"
            out += "`, `".join(self.render(arg, is_return) for arg in expr.type_arguments)
            out += "`>`"
            return out

        path = self.resolve_reference(expr)
        if path is None:
            return self.render(IntrinsicType(name=expr.name), is_return, display_name)

        shown = display_name or expr.name
        link = docs_link(path, self.docs_base_url)
        if link is None:
            return f"`{shown}`"
        return f"[`{shown}`]({link})"

    def _render_intrinsic(self, expr: IntrinsicType, is_return: bool, display_name: str | None) -> str:
        shown = display_name or expr.name
        link = INTRINSIC_LINKS.get(expr.name)
        if link is None:
            return f"`{shown}`"
        return f"[`{shown}`]({link})"

    def _render_literal(self, expr: LiteralType, is_return: bool, display_name: str | None) -> str:
        value = expr.value
        if isinstance(value, str):
            return f'`"{value}"`'
        return f"`{_js_literal(value)}`"

    def _render_union(self, expr: UnionType, is_return: bool, display_name: str | None) -> str:
        return self._render_members(expr.types, "|", is_return)

    def _render_intersection(self, expr: IntersectionType, is_return: bool, display_name: str | None) -> str:
        return self._render_members(expr.types, "&", is_return)

    def _render_members(self, members: list[TypeExpr], separator: str, is_return: bool) -> str:
        shown = members[: self.max_members]
        out = f"`{separator}`".join(self.render(m, is_return) for m in shown)
        if len(members) > self.max_members:
            out += f"`{separator} ...`"
        return out

    def _render_query(self, expr: QueryType, is_return: bool, display_name: str | None) -> str:
        return "`typeof `" + self.render(expr.query_type, is_return)

    def _render_predicate(self, expr: PredicateType, is_return: bool, display_name: str | None) -> str:
        if is_return:
            return self.render(IntrinsicType(name="boolean"), is_return)
        if expr.target_type is None:
            return f"`asserts {expr.name}`"
        prefix = "asserts " if expr.asserts else ""
        return f"`{prefix}{expr.name} is `" + self.render(expr.target_type, is_return)

    def _render_reflection_type(self, expr: ReflectionType, is_return: bool, display_name: str | None) -> str:
        if expr.declaration is None:
            return PLACEHOLDER
        return self.render_reflection(expr.declaration, is_return)

    def _render_indexed_access(self, expr: IndexedAccessType, is_return: bool, display_name: str | None) -> str:
        return (
            self.render(expr.object_type, is_return)
            + "`[`"
            + self.render(expr.index_type, is_return)
            + "`]`"
        )

    def _render_array(self, expr: ArrayType, is_return: bool, display_name: str | None) -> str:
        return self.render(expr.element_type, is_return) + "`[]`"

    def _render_tuple(self, expr: TupleType, is_return: bool, display_name: str | None) -> str:
        return "`[`" + "`, `".join(self.render(e, is_return) for e in expr.elements) + "`]`"

    # --- Anonymous declarations ---

    def render_reflection(self, declaration: SymbolNode, is_return: bool = False) -> str:
        """Render an inline declaration: a type literal or a call signature."""
        match declaration.kind:
            case ReflectionKind.TYPE_LITERAL if declaration.signatures:
                return self.render_reflection(declaration.signatures[0], is_return)
            case ReflectionKind.TYPE_LITERAL:
                return self._render_object_literal(declaration, is_return)
            case ReflectionKind.CALL_SIGNATURE:
                out = "`("
                if declaration.parameters:
                    out += "`, ".join(
                        f"{p.name}: `" + self.render(p.type, is_return) for p in declaration.parameters
                    )
                    out += "`) => `"
                else:
                    out += ") => `"
                return out + self.render(declaration.type, is_return)
            case _:
                return PLACEHOLDER

    def _render_object_literal(self, declaration: SymbolNode, is_return: bool) -> str:
        if not declaration.children:
            return "`{}`"
        members = "`; ".join(
            f"{c.name}{'?' if c.flags.is_optional else ''}: `" + self.render(c.type, is_return)
            for c in declaration.children
        )
        return "`{ " + members + "` }`"


def _js_literal(value: object) -> str:
    """Spell a non-string literal the way it reads in TypeScript."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict) and "value" in value:
        # Big integer literal: {"negative": bool, "value": "123"}
        sign = "-" if value.get("negative") else ""
        return f"{sign}{value['value']}n"
    return str(value)
