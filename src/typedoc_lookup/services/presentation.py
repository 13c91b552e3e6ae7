"""Assembles a docs payload for one resolved symbol."""

import asyncio
import time

import structlog

from typedoc_lookup.engine import DocsEngine
from typedoc_lookup.errors import (
    MissingSourceMap,
    NoMappingInSourceMap,
    SourceLocationError,
    StructuralDecodeError,
)
from typedoc_lookup.models import (
    DocsField,
    DocsPayload,
    ReferenceType,
    ReflectionKind,
    SourceLine,
    SourceRef,
    SymbolNode,
    SymbolPath,
)
from typedoc_lookup.rendering import docs_link, format_comment_text
from typedoc_lookup.selector import DefinitionSelector

log = structlog.get_logger()

ZERO_WIDTH_SPACE = "\u200b"


def separate_code_spans(text: str) -> str:
    """Keep adjacent code spans from merging into one."""
    return text.replace("``", f"`{ZERO_WIDTH_SPACE}`")


class PresentationBuilder:
    """Turns a resolved path and its selected definition into a ``DocsPayload``."""

    def __init__(self, engine: DocsEngine) -> None:
        self.engine = engine

    async def assemble(
        self,
        path: SymbolPath,
        selector: DefinitionSelector,
        display: bool = False,
        revision: str | None = None,
    ) -> DocsPayload:
        """Render the selected definition of the path's leaf symbol.

        Source references are resolved concurrently; the listing keeps their
        declared order. A reference that cannot be resolved never prevents the
        rest of the payload from being produced.
        """
        begin = time.perf_counter()
        symbol = path[-1]
        definition = selector.selected

        sources = await asyncio.gather(*(self._locate(ref, revision) for ref in symbol.sources))

        qualified_name = ".".join(s.name for s in path)
        payload = DocsPayload(
            title=f"📘 Docs for {qualified_name} (Definition {selector.selected_index + 1}/{selector.count})",
            body=separate_code_spans(self.engine.declarations.render(symbol, definition)),
            fields=self._fields(symbol, definition),
            source_locations=list(sources),
            url=docs_link(path, self.engine.settings.docs_base_url),
            navigation=selector.affordances(),
            display=display,
        )
        if sources:
            payload.fields.append(
                DocsField(name="Implemented in:", value="\n".join(line.text for line in sources))
            )

        payload.render_elapsed_ms = round((time.perf_counter() - begin) * 1000, 1)
        return payload

    async def _locate(self, ref: SourceRef, revision: str | None) -> SourceLine:
        locator = self.engine.locator
        try:
            return SourceLine(location=await locator.locate(ref, revision))
        except (MissingSourceMap, NoMappingInSourceMap) as e:
            log.warning("source_location_degraded", file_name=ref.file_name, error=str(e))
            return SourceLine(
                location=locator.declaration_location(ref, revision),
                degraded=True,
                error=str(e),
            )
        except StructuralDecodeError as e:
            log.error("malformed_source_ref", file_name=ref.file_name, error=str(e))
            return SourceLine(error=str(e))
        except SourceLocationError as e:
            log.warning("source_location_failed", file_name=ref.file_name, error=str(e))
            return SourceLine(error=str(e))

    # --- Fields ---

    def _fields(self, symbol: SymbolNode, definition: SymbolNode) -> list[DocsField]:
        types = self.engine.types
        fields: list[DocsField] = []
        comment = definition.comment

        if comment is not None and (comment.short_text or comment.text):
            description = self._format(comment.short_text + "\n\n" + comment.text).strip()
            fields.append(DocsField(name="Description", value=separate_code_spans(description)))

        match symbol.kind:
            case ReflectionKind.METHOD | ReflectionKind.FUNCTION | ReflectionKind.CONSTRUCTOR:
                if definition.parameters:
                    lines = [self._parameter_line(p) for p in definition.parameters]
                    fields.append(DocsField(name="Parameters", value=separate_code_spans("\n".join(lines))))
                returns = types.render(definition.type, is_return=True)
                if comment is not None and comment.returns:
                    returns += " - " + self._format(comment.returns).strip()
                fields.append(DocsField(name="Return Type", value=separate_code_spans(returns)))
            case ReflectionKind.CLASS | ReflectionKind.INTERFACE:
                for label, kind in (("Methods", ReflectionKind.METHOD), ("Properties", ReflectionKind.PROPERTY)):
                    members = [c for c in symbol.children if c.kind == kind]
                    if members:
                        fields.append(DocsField(name=label, value=self._member_list(self.rank_on_inheritance(members))))
            case ReflectionKind.ENUMERATION:
                if symbol.children:
                    fields.append(DocsField(name="Members", value=self._member_list(symbol.children)))
            case ReflectionKind.ENUMERATION_MEMBER:
                if definition.default_value is not None:
                    fields.append(DocsField(name="Value", value=definition.default_value))

        if comment is not None:
            for example in comment.tagged("example"):
                fields.append(DocsField(name="Example", value=example.text.strip()))

        return fields

    def _format(self, text: str) -> str:
        return format_comment_text(text, self.engine.types)

    def _parameter_line(self, parameter: SymbolNode) -> str:
        optional = "?" if parameter.flags.is_optional else ""
        line = f"**{parameter.name}{optional}: {self.engine.types.render(parameter.type)}**"
        if parameter.comment is not None:
            text = (parameter.comment.text or parameter.comment.short_text).strip()
            if text:
                line += " - " + self._format(text)
        return line

    def _member_list(self, members: list[SymbolNode]) -> str:
        limit = self.engine.settings.max_listed_members
        out = ", ".join(f"`{m.name}`" for m in members[:limit])
        if len(members) > limit:
            out += ", ..."
        return out

    # --- Inheritance ---

    def inheritance_depth(self, symbol: SymbolNode) -> int:
        """How many inheritance hops away a member was declared. Own members are 0."""
        depth = 0
        visited = {id(symbol)}
        current = symbol
        while isinstance(current.inherited_from, ReferenceType):
            depth += 1
            path = self.engine.types.resolve_reference(current.inherited_from)
            if path is None or id(path[-1]) in visited:
                break
            current = path[-1]
            visited.add(id(current))
        return depth

    def rank_on_inheritance(self, members: list[SymbolNode]) -> list[SymbolNode]:
        """Own members first, then by increasing inheritance depth. Stable."""
        return sorted(members, key=self.inheritance_depth)
