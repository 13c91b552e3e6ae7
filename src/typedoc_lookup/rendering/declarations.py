"""Structural signatures of declarations."""

from typedoc_lookup.models import ReflectionKind, SymbolNode
from typedoc_lookup.rendering.types import PLACEHOLDER, TypeRenderer


class DeclarationRenderer:
    """Renders the one-line signature of a declaration's selected definition."""

    def __init__(self, types: TypeRenderer) -> None:
        self.types = types

    def render(self, symbol: SymbolNode, definition: SymbolNode) -> str:
        match symbol.kind:
            case ReflectionKind.METHOD | ReflectionKind.FUNCTION:
                static = "static " if symbol.flags.is_static else ""
                return "`" + static + self._callable(definition.name, definition)
            case ReflectionKind.CONSTRUCTOR:
                return "`new " + self._callable(symbol.name, definition)
            case ReflectionKind.CLASS:
                out = "`class " + symbol.name + self._type_parameters(definition)
                if definition.extended_types:
                    out += " extends `"
                    out += "`, `".join(self.types.render(t) for t in definition.extended_types)
                    return out + "` {}`"
                return out + " {}`"
            case ReflectionKind.PROPERTY | ReflectionKind.ACCESSOR:
                static = "static " if symbol.flags.is_static else ""
                optional = "?" if symbol.flags.is_optional else ""
                return f"`{static}{symbol.name}{optional}: `" + self.types.render(symbol.type)
            case ReflectionKind.ENUMERATION:
                return f"`enum {symbol.name} {{}}`"
            case ReflectionKind.ENUMERATION_MEMBER:
                return f"`{symbol.name} = {definition.default_value}`"
            case ReflectionKind.INTERFACE:
                return f"`interface {symbol.name}" + self._type_parameters(definition) + " {}`"
            case ReflectionKind.VARIABLE:
                keyword = "const" if symbol.flags.is_const else "let"
                return f"`{keyword} {symbol.name}: `" + self.types.render(symbol.type)
            case ReflectionKind.TYPE_ALIAS:
                return (
                    f"`type {symbol.name}"
                    + self._type_parameters(definition)
                    + " = `"
                    + self.types.render(symbol.type)
                )
            case _:
                return PLACEHOLDER

    def _callable(self, name: str, signature: SymbolNode) -> str:
        # Starts and ends inside an open code span.
        out = name + self._type_parameters(signature) + "("
        if signature.parameters:
            out += "`, ".join(self._parameter(p) for p in signature.parameters)
            out += "`): `"
        else:
            out += "): `"
        return out + self.types.render(signature.type, is_return=True)

    def _parameter(self, parameter: SymbolNode) -> str:
        rest = "..." if parameter.flags.is_rest else ""
        optional = "?" if parameter.flags.is_optional else ""
        return f"{rest}{parameter.name}{optional}: `" + self.types.render(parameter.type)

    def _type_parameters(self, declaration: SymbolNode) -> str:
        if not declaration.type_parameters:
            return ""
        params = []
        for tp in declaration.type_parameters:
            if tp.type is not None:
                params.append(f"{tp.name} extends `" + self.types.render(tp.type) + "`")
            else:
                params.append(tp.name)
        return "<" + ", ".join(params) + ">"
