"""Links to the generated documentation site and to external type references."""

from typedoc_lookup.models import ReflectionKind, SymbolPath

# Well-known intrinsic and built-in types, linked to their reference pages.
INTRINSIC_LINKS: dict[str, str] = {
    "string": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/String",
    "number": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/Number",
    "boolean": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/Boolean",
    "void": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/undefined",
    "Promise": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/Promise",
    "any": "https://www.typescriptlang.org/docs/handbook/2/everyday-types.html#any",
}

_PAGE_DIRS = {
    ReflectionKind.CLASS: "classes",
    ReflectionKind.INTERFACE: "interfaces",
    ReflectionKind.ENUMERATION: "enums",
}

_MODULE_LEVEL = frozenset(
    {ReflectionKind.TYPE_ALIAS, ReflectionKind.VARIABLE, ReflectionKind.FUNCTION}
)


def docs_link(path: SymbolPath, base_url: str) -> str | None:
    """Documentation page for a resolved path.

    Classes, interfaces and enums get their own page, anchored at the second
    element of the path when there is one. Type aliases, variables and
    functions live on the modules page. Anything else has no page.
    """
    if not path:
        return None

    symbol = path[0]
    base_url = base_url.rstrip("/")

    page_dir = _PAGE_DIRS.get(symbol.kind)
    if page_dir is not None:
        url = f"{base_url}/{page_dir}/{symbol.name}"
        if len(path) > 1:
            url += f"#{path[1].name}"
        return url

    if symbol.kind in _MODULE_LEVEL:
        return f"{base_url}/modules.html#{symbol.name}"

    return None
