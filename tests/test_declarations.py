"""Tests for declaration signatures."""

import pytest

from tests.conftest import DOCS_URL
from typedoc_lookup.engine import DocsEngine
from typedoc_lookup.models import IntrinsicType, ReflectionKind, SymbolNode
from typedoc_lookup.rendering import INTRINSIC_LINKS, PLACEHOLDER, DeclarationRenderer

STRING = f"[`string`]({INTRINSIC_LINKS['string']})"
NUMBER = f"[`number`]({INTRINSIC_LINKS['number']})"
VOID = f"[`void`]({INTRINSIC_LINKS['void']})"
BASE = f"[`Base`]({DOCS_URL}/classes/Base)"


@pytest.fixture
def renderer(engine: DocsEngine) -> DeclarationRenderer:
    return engine.declarations


def _resolve(engine: DocsEngine, identifier: str) -> SymbolNode:
    return engine.resolver.resolve(engine.root, identifier, exact=True)[-1]


class TestCallables:
    """Tests for methods, functions and constructors."""

    def test_method(self, engine: DocsEngine, renderer: DeclarationRenderer):
        bar = _resolve(engine, "Foo.bar")
        assert renderer.render(bar, bar.signatures[0]) == f"`bar(value: `{STRING}`): `{VOID}"

    def test_static_overloads(self, engine: DocsEngine, renderer: DeclarationRenderer):
        """Each overload renders its own parameters and return type."""
        qux = _resolve(engine, "Foo.qux")
        assert renderer.render(qux, qux.signatures[0]) == f"`static qux(): `{NUMBER}"
        assert renderer.render(qux, qux.signatures[1]) == f"`static qux(n?: `{NUMBER}`): `{NUMBER}"
        assert renderer.render(qux, qux.signatures[2]) == f"`static qux(): `{STRING}"

    def test_function_with_type_parameters(self, engine: DocsEngine, renderer: DeclarationRenderer):
        create = _resolve(engine, "createWorker")
        out = renderer.render(create, create.signatures[0])
        assert out == f"`createWorker<K>(base: `{BASE}`): `[`Worker`]({DOCS_URL}/classes/Worker)"

    def test_rest_parameter(self, renderer: DeclarationRenderer):
        signature = SymbolNode(
            name="log",
            kind=ReflectionKind.CALL_SIGNATURE,
            parameters=[
                SymbolNode.model_validate(
                    {"name": "args", "flags": {"isRest": True}, "type": {"type": "intrinsic", "name": "any"}}
                )
            ],
            type=IntrinsicType(name="void"),
        )
        method = SymbolNode(name="log", kind=ReflectionKind.METHOD, signatures=[signature])
        out = renderer.render(method, signature)
        assert out == f"`log(...args: `[`any`]({INTRINSIC_LINKS['any']})`): `{VOID}"

    def test_constructor(self, renderer: DeclarationRenderer):
        signature = SymbolNode(name="Foo", kind=ReflectionKind.CONSTRUCTOR_SIGNATURE)
        ctor = SymbolNode(name="Foo", kind=ReflectionKind.CONSTRUCTOR, signatures=[signature])
        assert renderer.render(ctor, signature) == "`new Foo(): ``?`"


class TestDeclarations:
    """Tests for non-callable declarations."""

    def test_plain_class(self, engine: DocsEngine, renderer: DeclarationRenderer):
        foo = _resolve(engine, "Foo")
        assert renderer.render(foo, foo) == "`class Foo {}`"

    def test_generic_class_with_heritage(self, engine: DocsEngine, renderer: DeclarationRenderer):
        worker = _resolve(engine, "Worker")
        assert renderer.render(worker, worker) == f"`class Worker<T extends `{BASE}`> extends `{BASE}` {{}}`"

    def test_property(self, engine: DocsEngine, renderer: DeclarationRenderer):
        size = _resolve(engine, "Foo.size")
        assert renderer.render(size, size) == f"`size: `{NUMBER}"

    def test_enum_and_member(self, engine: DocsEngine, renderer: DeclarationRenderer):
        color = _resolve(engine, "Color")
        red = _resolve(engine, "Color.Red")
        assert renderer.render(color, color) == "`enum Color {}`"
        assert renderer.render(red, red) == "`Red = 0`"

    def test_const_variable(self, engine: DocsEngine, renderer: DeclarationRenderer):
        version = _resolve(engine, "VERSION")
        assert renderer.render(version, version) == '`const VERSION: ``"1.0.0"`'

    def test_type_alias(self, engine: DocsEngine, renderer: DeclarationRenderer):
        alias = _resolve(engine, "PacketId")
        assert renderer.render(alias, alias) == '`type PacketId = ``"hello"``|``4`'

    def test_interface(self, renderer: DeclarationRenderer):
        iface = SymbolNode(name="Options", kind=ReflectionKind.INTERFACE)
        assert renderer.render(iface, iface) == "`interface Options {}`"

    def test_unrenderable_kind(self, engine: DocsEngine, renderer: DeclarationRenderer):
        assert renderer.render(engine.root, engine.root) == PLACEHOLDER
