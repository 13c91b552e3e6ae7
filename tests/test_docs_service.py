"""Tests for DocsService."""

import pytest

from tests.conftest import DOCS_URL
from typedoc_lookup.engine import DocsEngine
from typedoc_lookup.errors import UnknownSession
from typedoc_lookup.models import NavigationAction
from typedoc_lookup.services import DocsService


@pytest.fixture
def docs_service(engine: DocsEngine) -> DocsService:
    return DocsService(engine)


class TestLookup:
    """Tests for DocsService.lookup."""

    @pytest.mark.asyncio
    async def test_resolves_and_opens_session(self, docs_service: DocsService):
        payload = await docs_service.lookup("Foo.bar", display=True)

        assert payload.found
        assert payload.display is True
        assert payload.title == "📘 Docs for Foo.bar (Definition 1/1)"
        assert payload.session_id is not None
        assert docs_service.session_count == 1

    @pytest.mark.asyncio
    async def test_fuzzy_lookup(self, docs_service: DocsService):
        payload = await docs_service.lookup("Wroker")
        assert payload.title.startswith("📘 Docs for Worker ")

    @pytest.mark.asyncio
    async def test_not_found(self, docs_service: DocsService):
        """Unresolvable identifiers produce a payload, not an error."""
        payload = await docs_service.lookup("Foo.baz")

        assert payload.found is False
        assert payload.title == "❌ Symbol does not exist: Foo.baz"
        assert payload.session_id is None
        assert docs_service.session_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", [None, "", "   "])
    async def test_landing(self, docs_service: DocsService, identifier: str | None):
        payload = await docs_service.lookup(identifier)

        assert payload.title == "📘 Docs"
        assert payload.url == DOCS_URL
        assert DOCS_URL in payload.body
        assert payload.session_id is None


class TestNavigate:
    """Tests for DocsService.navigate."""

    @pytest.mark.asyncio
    async def test_next_next_previous(self, docs_service: DocsService):
        payload = await docs_service.lookup("Foo.qux")
        session_id = payload.session_id
        assert payload.title.endswith("(Definition 1/3)")

        await docs_service.navigate(session_id, NavigationAction.NEXT)
        await docs_service.navigate(session_id, NavigationAction.NEXT)
        payload = await docs_service.navigate(session_id, NavigationAction.PREVIOUS)

        assert payload.title.endswith("(Definition 2/3)")
        assert payload.session_id == session_id
        assert [a.enabled for a in payload.navigation] == [True, True]

    @pytest.mark.asyncio
    async def test_past_the_end_is_noop(self, docs_service: DocsService):
        payload = await docs_service.lookup("Foo.bar")
        payload = await docs_service.navigate(payload.session_id, "next")

        assert payload.title.endswith("(Definition 1/1)")
        assert [a.enabled for a in payload.navigation] == [False, False]

    @pytest.mark.asyncio
    async def test_keeps_display_flag(self, docs_service: DocsService):
        payload = await docs_service.lookup("Foo.qux", display=True)
        payload = await docs_service.navigate(payload.session_id, "next")
        assert payload.display is True

    @pytest.mark.asyncio
    async def test_unknown_session(self, docs_service: DocsService):
        with pytest.raises(UnknownSession):
            await docs_service.navigate("nope", NavigationAction.NEXT)

    @pytest.mark.asyncio
    async def test_sessions_are_independent(self, docs_service: DocsService):
        first = await docs_service.lookup("Foo.qux")
        second = await docs_service.lookup("Foo.qux")

        await docs_service.navigate(first.session_id, "next")
        assert docs_service.get_session(first.session_id).selector.selected_index == 1
        assert docs_service.get_session(second.session_id).selector.selected_index == 0


class TestSessionStore:
    """Tests for session bookkeeping."""

    @pytest.mark.asyncio
    async def test_evicts_least_recently_used(self, engine: DocsEngine):
        service = DocsService(engine, max_sessions=2)
        a = (await service.lookup("Foo")).session_id
        b = (await service.lookup("Worker")).session_id

        service.get_session(a)
        c = (await service.lookup("Color")).session_id

        assert service.session_count == 2
        service.get_session(a)
        service.get_session(c)
        with pytest.raises(UnknownSession):
            service.get_session(b)
