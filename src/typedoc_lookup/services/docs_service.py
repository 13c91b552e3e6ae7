"""Docs service - orchestrates lookups and definition navigation."""

import uuid
from collections import OrderedDict
from dataclasses import dataclass

import structlog

from typedoc_lookup.engine import DocsEngine
from typedoc_lookup.errors import UnknownSession, UnresolvedSymbol
from typedoc_lookup.models import DocsPayload, NavigationAction, SymbolPath
from typedoc_lookup.selector import DefinitionSelector
from typedoc_lookup.services.presentation import PresentationBuilder

log = structlog.get_logger()


@dataclass
class DocsSession:
    """One interactive lookup: the resolved path and its selected definition."""

    path: SymbolPath
    selector: DefinitionSelector
    display: bool = False


class DocsService:
    """Resolves queries, keeps their sessions and re-renders on navigation.

    Sessions are private to one query. The store is bounded; the least
    recently used session is dropped once ``max_sessions`` is exceeded.
    """

    def __init__(self, engine: DocsEngine, max_sessions: int = 256) -> None:
        self.engine = engine
        self.presentation = PresentationBuilder(engine)
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, DocsSession] = OrderedDict()

    async def lookup(self, identifier: str | None, display: bool = False) -> DocsPayload:
        """Look up a dotted identifier and open a session for it.

        Args:
            identifier: Dotted identifier, matched fuzzily. Empty or None
                returns the landing payload.
            display: Pass-through visibility flag for the front-end.

        Returns:
            The rendered payload. Unresolved identifiers produce a payload
            with ``found=False`` rather than an error.
        """
        docs_url = self.engine.settings.docs_base_url
        identifier = (identifier or "").strip()

        if not identifier:
            return DocsPayload(
                title="📘 Docs",
                body=f"Visit the docs at {docs_url}",
                url=docs_url,
                display=display,
            )

        try:
            path = self.engine.resolver.resolve(self.engine.root, identifier, exact=False)
        except UnresolvedSymbol as e:
            log.info("symbol_not_found", identifier=identifier)
            return DocsPayload(
                title=f"❌ {e}",
                body=f"Visit the docs at {docs_url}",
                found=False,
            )

        session = DocsSession(
            path=path,
            selector=DefinitionSelector.for_symbol(path[-1]),
            display=display,
        )
        session_id = self._store(session)
        log.info(
            "docs_lookup",
            identifier=identifier,
            resolved=".".join(s.name for s in path),
            definitions_count=session.selector.count,
        )

        payload = await self.presentation.assemble(path, session.selector, display=display)
        payload.session_id = session_id
        return payload

    async def navigate(self, session_id: str, action: NavigationAction | str) -> DocsPayload:
        """Move a session's selection and re-render it.

        Moving past either end leaves the selection where it is.

        Raises:
            UnknownSession: The session does not exist or was evicted.
        """
        session = self.get_session(session_id)
        moved = session.selector.apply(NavigationAction(action))
        log.debug(
            "definition_navigated",
            session_id=session_id,
            action=str(action),
            moved=moved,
            selected_index=session.selector.selected_index,
        )

        payload = await self.presentation.assemble(session.path, session.selector, display=session.display)
        payload.session_id = session_id
        return payload

    def get_session(self, session_id: str) -> DocsSession:
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise UnknownSession(session_id) from None
        self._sessions.move_to_end(session_id)
        return session

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def _store(self, session: DocsSession) -> str:
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            log.debug("docs_session_evicted", session_id=evicted)
        return session_id
