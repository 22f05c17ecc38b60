"""In-memory implementation of SessionStorage."""

from collections.abc import Iterable

from shopify_session_storage.models import Session
from shopify_session_storage.storage import SessionStorage


class InMemorySessionStorage(SessionStorage):
    """In-memory implementation of SessionStorage for testing and development.

    Stores copies, so loaded sessions never alias stored ones, and drops
    sub-second precision from ``expires`` the way the PostgreSQL storage
    does. Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._sessions: dict[str, Session] = {}

    async def store_session(self, session: Session) -> bool:
        stored = session.model_copy(deep=True)
        if stored.expires_ms is not None:
            stored.expires = Session.expires_from_ms(stored.expires_ms // 1000 * 1000)
        self._sessions[session.id] = stored
        return True

    async def load_session(self, session_id: str) -> Session | None:
        session = self._sessions.get(session_id)
        return session.model_copy(deep=True) if session else None

    async def delete_session(self, session_id: str) -> bool:
        self._sessions.pop(session_id, None)
        return True

    async def delete_sessions(self, session_ids: Iterable[str]) -> bool:
        if isinstance(session_ids, str):
            raise TypeError("session_ids must be a collection of ids, not a string")
        for session_id in session_ids:
            self._sessions.pop(session_id, None)
        return True

    async def find_sessions_by_shop(self, shop: str) -> list[Session]:
        return [
            session.model_copy(deep=True)
            for session in self._sessions.values()
            if session.shop == shop
        ]
