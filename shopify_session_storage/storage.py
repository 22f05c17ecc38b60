"""SessionStorage abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from shopify_session_storage.models import Session


class SessionStorage(ABC):
    """Abstract interface for session storage.

    Every operation is idempotent: storing overwrites, and deleting a
    missing session is not an error. Lookups that find nothing return
    ``None`` or an empty list.
    """

    @abstractmethod
    async def store_session(self, session: Session) -> bool:
        """Create or fully overwrite a session."""
        pass

    @abstractmethod
    async def load_session(self, session_id: str) -> Session | None:
        """Load a session by ID."""
        pass

    @abstractmethod
    async def delete_session(self, session_id: str) -> bool:
        """Delete a session by ID."""
        pass

    @abstractmethod
    async def delete_sessions(self, session_ids: Iterable[str]) -> bool:
        """Delete several sessions at once."""
        pass

    @abstractmethod
    async def find_sessions_by_shop(self, shop: str) -> list[Session]:
        """List every session belonging to a shop."""
        pass
