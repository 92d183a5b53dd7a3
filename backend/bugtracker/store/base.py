"""
Bug Tracker Backend — Abstract Bug Store Interface
====================================================

What:  Abstract base class defining the contract for bug persistence.
How:   Concrete stores inherit from BugStore and implement every coroutine.
Who:   Called by BugService; one instance lives on app.state for the process.
When:  Created in the application lifespan, closed at shutdown.

Implementations:
    - SQLAlchemyBugStore: async SQLAlchemy (PostgreSQL via asyncpg, SQLite via aiosqlite)
    - InMemoryBugStore:   process-local dict, for demos and HTTP tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BugRecord:
    """
    A stored bug as handed from a store to the service layer.

    Immutable snapshot: mutating a record never touches the store.
    """
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


# Keys a store will write; anything else in a field mapping is ignored
WRITABLE_FIELDS = ("title", "description", "status")


def writable(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Return only the writable keys of `fields` (never `id`)."""
    return {key: value for key, value in fields.items() if key in WRITABLE_FIELDS}


class BugStore(ABC):
    """
    Abstract interface for the bug collection.

    Contract:
        - The store assigns ids; callers never choose them
        - update() merges only the keys it is given (last write wins)
        - A missing or malformed id is "not found" (None / False), never an error
        - Connectivity and driver failures propagate as exceptions; the
          service layer translates them
    """

    @abstractmethod
    async def insert(self, fields: Dict[str, Any]) -> BugRecord:
        """
        Persist a new bug.

        Args:
            fields: title, description, status ("open" when the key is absent)

        Returns:
            The stored record, including its generated id.
        """
        ...

    @abstractmethod
    async def find_all(self) -> List[BugRecord]:
        """Return every stored bug in the store's natural order."""
        ...

    @abstractmethod
    async def update(self, bug_id: str, fields: Dict[str, Any]) -> Optional[BugRecord]:
        """
        Overwrite the supplied fields of one bug.

        Returns:
            The record after the merge, or None when no bug has `bug_id`.
        """
        ...

    @abstractmethod
    async def delete(self, bug_id: str) -> bool:
        """Remove one bug. Returns True if a record was removed."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """
        Check that the store is reachable.

        Who:     Called by the health check endpoint.
        Returns: True if reachable, False otherwise (never raises).
        """
        ...

    async def close(self) -> None:
        """Release the underlying connection handle. No-op by default."""
        return None
