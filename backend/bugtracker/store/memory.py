"""
Bug Tracker Backend — In-Memory Bug Store
===========================================

What:  BugStore kept in a process-local dict.
Who:   Built by create_store() when STORE_BACKEND=memory; substituted for the
       real store in HTTP tests.
When:  Lives for the process; contents are lost on restart.

Every method runs without awaiting, so on a single event loop each
operation is atomic with respect to other requests.
"""

import uuid
from dataclasses import replace
from typing import Any, Dict, List, Optional

from bugtracker.models.bug import DEFAULT_STATUS
from bugtracker.store.base import BugRecord, BugStore, writable


class InMemoryBugStore(BugStore):
    """Dict-backed store; iteration follows insertion order."""

    def __init__(self) -> None:
        self._bugs: Dict[str, BugRecord] = {}

    async def insert(self, fields: Dict[str, Any]) -> BugRecord:
        values = {"status": DEFAULT_STATUS, **writable(fields)}
        record = BugRecord(id=str(uuid.uuid4()), **values)
        self._bugs[record.id] = record
        return record

    async def find_all(self) -> List[BugRecord]:
        return list(self._bugs.values())

    async def update(self, bug_id: str, fields: Dict[str, Any]) -> Optional[BugRecord]:
        current = self._bugs.get(bug_id)
        if current is None:
            return None
        updated = replace(current, **writable(fields))
        self._bugs[bug_id] = updated
        return updated

    async def delete(self, bug_id: str) -> bool:
        return self._bugs.pop(bug_id, None) is not None

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._bugs.clear()

    def __len__(self) -> int:
        return len(self._bugs)
