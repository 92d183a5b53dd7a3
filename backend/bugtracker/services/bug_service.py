"""
Bug Tracker Backend — Bug Service (CRUD Orchestrator)
=======================================================

What:  Business logic for the four bug operations: create, list, update, delete.
How:   Applies creation defaults, calls the store, converts BugRecord values
       to response schemas, and translates store failures into app exceptions.
Who:   Called by route handlers in routes/bugs.py.
When:  Once per API request.

Error Handling Strategy:
    - Store returned None on update  → NotFoundError   (404)
    - Store raised anything          → DatabaseError   (500, generic message)
    Nothing is retried; the underlying error is logged with its traceback.

Design Decision:
    BugService is stateless: it receives the store for each call, the same
    way route handlers receive it from the get_bug_store dependency.
"""

import logging
from typing import List

from bugtracker.exceptions import DatabaseError, NotFoundError
from bugtracker.models.bug import DEFAULT_STATUS
from bugtracker.schemas.bug import BugCreate, BugResponse, BugUpdate, MessageResponse
from bugtracker.store.base import BugRecord, BugStore

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Bug deleted"


def _to_response(record: BugRecord) -> BugResponse:
    return BugResponse.model_validate(record)


class BugService:
    """
    Business logic layer for bug operations.

    Responsibilities:
        - create_bug(): Default the status and insert
        - list_bugs(): Return the whole collection
        - update_bug(): Merge supplied fields, 404 when the id is unknown
        - delete_bug(): Remove and confirm, whether or not the id existed
    """

    async def create_bug(self, store: BugStore, payload: BugCreate) -> BugResponse:
        """
        Insert a new bug.

        Absent title/description are stored as null; a missing (or null)
        status becomes "open".

        Raises:
            DatabaseError: Store operation failed (→ 500)
        """
        fields = payload.model_dump()
        if fields.get("status") is None:
            fields["status"] = DEFAULT_STATUS

        try:
            record = await store.insert(fields)
        except Exception as e:
            logger.error("Store error creating bug: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "create", "error_type": type(e).__name__})

        logger.info("Bug created: %s (status=%s)", record.id, record.status)
        return _to_response(record)

    async def list_bugs(self, store: BugStore) -> List[BugResponse]:
        """
        Return every bug, unordered, unpaginated.

        Raises:
            DatabaseError: Store operation failed (→ 500)
        """
        try:
            records = await store.find_all()
        except Exception as e:
            logger.error("Store error listing bugs: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "list", "error_type": type(e).__name__})

        return [_to_response(record) for record in records]

    async def update_bug(self, store: BugStore, bug_id: str, payload: BugUpdate) -> BugResponse:
        """
        Merge-update one bug.

        Only keys present in the request body are written; the rest keep
        their stored values. Concurrent updates race and the last one wins.

        Args:
            store: Bug store handle
            bug_id: Id from the request path
            payload: Partial field set

        Raises:
            NotFoundError: No bug has this id (→ 404)
            DatabaseError: Store operation failed (→ 500)
        """
        changes = payload.changes()
        try:
            record = await store.update(bug_id, changes)
        except Exception as e:
            logger.error("Store error updating bug %s: %s", bug_id, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "update", "bug_id": bug_id, "error_type": type(e).__name__}
            )

        if record is None:
            raise NotFoundError(resource="Bug", resource_id=bug_id)

        logger.info("Bug updated: %s (fields=%s)", record.id, ",".join(sorted(changes)) or "-")
        return _to_response(record)

    async def delete_bug(self, store: BugStore, bug_id: str) -> MessageResponse:
        """
        Delete one bug.

        Returns the same confirmation whether or not the bug existed, so
        repeating a delete is harmless.

        Raises:
            DatabaseError: Store operation failed (→ 500)
        """
        try:
            removed = await store.delete(bug_id)
        except Exception as e:
            logger.error("Store error deleting bug %s: %s", bug_id, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "delete", "bug_id": bug_id, "error_type": type(e).__name__}
            )

        if removed:
            logger.info("Bug deleted: %s", bug_id)
        else:
            logger.debug("Delete of unknown bug %s ignored", bug_id)
        return MessageResponse(message=DELETED_MESSAGE)


# ── Singleton Instance ────────────────────────────────────────────────────
bug_service = BugService()
