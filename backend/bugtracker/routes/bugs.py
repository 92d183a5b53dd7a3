"""
Bug Tracker Backend — Bug Route Handlers
==========================================

What:  Handles POST/GET /api/bugs and PUT/DELETE /api/bugs/{bug_id}.
How:   Parses the body into a schema, delegates to BugService with the
       injected store, returns JSON.
Who:   Called by the single-page UI, which re-fetches the list after every mutation.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from bugtracker.schemas.bug import (
    BugCreate,
    BugResponse,
    BugUpdate,
    ErrorResponse,
    MessageResponse,
)
from bugtracker.services.bug_service import bug_service
from bugtracker.store import BugStore, get_bug_store

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Bugs"])

_SERVER_ERROR = {500: {"description": "Store failure", "model": ErrorResponse}}
_BAD_BODY = {400: {"description": "Body is not a bug payload", "model": ErrorResponse}}


@router.post(
    "/bugs",
    response_model=BugResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_BODY, **_SERVER_ERROR},
    summary="Create a bug",
)
async def create_bug(
    payload: BugCreate,
    store: BugStore = Depends(get_bug_store),
) -> BugResponse:
    """Create a bug; status defaults to "open"."""
    return await bug_service.create_bug(store, payload)


@router.get(
    "/bugs",
    response_model=List[BugResponse],
    responses=_SERVER_ERROR,
    summary="List every bug",
)
async def list_bugs(store: BugStore = Depends(get_bug_store)) -> List[BugResponse]:
    return await bug_service.list_bugs(store)


@router.put(
    "/bugs/{bug_id}",
    response_model=BugResponse,
    responses={
        404: {"description": "Bug not found", "model": ErrorResponse},
        **_BAD_BODY,
        **_SERVER_ERROR,
    },
    summary="Update some fields of a bug",
)
async def update_bug(
    bug_id: str,
    payload: BugUpdate,
    store: BugStore = Depends(get_bug_store),
) -> BugResponse:
    """
    Merge the supplied fields into the bug.

    Example:
        PUT /api/bugs/3f2a...  {"status": "resolved"}
        → 200 with title and description unchanged
    """
    return await bug_service.update_bug(store, bug_id, payload)


@router.delete(
    "/bugs/{bug_id}",
    response_model=MessageResponse,
    responses=_SERVER_ERROR,
    summary="Delete a bug",
)
async def delete_bug(
    bug_id: str,
    store: BugStore = Depends(get_bug_store),
) -> MessageResponse:
    """Always answers {"message": "Bug deleted"}, even for unknown ids."""
    return await bug_service.delete_bug(store, bug_id)
