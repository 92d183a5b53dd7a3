"""
Bug Tracker Backend — Pydantic Request/Response Schemas
=========================================================

What:  Pydantic models defining the API contract between the UI and the backend.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI document.
Who:   Used by route handlers and BugService.

Design Decision:
    Schemas are separate from the SQLAlchemy model so the JSON shape stays
    the same whichever store backend is configured.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class BugCreate(BaseModel):
    """
    What:  Body of POST /api/bugs.
    No field is required; a missing status becomes "open" in BugService.
    Unknown keys (including `id`) are ignored.
    """
    title: Optional[str] = Field(default=None, description="Short summary")
    description: Optional[str] = Field(default=None, description="Free-form details")
    status: Optional[str] = Field(default=None, description="Initial status (default: open)")


class BugUpdate(BaseModel):
    """
    What:  Body of PUT /api/bugs/{id}, a partial set of fields.
    How:   BugService reads `model_dump(exclude_unset=True)`, so only keys the
           client actually sent are overwritten. An explicit null clears a field.
    """
    title: Optional[str] = Field(default=None, description="New title")
    description: Optional[str] = Field(default=None, description="New description")
    status: Optional[str] = Field(default=None, description="New status, any string")

    def changes(self) -> dict:
        """Fields supplied by the client, in a form the store can apply."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class BugResponse(BaseModel):
    """
    What:  Full representation of a bug.
    Who:   Returned by create, update, and (as array items) list.
    """
    id: str = Field(description="Opaque unique identifier")
    title: Optional[str] = Field(default=None, description="Short summary")
    description: Optional[str] = Field(default=None, description="Free-form details")
    status: Optional[str] = Field(default=None, description="Workflow state")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Fixed confirmation body, e.g. {"message": "Bug deleted"}."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every exception handler.

    Example:
        {"error": "Something went wrong", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Human-readable error message")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
