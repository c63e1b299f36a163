"""Pydantic v2 request/response schemas for page endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class PageCreate(BaseModel):
    """Schema for creating a page. Presence and length are checked by the service."""

    name: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PageResponse(BaseModel):
    """A stored page."""

    id: uuid.UUID
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PageSummary(BaseModel):
    id: uuid.UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class PageListResponse(BaseModel):
    """All known pages."""

    pages: list[PageSummary]
