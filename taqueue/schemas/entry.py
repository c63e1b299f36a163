"""Pydantic v2 request/response schemas for queue entry endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class EntryCreate(BaseModel):
    """Schema for joining a queue.

    Fields are optional here so that missing values produce the queue's own
    400 messages instead of a generic schema error.
    """

    name: str | None = None
    email: str | None = None
    page_name: str | None = Field(None, alias="pageName")

    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class EntryResponse(BaseModel):
    """A stored queue entry."""

    id: uuid.UUID
    name: str
    email: str
    page_id: uuid.UUID | None = None
    entered_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Simple confirmation message."""

    message: str
