"""Entry model: one person waiting in a page's queue."""

import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from taqueue.database import Base
from taqueue.validation import ENTRY_FIELD_MAX_LENGTH


class Entry(Base):
    """A registrant's place in the queue. Created on submission, deleted by id."""

    __tablename__ = "queue"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(ENTRY_FIELD_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(ENTRY_FIELD_MAX_LENGTH), nullable=False)
    # Nullable so deployments with require_page=False can keep unscoped entries
    page_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("pages.id"), index=True)
    entered_at: Mapped[datetime] = mapped_column(nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Entry(id={self.id}, name={self.name!r}, page_id={self.page_id})>"
