"""Page model: a named queue, usually one per classroom."""

import uuid
from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taqueue.database import Base
from taqueue.validation import PAGE_NAME_MAX_LENGTH


class Page(Base):
    """A named scope that groups queue entries."""

    __tablename__ = "pages"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(PAGE_NAME_MAX_LENGTH), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(nullable=False)

    def __repr__(self) -> str:
        return f"<Page(id={self.id}, name={self.name!r})>"
