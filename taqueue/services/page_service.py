"""Page service: create, list and resolve pages by name."""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taqueue.errors import NotFoundError, ValidationError
from taqueue.models.page import Page
from taqueue.validation import PAGE_NAME_MAX_LENGTH, sanitize

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time as naive UTC, matching the TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def _name_taken(db: AsyncSession, name: str) -> bool:
    result = await db.execute(select(Page.id).where(Page.name == name))
    return result.scalar_one_or_none() is not None


async def create_page(db: AsyncSession, name: str | None) -> Page:
    """Create a page with a sanitized, unique name.

    Raises:
        ValidationError: name missing, blank, too long, or already taken.
    """
    if not name:
        raise ValidationError("Page name is required.")

    clean_name = sanitize(name)
    if not clean_name.strip():
        raise ValidationError("Page name is required.")
    if len(clean_name) > PAGE_NAME_MAX_LENGTH:
        raise ValidationError("Page name exceeds maximum length.")

    if await _name_taken(db, clean_name):
        raise ValidationError("Page name already exists.")

    page = Page(id=uuid.uuid4(), name=clean_name, created_at=utcnow())
    db.add(page)
    try:
        await db.flush()
    except IntegrityError as exc:
        # Lost a race with a concurrent insert of the same name; get_db rolls back
        raise ValidationError("Page name already exists.") from exc

    logger.info("Created page %s (%r)", page.id, page.name)
    return page


async def list_pages(db: AsyncSession) -> list[Page]:
    """Return every page, oldest first."""
    result = await db.execute(select(Page).order_by(Page.created_at.asc(), Page.id))
    return list(result.scalars().all())


async def get_page_by_name(db: AsyncSession, name: str) -> Page:
    """Resolve a page by its (sanitized) name.

    Raises:
        ValidationError: the name is blank after sanitization.
        NotFoundError: no page has that name.
    """
    clean_name = sanitize(name)
    if not clean_name.strip():
        raise ValidationError("Invalid page name.")

    result = await db.execute(select(Page).where(Page.name == clean_name))
    page = result.scalar_one_or_none()
    if page is None:
        raise NotFoundError("Page not found.")
    return page
