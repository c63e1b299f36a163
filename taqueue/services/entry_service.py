"""Entry service: join, list and leave a page's queue."""

import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taqueue.config import settings
from taqueue.errors import ValidationError
from taqueue.models.entry import Entry
from taqueue.services.page_service import get_page_by_name, utcnow
from taqueue.validation import ENTRY_FIELD_MAX_LENGTH, is_valid_email, sanitize

logger = logging.getLogger(__name__)


async def list_entries(db: AsyncSession, page_name: str | None = None) -> list[Entry]:
    """Return entries in arrival order, optionally scoped to one page."""
    query = select(Entry)
    if page_name is not None:
        page = await get_page_by_name(db, page_name)
        query = query.where(Entry.page_id == page.id)

    result = await db.execute(query.order_by(Entry.entered_at.asc(), Entry.id))
    return list(result.scalars().all())


async def create_entry(
    db: AsyncSession,
    name: str | None,
    email: str | None,
    page_name: str | None = None,
    *,
    require_page: bool | None = None,
) -> Entry:
    """Add a person to the end of a page's queue.

    ``require_page`` defaults to the ``require_page`` setting.

    Raises:
        ValidationError: missing fields, values too long, bad email format,
            or no page name when one is required.
        NotFoundError: the page name does not match any page.
    """
    if require_page is None:
        require_page = settings.require_page

    clean_name = sanitize(name) if name else ""
    clean_email = sanitize(email) if email else ""
    if not clean_name.strip() or not clean_email.strip():
        raise ValidationError("Name and email are required.")

    if len(clean_name) > ENTRY_FIELD_MAX_LENGTH or len(clean_email) > ENTRY_FIELD_MAX_LENGTH:
        raise ValidationError(
            f"Name and email must be {ENTRY_FIELD_MAX_LENGTH} characters or fewer."
        )

    if not is_valid_email(clean_email):
        raise ValidationError("Please enter a valid email address.")

    page_id = None
    if page_name:
        page = await get_page_by_name(db, page_name)
        page_id = page.id
    elif require_page:
        raise ValidationError("Page name is required.")

    entry = Entry(
        id=uuid.uuid4(),
        name=clean_name,
        email=clean_email,
        page_id=page_id,
        entered_at=utcnow(),
    )
    db.add(entry)
    await db.flush()

    logger.info("Entry %s joined queue for page %s", entry.id, page_id)
    return entry


async def delete_entry(db: AsyncSession, entry_id: str | uuid.UUID | None) -> None:
    """Remove an entry by id. Removing an absent entry is not an error."""
    if not entry_id:
        raise ValidationError("A valid entry id is required.")
    if not isinstance(entry_id, uuid.UUID):
        try:
            entry_id = uuid.UUID(str(entry_id).strip())
        except ValueError as exc:
            raise ValidationError("A valid entry id is required.") from exc

    result = await db.execute(delete(Entry).where(Entry.id == entry_id))
    logger.info("Deleted entry %s", entry_id)
    logger.debug("Delete of entry %s affected %d row(s)", entry_id, result.rowcount)
