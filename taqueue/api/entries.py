"""Queue entry API router.

Entries are addressed through query parameters (``pageName`` when listing,
``id`` when deleting) so that the whole surface lives on one path.
"""

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from taqueue.api.deps import get_db
from taqueue.errors import MethodNotAllowedError
from taqueue.models.entry import Entry
from taqueue.schemas.entry import EntryCreate, EntryResponse, MessageResponse
from taqueue.services import entry_service

router = APIRouter(prefix="/api/guest", tags=["entries"])

ALLOWED_METHODS = ["GET", "POST", "DELETE"]


@router.get(
    "",
    response_model=list[EntryResponse],
    summary="List queue entries in arrival order",
)
async def list_entries(
    page_name: str | None = Query(None, alias="pageName", description="Only entries on this page"),
    db: AsyncSession = Depends(get_db),
) -> list[Entry]:
    """Return entries oldest first. Unknown page names yield 404."""
    return await entry_service.list_entries(db, page_name)


@router.post(
    "",
    response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Join a queue",
)
async def create_entry(
    body: EntryCreate | None = None,
    db: AsyncSession = Depends(get_db),
) -> Entry:
    if body is None:
        body = EntryCreate()
    return await entry_service.create_entry(db, body.name, body.email, body.page_name)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Remove an entry from the queue",
)
async def delete_entry(
    entry_id: str | None = Query(None, alias="id", description="Entry UUID"),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Delete an entry by id. Succeeds even if the entry was already gone."""
    await entry_service.delete_entry(db, entry_id)
    return {"message": "Entry deleted"}


@router.api_route("", methods=["PUT", "PATCH", "OPTIONS", "HEAD"], include_in_schema=False)
async def entry_method_not_allowed(request: Request) -> None:
    raise MethodNotAllowedError(request.method, ALLOWED_METHODS)
