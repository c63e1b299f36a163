"""Page registry API router."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from taqueue.api.deps import get_db
from taqueue.errors import MethodNotAllowedError
from taqueue.models.page import Page
from taqueue.schemas.page import PageCreate, PageListResponse, PageResponse
from taqueue.services import page_service

router = APIRouter(prefix="/api/page", tags=["pages"])

ALLOWED_METHODS = ["GET", "POST"]


@router.post(
    "",
    response_model=PageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new page",
)
async def create_page(
    body: PageCreate | None = None,
    db: AsyncSession = Depends(get_db),
) -> Page:
    """Create a named page. Names are sanitized and must be unique."""
    # A missing body is reported by the service as a missing name
    if body is None:
        body = PageCreate()
    return await page_service.create_page(db, body.name)


@router.get(
    "",
    response_model=PageListResponse,
    summary="List all pages",
)
async def list_pages(db: AsyncSession = Depends(get_db)) -> dict:
    pages = await page_service.list_pages(db)
    return {"pages": pages}


@router.api_route("", methods=["PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"], include_in_schema=False)
async def page_method_not_allowed(request: Request) -> None:
    raise MethodNotAllowedError(request.method, ALLOWED_METHODS)
