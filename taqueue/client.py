"""HTTP client and view state for the queue's presentation layer.

:class:`QueueClient` speaks the JSON API. :class:`QueueBoard` keeps the
transient state a queue screen needs (form fields, the local entry list and
toast notifications) and never lets a failed request escape to the caller.

Usage::

    async with QueueClient("http://localhost:8000") as client:
        board = QueueBoard(client, "Room 101")
        await board.refresh()
        board.name, board.email = "Al Smith", "al@example.com"
        await board.submit()
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any

import httpx

from taqueue.schemas.entry import EntryResponse
from taqueue.schemas.page import PageListResponse, PageResponse, PageSummary
from taqueue.validation import is_valid_email

logger = logging.getLogger(__name__)


class QueueClientError(Exception):
    """A non-success response from the queue API."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class QueueClient:
    """Async client for the page and entry endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "QueueClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._http.request(method, url, **kwargs)
        if response.is_success:
            return response.json()
        try:
            message = response.json().get("error") or response.reason_phrase
        except ValueError:
            message = response.text or response.reason_phrase
        raise QueueClientError(response.status_code, message)

    async def list_pages(self) -> list[PageSummary]:
        data = await self._request("GET", "/api/page")
        return PageListResponse.model_validate(data).pages

    async def create_page(self, name: str) -> PageResponse:
        data = await self._request("POST", "/api/page", json={"name": name})
        return PageResponse.model_validate(data)

    async def list_entries(self, page_name: str | None = None) -> list[EntryResponse]:
        params = {"pageName": page_name} if page_name is not None else None
        data = await self._request("GET", "/api/guest", params=params)
        return [EntryResponse.model_validate(item) for item in data]

    async def add_entry(self, name: str, email: str, page_name: str | None = None) -> EntryResponse:
        payload = {"name": name, "email": email}
        if page_name is not None:
            payload["pageName"] = page_name
        data = await self._request("POST", "/api/guest", json=payload)
        return EntryResponse.model_validate(data)

    async def remove_entry(self, entry_id: str | uuid.UUID) -> str:
        data = await self._request("DELETE", "/api/guest", params={"id": str(entry_id)})
        return data["message"]


@dataclass
class Toast:
    level: str  # success, error
    message: str


@dataclass
class QueueBoard:
    """State behind one page's queue screen."""

    client: QueueClient
    page_name: str
    entries: list[EntryResponse] = field(default_factory=list)
    name: str = ""
    email: str = ""
    notifications: list[Toast] = field(default_factory=list)

    def _notify(self, level: str, message: str) -> None:
        self.notifications.append(Toast(level, message))

    async def refresh(self) -> None:
        """Replace the local list with the server's current queue."""
        try:
            self.entries = await self.client.list_entries(self.page_name)
        except (QueueClientError, httpx.HTTPError) as exc:
            logger.warning("Failed to load queue for %r: %s", self.page_name, exc)
            self._notify("error", "Failed to load the queue.")

    async def submit(self) -> bool:
        """Validate the form, add the entry and append it locally."""
        if not self.name.strip():
            self._notify("error", "Name is required")
            return False
        if not self.email.strip():
            self._notify("error", "Email is required")
            return False
        if not is_valid_email(self.email):
            self._notify("error", "Please enter a valid email address such as: example@example.com")
            return False

        try:
            entry = await self.client.add_entry(self.name, self.email, self.page_name)
        except QueueClientError as exc:
            logger.warning("Error adding guest: %s", exc)
            if exc.status_code == 400:
                self._notify("error", f"Error: {exc.message}")
            else:
                self._notify("error", "Failed to add guest.")
            return False
        except httpx.HTTPError as exc:
            logger.warning("Error adding guest: %s", exc)
            self._notify("error", "Failed to add guest.")
            return False

        self.entries = [*self.entries, entry]
        self.name = ""
        self.email = ""
        self._notify("success", "You have been added to the queue.")
        return True

    async def remove(self, entry_id: str | uuid.UUID) -> bool:
        """Remove an entry on the server, then drop it from the local list."""
        try:
            await self.client.remove_entry(entry_id)
        except (QueueClientError, httpx.HTTPError) as exc:
            logger.warning("Error removing guest: %s", exc)
            self._notify("error", "Failed to remove guest")
            return False

        target = str(entry_id)
        self.entries = [entry for entry in self.entries if str(entry.id) != target]
        self._notify("success", "Guest removed from the queue.")
        return True
