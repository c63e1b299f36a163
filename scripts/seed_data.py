"""Seed the database with demo pages and a few queued students.

Goes through the page and entry services, so the seeded rows are sanitized
and validated exactly like API submissions.

Run from the project root:
    python -m scripts.seed_data
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select

from taqueue.database import dispose_engine, get_session_factory
from taqueue.models.entry import Entry
from taqueue.models.page import Page
from taqueue.services.entry_service import create_entry
from taqueue.services.page_service import create_page

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

PAGES = {
    "Room 101": [
        ("Al Smith", "al@example.com"),
        ("Bea Nguyen", "bea.nguyen@example.com"),
        ("Carlos Ortega", "carlos@example.edu"),
    ],
    "CS 61A Office Hours": [
        ("Dana Kim", "dana.kim@example.edu"),
        ("Eli Brooks", "eli@example.org"),
    ],
}


# ---------------------------------------------------------------------------
# Main seed function
# ---------------------------------------------------------------------------


async def seed() -> None:
    """Create the demo pages and their queues.

    Idempotent: existing demo pages and their entries are deleted first.
    """
    async with get_session_factory()() as session:
        result = await session.execute(select(Page).where(Page.name.in_(PAGES)))
        existing = list(result.scalars().all())
        if existing:
            print(f"Demo pages already exist ({len(existing)}). Deleting and re-seeding...")
            page_ids = [page.id for page in existing]
            await session.execute(delete(Entry).where(Entry.page_id.in_(page_ids)))
            await session.execute(delete(Page).where(Page.id.in_(page_ids)))
            await session.flush()

        entry_count = 0
        for page_name, people in PAGES.items():
            page = await create_page(session, page_name)
            print(f"   {page.name} (id={page.id})")
            for name, email in people:
                await create_entry(session, name, email, page.name)
                entry_count += 1

        await session.commit()

    await dispose_engine()

    print()
    print("=" * 60)
    print("Seed Summary")
    print("=" * 60)
    print(f"   Pages:   {len(PAGES)}")
    print(f"   Entries: {entry_count}")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(seed())
