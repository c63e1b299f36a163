"""Shared API dependencies: single import point for all routers.

Re-exports the database session dependency so that router modules can import
everything they need from one place::

    from taqueue.api.deps import get_db
"""

from taqueue.database import get_db

__all__ = [
    "get_db",
]
