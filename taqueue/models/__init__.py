"""SQLAlchemy models for TA Queue.

All models are imported here so that Alembic and the test suite can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from taqueue.models.entry import Entry
from taqueue.models.page import Page

__all__ = [
    "Entry",
    "Page",
]
