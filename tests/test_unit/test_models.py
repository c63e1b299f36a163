"""Tests for the table mappings."""

from sqlalchemy import inspect

from taqueue.models import Entry, Page


class TestMappings:
    def test_tables(self):
        assert Page.__tablename__ == "pages"
        assert Entry.__tablename__ == "queue"

    def test_no_relationships(self):
        """Pages and entries are joined by page_id only."""
        assert not inspect(Page).relationships
        assert not inspect(Entry).relationships

    def test_page_name_unique(self):
        assert Page.__table__.c.name.unique is True

    def test_page_id_nullable(self):
        assert Entry.__table__.c.page_id.nullable is True
