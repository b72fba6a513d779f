"""Tests for shared/repository.py."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_subclass_can_access_db(self):
        """Subclass should be able to access _db and use it."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                result = self._db.table("test").select("*").execute()
                return result.data

        repo = TestRepository(mock_db)
        result = repo.get_all()

        assert result == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("test")


class TestParseDatetime:
    def test_none(self):
        assert BaseRepository._parse_datetime(None) is None

    def test_zulu_suffix(self):
        parsed = BaseRepository._parse_datetime("2024-01-01T10:00:00Z")
        assert parsed == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)

    def test_postgres_offset(self):
        parsed = BaseRepository._parse_datetime("2024-01-01T10:00:00.123456+00:00")
        assert parsed.tzinfo is not None
        assert parsed.microsecond == 123456

    def test_naive_is_utc(self):
        parsed = BaseRepository._parse_datetime("2024-01-01T10:00:00")
        assert parsed.tzinfo == timezone.utc

    def test_datetime_passthrough(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert BaseRepository._parse_datetime(value) is value
