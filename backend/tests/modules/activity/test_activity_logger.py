"""Tests for the fire-and-forget activity logger."""

import asyncio
import threading

import pytest
from unittest.mock import MagicMock

from shared.models import ClientContext
from modules.activity.models import ActivityLogEntry, LogCategory
from modules.activity.repository import ActivityLogRepository
from modules.activity.service import ActivityLogger

from tests.conftest import create_mock_db, mock_result


@pytest.fixture
def repository():
    return MagicMock(spec=ActivityLogRepository)


@pytest.fixture
def activity(repository):
    return ActivityLogger(repository, default_context=ClientContext(hostname="host-1"))


class TestInlineWrites:
    def test_log_writes_inline_when_not_started(self, activity, repository):
        """Without a worker the entry is inserted immediately."""
        assert activity.log("user-1", LogCategory.AUTH, "signed_out", {"email": "a@b.c"}) is True

        repository.insert.assert_called_once()
        entry, context = repository.insert.call_args.args
        assert entry.category == LogCategory.AUTH
        assert entry.action == "signed_out"
        assert entry.details == {"email": "a@b.c"}
        assert context.hostname == "host-1"

    def test_explicit_context_wins(self, activity, repository):
        ctx = ClientContext(hostname="10.0.0.1", user_agent="pytest")
        activity.log("user-1", LogCategory.ADMIN, "delete_user", context=ctx)

        assert repository.insert.call_args.args[1] is ctx

    def test_insert_failure_never_raises(self, activity, repository):
        """A failed insert is reported and dropped."""
        repository.insert.side_effect = Exception("connection refused")

        assert activity.log("user-1", LogCategory.SHOP, "update_purchase_status") is False

    def test_empty_action_is_discarded(self, activity, repository):
        assert activity.log("user-1", LogCategory.SHOP, "") is False
        repository.insert.assert_not_called()

    def test_anonymous_entry_allowed(self, activity, repository):
        assert activity.log(None, LogCategory.SYSTEM, "startup") is True
        assert repository.insert.call_args.args[0].user_id is None


class TestBackgroundWorker:
    @pytest.mark.asyncio
    async def test_entries_are_written_by_worker(self, activity, repository):
        await activity.start()
        assert activity.is_running

        activity.log("user-1", LogCategory.AUTH, "session_restored")
        activity.log("user-1", LogCategory.AUTH, "signed_out")
        await activity.flush()

        actions = [c.args[0].action for c in repository.insert.call_args_list]
        assert sorted(actions) == ["session_restored", "signed_out"]
        await activity.stop()
        assert not activity.is_running

    @pytest.mark.asyncio
    async def test_enqueue_does_not_block_on_insert(self, activity, repository):
        """enqueue() returns before the row is written."""
        await activity.start()

        assert activity.log("user-1", LogCategory.AUTH, "signed_out") is True
        repository.insert.assert_not_called()

        await activity.stop()
        repository.insert.assert_called_once()

    @pytest.mark.asyncio
    async def test_worker_survives_insert_failure(self, activity, repository):
        repository.insert.side_effect = [Exception("boom"), None]
        await activity.start()

        activity.log("user-1", LogCategory.AUTH, "first")
        activity.log("user-1", LogCategory.AUTH, "second")
        await activity.flush()

        assert repository.insert.call_count == 2
        await activity.stop()

    @pytest.mark.asyncio
    async def test_queue_overflow_drops_entry(self, repository):
        activity = ActivityLogger(repository, max_pending=1)
        await activity.start()

        assert activity.log("user-1", LogCategory.AUTH, "first") is True
        assert activity.log("user-1", LogCategory.AUTH, "second") is False

        await activity.stop()
        repository.insert.assert_called_once()

    @pytest.mark.asyncio
    async def test_enqueue_from_another_thread(self, activity, repository):
        await activity.start()
        entry = ActivityLogEntry(user_id="user-1", category=LogCategory.AUTH, action="signed_in")

        thread = threading.Thread(target=activity.enqueue, args=(entry,))
        thread.start()
        thread.join()
        # Let the loop run the scheduled put
        await asyncio.sleep(0)
        await activity.flush()

        repository.insert.assert_called_once()
        await activity.stop()

    @pytest.mark.asyncio
    async def test_start_twice_is_noop(self, activity):
        await activity.start()
        await activity.start()
        assert activity.is_running
        await activity.stop()
        await activity.stop()

    @pytest.mark.asyncio
    async def test_restart_drains_new_queue(self, activity, repository):
        await activity.start()
        activity.log("user-1", LogCategory.AUTH, "first")
        await activity.stop()

        await activity.start()
        activity.log("user-1", LogCategory.AUTH, "second")
        await activity.flush()

        actions = [c.args[0].action for c in repository.insert.call_args_list]
        assert actions == ["first", "second"]
        await activity.stop()


class TestListActivity:
    @pytest.mark.asyncio
    async def test_list_activity_maps_rows(self):
        db = create_mock_db()
        db.table.return_value.execute.return_value = mock_result([
            {
                "id": "log-1",
                "user_id": "user-1",
                "category": "shop",
                "action": "update_purchase_status",
                "details": {"purchase_id": "p-1"},
                "ip_address": "host-1",
                "user_agent": None,
                "created_at": "2024-01-01T00:00:00Z",
            }
        ])
        activity = ActivityLogger(ActivityLogRepository(db))

        logs = await activity.list_activity("user-1", LogCategory.SHOP, limit=10)

        assert len(logs) == 1
        assert logs[0].category == LogCategory.SHOP
        assert logs[0].details == {"purchase_id": "p-1"}
        db.table.assert_called_with("activity_logs")
        db.table.return_value.limit.assert_called_with(10)

    @pytest.mark.asyncio
    async def test_list_activity_returns_empty_on_error(self, activity, repository):
        repository.list_for_user.side_effect = Exception("timeout")

        assert await activity.list_activity("user-1") == []


class TestRepositoryInsert:
    def test_insert_row_shape(self):
        db = create_mock_db()
        repo = ActivityLogRepository(db)
        entry = ActivityLogEntry(
            user_id="user-1",
            category=LogCategory.ADMIN,
            action="api_key_used",
            details={"key_id": "key-1"},
        )

        repo.insert(entry, ClientContext(hostname="host-1", user_agent="cli"))

        db.table.assert_called_with("activity_logs")
        db.table.return_value.insert.assert_called_once_with({
            "user_id": "user-1",
            "category": "admin",
            "action": "api_key_used",
            "details": {"key_id": "key-1"},
            "ip_address": "host-1",
            "user_agent": "cli",
        })
