from modules.notifications.models import NotificationVariant
from modules.notifications.service import NotificationCenter


class TestNotificationCenter:
    def test_success(self):
        center = NotificationCenter()
        note = center.success("Статус покупки обновлен")

        assert note.title == "Успех"
        assert note.variant == NotificationVariant.DEFAULT
        assert center.latest() is note

    def test_error(self):
        note = NotificationCenter().error("Не удалось обновить статус покупки")

        assert note.title == "Ошибка"
        assert note.variant == NotificationVariant.DESTRUCTIVE

    def test_bounded(self):
        center = NotificationCenter(max_items=2)
        for i in range(3):
            center.success(str(i))

        assert [n.description for n in center.recent()] == ["1", "2"]
        assert [n.description for n in center.recent(limit=1)] == ["2"]

    def test_recent_limit_edges(self):
        center = NotificationCenter()
        for i in range(3):
            center.success(str(i))

        assert center.recent(limit=0) == []
        assert [n.description for n in center.recent(limit=5)] == ["0", "1", "2"]
        assert len(center.recent(limit=-1)) == 3

    def test_clear(self):
        center = NotificationCenter()
        center.success("x")
        center.clear()
        assert center.latest() is None
        assert center.recent() == []
