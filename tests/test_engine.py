"""
Тесты движка синхронизации: фильтр, пара рассылок, порядок реакций
"""
import asyncio
import threading

from pdfsync.application.files import Scanner
from pdfsync.application.sync import SubscriberRegistry, SyncEngine


class RecordingObserver:
    """Наблюдатель, запоминающий сообщения"""

    is_open = True

    def __init__(self):
        self.messages = []

    async def send(self, message: dict) -> None:
        self.messages.append(message)


def build_engine(pdf_dir, observers_count: int = 2):
    registry = SubscriberRegistry()
    observers = [RecordingObserver() for _ in range(observers_count)]
    for observer in observers:
        registry.register(observer)
    return SyncEngine(Scanner(pdf_dir), registry), observers


async def drain(engine: SyncEngine) -> None:
    """Запускает потребителя, ждёт пока канал опустеет, останавливает"""
    engine.start()
    await engine.channel.join()
    await engine.stop()


class TestSyncEngine:
    """Реакция на уведомления файловой системы"""

    def test_qualifying_change_broadcasts_list_then_file(self, pdf_dir, make_pdf):
        """Каждый наблюдатель получает ровно pdfs-updated и затем pdf-changed"""
        make_pdf("a.pdf")
        engine, observers = build_engine(pdf_dir)
        make_pdf("b.pdf")

        handled = asyncio.run(engine.handle_notification("created", "b.pdf"))

        assert handled is True
        expected_files = Scanner(pdf_dir).scan().as_list()
        for observer in observers:
            assert observer.messages == [
                {"type": "pdfs-updated", "files": expected_files},
                {"type": "pdf-changed", "name": "b.pdf"},
            ]
        assert [f["name"] for f in expected_files] == ["a.pdf", "b.pdf"]

    def test_non_qualifying_change_is_ignored(self, pdf_dir, make_pdf):
        """Другое расширение - ни одной рассылки"""
        engine, observers = build_engine(pdf_dir)
        make_pdf("notes.txt")

        assert asyncio.run(engine.handle_notification("created", "notes.txt")) is False
        assert asyncio.run(engine.handle_notification("modified", "SCAN.PDF")) is False
        assert asyncio.run(engine.handle_notification("modified", None)) is False
        assert all(observer.messages == [] for observer in observers)

    def test_kind_does_not_matter(self, pdf_dir, make_pdf):
        """Список берётся с диска, а не из вида уведомления"""
        make_pdf("kept.pdf")
        engine, observers = build_engine(pdf_dir, observers_count=1)

        # "deleted" для файла, который на самом деле есть
        asyncio.run(engine.handle_notification("deleted", "kept.pdf"))

        files = observers[0].messages[0]["files"]
        assert [f["name"] for f in files] == ["kept.pdf"]

    def test_deleted_file_disappears_from_list(self, pdf_dir, make_pdf):
        """После удаления список пересчитывается без файла"""
        path = make_pdf("gone.pdf")
        make_pdf("stay.pdf")
        engine, observers = build_engine(pdf_dir, observers_count=1)
        path.unlink()

        asyncio.run(engine.handle_notification("deleted", "gone.pdf"))

        update, changed = observers[0].messages
        assert [f["name"] for f in update["files"]] == ["stay.pdf"]
        assert changed == {"type": "pdf-changed", "name": "gone.pdf"}

    def test_snapshot_is_cached_between_events(self, pdf_dir, make_pdf):
        """current_snapshot хранит последний вычисленный снимок"""
        engine, _ = build_engine(pdf_dir, observers_count=0)
        assert engine.current_snapshot.names == []

        make_pdf("a.pdf")
        assert engine.current_snapshot.names == []

        asyncio.run(engine.handle_notification("created", "a.pdf"))
        assert engine.current_snapshot.names == ["a.pdf"]

    def test_channel_reactions_do_not_interleave(self, pdf_dir, make_pdf):
        """Уведомления из канала разбираются по одному, в порядке поступления"""
        make_pdf("one.pdf")
        make_pdf("two.pdf")
        engine, observers = build_engine(pdf_dir, observers_count=1)

        async def scenario():
            engine.notify("modified", "one.pdf")
            engine.notify("modified", "ignored.txt")
            engine.notify("modified", "two.pdf")
            await drain(engine)

        asyncio.run(scenario())

        types = [(m["type"], m.get("name")) for m in observers[0].messages]
        assert types == [
            ("pdfs-updated", None),
            ("pdf-changed", "one.pdf"),
            ("pdfs-updated", None),
            ("pdf-changed", "two.pdf"),
        ]

    def test_threadsafe_callback_from_watcher_thread(self, pdf_dir, make_pdf):
        """Callback для watcher'а можно звать из другого потока"""
        make_pdf("remote.pdf")
        engine, observers = build_engine(pdf_dir, observers_count=1)

        async def scenario():
            callback = engine.threadsafe_callback(asyncio.get_running_loop())
            thread = threading.Thread(target=callback, args=("created", "remote.pdf"))
            thread.start()
            thread.join()
            # call_soon_threadsafe: уведомление попадёт в канал на следующей итерации loop
            await asyncio.sleep(0)
            await drain(engine)

        asyncio.run(scenario())

        assert observers[0].messages[-1] == {"type": "pdf-changed", "name": "remote.pdf"}

    def test_failing_observer_does_not_stop_engine(self, pdf_dir, make_pdf):
        """Ошибка доставки поглощается, остальные получают сообщения"""
        make_pdf("a.pdf")
        engine, observers = build_engine(pdf_dir, observers_count=1)

        class Broken(RecordingObserver):
            async def send(self, message):
                raise ConnectionError("gone")

        engine.registry.register(Broken())

        assert asyncio.run(engine.handle_notification("modified", "a.pdf")) is True
        assert len(observers[0].messages) == 2
