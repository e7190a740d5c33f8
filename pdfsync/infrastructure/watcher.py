"""
Change Watcher - подписка на уведомления файловой системы через watchdog.

Механически переводит события watchdog в (kind, name), где name - путь
относительно наблюдаемого каталога. Релевантность (расширение) здесь НЕ
проверяется, это делает SyncEngine.

Callback вызывается из потока watchdog Observer'а.
"""
import os
from pathlib import Path
from typing import Callable, Optional, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from pdfsync.domain.files import RawEventKind
from pdfsync.logging_config import get_logger

logger = get_logger("pdfsync.watcher")

WatchCallback = Callable[[str, str], None]

# События открытия и закрытия ("opened", "closed", "closed_no_write") не пробрасываются:
# запись уже пришла как "modified", а каждая отдача PDF клиенту вызывала бы рассылку.
EVENT_KINDS = {
    "created": RawEventKind.CREATED,
    "modified": RawEventKind.MODIFIED,
    "deleted": RawEventKind.DELETED,
    "moved": RawEventKind.MOVED,
}


class DirectoryEventHandler(FileSystemEventHandler):
    """Нормализует события watchdog и передаёт их в callback."""

    def __init__(self, root: Union[str, Path], callback: WatchCallback):
        self.root = os.path.abspath(root)
        self.callback = callback

    def _relative_name(self, raw_path) -> str:
        path = os.fsdecode(raw_path)
        return os.path.relpath(os.path.abspath(path), self.root)

    def on_any_event(self, event: FileSystemEvent) -> None:
        kind = EVENT_KINDS.get(event.event_type)
        if kind is None:
            return

        self.callback(kind.value, self._relative_name(event.src_path))

        # Переименование: уведомляем и о старом, и о новом имени
        dest_path = getattr(event, "dest_path", None)
        if kind is RawEventKind.MOVED and dest_path:
            self.callback(kind.value, self._relative_name(dest_path))


class DirectoryWatcher:
    """
    Одна подписка на каталог на всё время жизни процесса.

    Пересоздаётся только при остановке процесса.
    """

    def __init__(self, root: Union[str, Path], recursive: bool = False):
        self.root = Path(root)
        self.recursive = recursive
        self.observer: Optional[Observer] = None

    def start(self, callback: WatchCallback) -> None:
        """
        Запускает наблюдение.

        Args:
            callback: Функция (kind, name), вызывается из потока watchdog
        """
        if self.observer is not None:
            logger.warning("Watcher already started")
            return

        handler = DirectoryEventHandler(self.root, callback)
        self.observer = Observer()
        self.observer.schedule(handler, str(self.root), recursive=self.recursive)
        self.observer.daemon = True
        self.observer.start()
        logger.info(f"👀 Watching {self.root} (recursive={self.recursive})")

    def stop(self) -> None:
        if self.observer is None:
            return

        self.observer.stop()
        self.observer.join()
        self.observer = None
        logger.info("File watcher stopped")

    def is_running(self) -> bool:
        return self.observer is not None and self.observer.is_alive()
