"""
Synchronization Engine - реакция на изменения каталога.

=== ПРОТОКОЛ РЕАКЦИИ ===
На каждое уведомление файловой системы (kind, name):
1. Имя не оканчивается на расширение → игнор, никаких рассылок
2. Рассылка "pdfs-updated" со СВЕЖИМ снимком каталога (пересканирование)
3. Рассылка "pdf-changed" с именем файла

Снимок всегда пересчитывается с диска целиком: вид уведомления не используется,
т.к. на разных платформах он ненадёжен (rename = delete+create, запись через
временный файл, склейка событий). Диффа и окна батчинга нет.

=== ПОРЯДОК ===
Уведомления идут через asyncio.Queue и разбираются одной задачей-потребителем,
поэтому реакции не перемешиваются и выполняются в порядке поступления.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Optional, Tuple

from pdfsync.application.files.scanner import Scanner
from pdfsync.domain.files import DirectorySnapshot, FileChanged, ListChanged
from pdfsync.logging_config import get_logger

from .registry import SubscriberRegistry

logger = get_logger("pdfsync.engine")

Notification = Tuple[str, str]


class SyncEngine:
    """Оркестратор: уведомления → пересканирование → рассылка."""

    def __init__(
        self,
        scanner: Scanner,
        registry: SubscriberRegistry,
        channel: Optional[asyncio.Queue] = None,
    ):
        self.scanner = scanner
        self.registry = registry
        self.channel: asyncio.Queue = channel if channel is not None else asyncio.Queue()
        self._snapshot = DirectorySnapshot()
        self._consumer: Optional[asyncio.Task] = None

    @property
    def current_snapshot(self) -> DirectorySnapshot:
        """Последний вычисленный снимок (кэш между событиями)."""
        return self._snapshot

    def refresh(self) -> DirectorySnapshot:
        """Пересканирует каталог и обновляет кэш."""
        self._snapshot = self.scanner.scan()
        return self._snapshot

    def is_relevant(self, name: Optional[str]) -> bool:
        return bool(name) and self.scanner.matches(name)

    # --- Канал уведомлений --------------------------------------------------
    def notify(self, kind: str, name: str) -> None:
        """Кладёт уведомление в канал. Вызывать только из потока event loop."""
        self.channel.put_nowait((kind, name))

    def threadsafe_callback(self, loop: asyncio.AbstractEventLoop) -> Callable[[str, str], None]:
        """Callback для watcher'а, который работает в своём потоке."""

        def callback(kind: str, name: str) -> None:
            loop.call_soon_threadsafe(self.notify, kind, name)

        return callback

    # --- Реакция ------------------------------------------------------------
    async def handle_notification(self, kind: str, name: Optional[str]) -> bool:
        """
        Обрабатывает одно уведомление.

        Returns:
            bool: True если уведомление прошло фильтр и было разослано
        """
        if not self.is_relevant(name):
            return False

        logger.info(f"[watch] {kind}: {name}")

        snapshot = self.refresh()
        await self.registry.broadcast(ListChanged(snapshot).to_message())
        await self.registry.broadcast(FileChanged(name).to_message())
        return True

    async def run(self) -> None:
        """Разбирает канал уведомлений по одному, пока задачу не отменят."""
        while True:
            kind, name = await self.channel.get()
            try:
                await self.handle_notification(kind, name)
            except Exception as e:
                logger.error(f"❌ Error while reacting to {kind}: {name}: {e}", exc_info=True)
            finally:
                self.channel.task_done()

    def start(self) -> asyncio.Task:
        if self._consumer is None or self._consumer.done():
            self.refresh()
            self._consumer = asyncio.create_task(self.run(), name="pdfsync-engine")
        return self._consumer

    async def stop(self) -> None:
        if self._consumer is None:
            return
        self._consumer.cancel()
        try:
            await self._consumer
        except asyncio.CancelledError:
            pass
        self._consumer = None
