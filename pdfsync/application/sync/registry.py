from __future__ import annotations

from typing import Protocol, Set, runtime_checkable

from pdfsync.logging_config import get_logger

logger = get_logger("pdfsync.registry")


@runtime_checkable
class Observer(Protocol):
    """Подключённый получатель push-уведомлений."""

    @property
    def is_open(self) -> bool: ...

    async def send(self, message: dict) -> None: ...


class SubscriberRegistry:
    """Множество подключённых наблюдателей и рассылка им сообщений."""

    def __init__(self) -> None:
        self._observers: Set[Observer] = set()

    def register(self, observer: Observer) -> None:
        self._observers.add(observer)
        logger.debug("Observer registered | total=%s", len(self._observers))

    def unregister(self, observer: Observer) -> None:
        """Удаляет наблюдателя; повторный вызов - no-op."""
        self._observers.discard(observer)
        logger.debug("Observer unregistered | total=%s", len(self._observers))

    async def broadcast(self, message: dict) -> int:
        """
        Отправляет сообщение всем зарегистрированным наблюдателям.

        Ошибка отправки одному наблюдателю не мешает остальным и не пробрасывается.
        Отвалившегося наблюдателя отсюда не удаляем - это сделает его обработчик
        закрытия соединения.

        Returns:
            int: Количество успешных доставок
        """
        delivered = 0
        # Копия: обработчик закрытия может изменить множество во время await
        for observer in list(self._observers):
            if not observer.is_open:
                continue
            try:
                await observer.send(message)
                delivered += 1
            except Exception as e:
                logger.warning("⚠️ Delivery failed | observer=%r type=%s error=%s", observer, message.get("type"), e)
        return delivered

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers

    def __len__(self) -> int:
        return len(self._observers)
