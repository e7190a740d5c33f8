"""
Синхронизация наблюдателей с каталогом.

- SubscriberRegistry - подключённые наблюдатели и рассылка
- SyncEngine - реакция на уведомления файловой системы
"""

from .registry import Observer, SubscriberRegistry
from .engine import Notification, SyncEngine

__all__ = ["Observer", "SubscriberRegistry", "Notification", "SyncEngine"]
