"""Инфраструктура: подписка на уведомления файловой системы (watchdog)."""

from .watcher import DirectoryEventHandler, DirectoryWatcher

__all__ = ["DirectoryEventHandler", "DirectoryWatcher"]
