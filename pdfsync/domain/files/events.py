from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import DirectorySnapshot


class RawEventKind(str, Enum):
    """Нормализованные виды уведомлений файловой системы."""

    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"
    MOVED = "moved"


class MessageType(str, Enum):
    """Типы сообщений push-канала."""

    PDFS_UPDATED = "pdfs-updated"
    PDF_CHANGED = "pdf-changed"


@dataclass(frozen=True, slots=True)
class ListChanged:
    """Список файлов изменился - несёт свежий снимок целиком."""

    snapshot: DirectorySnapshot

    def to_message(self) -> dict:
        return {"type": MessageType.PDFS_UPDATED.value, "files": self.snapshot.as_list()}


@dataclass(frozen=True, slots=True)
class FileChanged:
    """Конкретный файл изменился - для наблюдателей, которые его сейчас смотрят."""

    name: str

    def to_message(self) -> dict:
        return {"type": MessageType.PDF_CHANGED.value, "name": self.name}

