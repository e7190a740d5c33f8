from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True, slots=True)
class FileDescriptor:
    """Один распознанный файл в наблюдаемом каталоге."""

    name: str
    root: str
    modified_at: float  # mtime в миллисекундах с эпохи

    @property
    def full_path(self) -> str:
        """Путь до файла внутри наблюдаемого каталога."""
        return os.path.join(self.root, self.name)

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.full_path,
            "modified": self.modified_at,
        }


@dataclass(frozen=True, slots=True)
class DirectorySnapshot:
    """
    Полный снимок каталога на один момент времени.

    Упорядочен по имени (по кодовым точкам, с учётом регистра), без дублей.
    Снимок не патчится - каждое сканирование строит новый.
    """

    files: tuple[FileDescriptor, ...] = field(default_factory=tuple)

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[FileDescriptor]) -> "DirectorySnapshot":
        # При дублях побеждает последний
        by_name = {descriptor.name: descriptor for descriptor in descriptors}
        return cls(files=tuple(by_name[name] for name in sorted(by_name)))

    @property
    def names(self) -> list[str]:
        return [descriptor.name for descriptor in self.files]

    def get(self, name: str) -> Optional[FileDescriptor]:
        for descriptor in self.files:
            if descriptor.name == name:
                return descriptor
        return None

    def as_list(self) -> list[dict]:
        return [descriptor.as_dict() for descriptor in self.files]

    def __iter__(self) -> Iterator[FileDescriptor]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)
