import os
from pathlib import Path
from typing import List, Union

from pdfsync.domain.files import DirectorySnapshot, FileDescriptor
from pdfsync.logging_config import get_logger

logger = get_logger("pdfsync.scanner")


class Scanner:
    def __init__(self, root: Union[str, Path], extension: str = ".pdf"):
        self.root = str(root)
        self.extension = extension

    def matches(self, name: str) -> bool:
        """Имя оканчивается на распознанное расширение (с учётом регистра)"""
        return name.endswith(self.extension)

    def scan(self) -> DirectorySnapshot:
        """
        Перечисляет каталог и возвращает свежий снимок распознанных файлов.

        Никогда не падает: отсутствующий или недоступный каталог даёт пустой
        снимок, файл с ошибкой stat() просто пропускается.
        """
        descriptors: List[FileDescriptor] = []

        try:
            # Один проход scandir: stat() у DirEntry кэшируется
            with os.scandir(self.root) as entries:
                for entry in entries:
                    # Фильтр по расширению сразу по имени (без stat)
                    if not self.matches(entry.name):
                        continue

                    try:
                        if not entry.is_file():
                            continue
                        stat_info = entry.stat()
                    except OSError:
                        # Файл исчез или недоступен между listdir и stat
                        continue

                    descriptors.append(FileDescriptor(
                        name=entry.name,
                        root=self.root,
                        modified_at=stat_info.st_mtime * 1000,
                    ))
        except OSError as e:
            logger.warning(f"⚠️ Directory unavailable, returning empty snapshot: {self.root} ({e})")
            return DirectorySnapshot()

        return DirectorySnapshot.from_descriptors(descriptors)
