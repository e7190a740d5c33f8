"""
File Access Gateway - безопасная выдача одного PDF по имени.

Защита от path traversal: имя проверяется целиком ДО обращения к диску и
используется как один сегмент пути. Имя должно прийти уже декодированным
(percent-decoding делает транспортный слой), иначе проверку можно обойти
закодированным "..".
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pdfsync.domain.files import InvalidFileName, PdfNotFound


PATH_SEPARATORS = ("/", "\\")
PARENT_TOKEN = ".."


@dataclass(frozen=True, slots=True)
class FileHandle:
    """Проверенный файл, готовый к потоковой отдаче."""

    name: str
    path: Path
    media_type: str


class FileGateway:
    def __init__(self, root: Union[str, Path], extension: str = ".pdf", media_type: str = "application/pdf"):
        self.root = Path(root)
        self.extension = extension
        self.media_type = media_type

    def validate_name(self, name: str) -> None:
        """
        Проверяет имя файла, порядок проверок фиксирован.

        Raises:
            InvalidFileName: Неверное расширение, разделитель пути или ".."
        """
        if not name.endswith(self.extension):
            raise InvalidFileName(name, "Unsupported extension")

        if any(separator in name for separator in PATH_SEPARATORS):
            raise InvalidFileName(name, "Path separator in name")

        if PARENT_TOKEN in name:
            raise InvalidFileName(name, "Parent directory token in name")

    def resolve(self, name: str) -> FileHandle:
        """
        Проверяет имя и находит файл в наблюдаемом каталоге.

        Args:
            name: Декодированное имя файла (например "report.pdf")

        Returns:
            FileHandle: Путь и content type для отдачи

        Raises:
            InvalidFileName: Имя не прошло проверку (400)
            PdfNotFound: Файла нет или он не читается (404)
        """
        self.validate_name(name)

        file_path = self.root / name
        try:
            readable = file_path.is_file() and os.access(file_path, os.R_OK)
        except OSError:
            # Например ENAMETOOLONG: имя длиннее NAME_MAX
            readable = False
        if not readable:
            raise PdfNotFound(name, "File not found")

        return FileHandle(name=name, path=file_path, media_type=self.media_type)


def resolve(name: str, root: Union[str, Path], extension: str = ".pdf") -> FileHandle:
    """Разовая проверка без создания FileGateway вручную."""
    return FileGateway(root, extension=extension).resolve(name)
