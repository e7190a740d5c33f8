"""Ошибки доступа к файлам наблюдаемого каталога."""


class FileAccessError(Exception):
    """Базовая ошибка запроса файла."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{reason}: {name}")
        self.name = name
        self.reason = reason


class InvalidFileName(FileAccessError):
    """Имя некорректно или пытается выйти за пределы каталога (400)."""


class PdfNotFound(FileAccessError):
    """Имя корректно, но файла нет или он не читается (404)."""
