"""
PDF API - список файлов каталога и выдача одного файла.
"""
from typing import List

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from pdfsync.domain.files import InvalidFileName, PdfNotFound
from pdfsync.logging_config import get_logger

logger = get_logger("pdfsync.api.pdfs")

router = APIRouter(tags=["PDF"])


class FileInfo(BaseModel):
    """Модель файла в списке"""
    name: str = Field(..., description="Имя файла")
    path: str = Field(..., description="Путь к файлу внутри наблюдаемого каталога")
    modified: float = Field(..., description="Время модификации (мс с эпохи)")


class FileListResponse(BaseModel):
    """Снимок каталога"""
    files: List[FileInfo] = Field(default_factory=list, description="Файлы по имени, по возрастанию")
    watchedDir: str = Field(..., description="Абсолютный путь наблюдаемого каталога")


@router.get("/pdfs", response_model=FileListResponse)
def list_pdfs(request: Request):
    """
    Получить текущий список PDF.

    Всегда 200: отсутствующий или недоступный каталог даёт пустой files.
    """
    state = request.app.state
    snapshot = state.scanner.scan()
    return {"files": snapshot.as_list(), "watchedDir": str(state.watched_dir.resolve())}


@router.get("/pdf/{name:path}")
async def get_pdf(name: str, request: Request):
    """
    Получить PDF по имени.

    Имя приходит уже декодированным (percent-decoding делает Starlette).
    Конвертер :path нужен, чтобы закодированный "/" дошёл до проверки
    и получил 400, а не 404 от роутера.

    Returns:
        200 - файл (application/pdf)
        400 - некорректное имя
        404 - файла нет
    """
    gateway = request.app.state.gateway

    try:
        handle = gateway.resolve(name)
    except InvalidFileName:
        logger.info(f"[serve] Rejected invalid file request: {name}")
        raise HTTPException(status_code=400, detail="Invalid file")
    except PdfNotFound:
        logger.info(f"[serve] File not found: {name}")
        raise HTTPException(status_code=404, detail="Not found")

    logger.info(f"[serve] Serving PDF to client: {name}")
    return FileResponse(handle.path, media_type=handle.media_type)
