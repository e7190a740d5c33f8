"""
API роуты PDF Sync.

Структура эндпоинтов:
- /health - проверка здоровья
- /api/pdfs - список PDF в каталоге
- /api/pdf/{name} - содержимое одного PDF
- /ws - push-канал изменений
"""
from fastapi import APIRouter

from .health import router as health_router
from .pdfs import router as pdfs_router
from .ws import router as ws_router

router = APIRouter()
router.include_router(health_router)
router.include_router(pdfs_router, prefix="/api")
router.include_router(ws_router)

__all__ = ["router"]
