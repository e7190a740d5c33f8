"""
Health check endpoint.
"""
from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    state = request.app.state
    return {
        "status": "healthy",
        "service": state.settings.APP_NAME,
        "observers": len(state.registry),
        "watching": state.watcher is not None and state.watcher.is_running(),
    }
