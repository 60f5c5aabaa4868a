# employee_manager/routers/system.py
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from employee_manager.core.config import get_settings, Settings

router = APIRouter()

@router.get("/health", tags=["System"], summary="Health check",
            responses={200: {"description": "Service healthy"}})
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

@router.get("/info", tags=["System"], summary="App metadata",
            status_code=status.HTTP_200_OK)
def info(settings: Settings = Depends(get_settings)):
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "rpc": settings.RPC_PREFIX,
    }
