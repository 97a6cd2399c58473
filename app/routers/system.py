# app/routers/system.py
from fastapi import APIRouter, Depends, status
from app.core.config import Settings
from app.dependencies import get_app_settings, get_employee_service
from app.services import EmployeeService

router = APIRouter()


@router.get("/health", tags=["System"], summary="Health check",
            responses={200: {"description": "Service healthy"}})
def health():
    return {"status": "ok"}


@router.get("/info", tags=["System"], summary="App metadata",
            status_code=status.HTTP_200_OK)
def info(
    settings: Settings = Depends(get_app_settings),
    service: EmployeeService = Depends(get_employee_service),
):
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "storage": "in-memory",
        "employees": len(service.list()),
    }
