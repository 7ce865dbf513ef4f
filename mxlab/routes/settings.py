from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from mxlab.services.navigation_service import NavigationService

router = APIRouter(prefix="/settings", tags=["settings"])


class SettingsSaveRequest(BaseModel):
    data: dict


def _service(request: Request) -> NavigationService:
    return request.app.state.navigation_service


@router.get("")
async def get_settings(request: Request) -> dict:
    return {"settings": _service(request).settings.get()}


@router.post("/save")
async def save_settings(payload: SettingsSaveRequest, request: Request) -> dict:
    service = _service(request)
    try:
        settings = service.settings.save(payload.data)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    service.reload()
    return {"settings": settings}
