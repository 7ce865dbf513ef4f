from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from mxlab.reconciler import NavigationReconciler
from mxlab.services.navigation_service import NavigationService

router = APIRouter(prefix="/navigation", tags=["navigation"])


class RouteChangeRequest(BaseModel):
    path: str


class MenuClickRequest(BaseModel):
    item_id: str
    has_children: Optional[bool] = None
    children: Optional[List[str]] = None


class SubItemClickRequest(BaseModel):
    sub_item_id: str


def _service(request: Request) -> NavigationService:
    return request.app.state.navigation_service


def _reconciler(service: NavigationService, client_id: str) -> NavigationReconciler:
    try:
        store = service.client_store(client_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return service.reconciler_for(store)


def _state_payload(service: NavigationService, reconciler: NavigationReconciler) -> dict:
    return {
        "state": service.describe_state(reconciler.state),
        "sidebar": service.sidebar(reconciler.state),
    }


@router.get("/menu")
async def get_menu(request: Request) -> dict:
    service = _service(request)
    return {"menu": service.menu(), "default_item": service.config.default_item_id}


@router.get("/{client_id}/state")
async def get_state(client_id: str, request: Request) -> dict:
    service = _service(request)
    reconciler = _reconciler(service, client_id)
    return _state_payload(service, reconciler)


@router.post("/{client_id}/route")
async def route_changed(client_id: str, data: RouteChangeRequest, request: Request) -> dict:
    service = _service(request)
    reconciler = _reconciler(service, client_id)
    reconciler.on_route_changed(data.path)
    return _state_payload(service, reconciler)


@router.post("/{client_id}/menu")
async def menu_item_clicked(client_id: str, data: MenuClickRequest, request: Request) -> dict:
    service = _service(request)
    reconciler = _reconciler(service, client_id)
    if data.has_children is None and data.children is None:
        intent = service.menu_item_click(reconciler, data.item_id)
    else:
        children = data.children or []
        has_children = data.has_children if data.has_children is not None else bool(children)
        intent = reconciler.on_menu_item_clicked(data.item_id, has_children, children)
    payload = _state_payload(service, reconciler)
    payload["navigate"] = service.describe_intent(intent)
    return payload


@router.post("/{client_id}/sub-item")
async def sub_item_clicked(client_id: str, data: SubItemClickRequest, request: Request) -> dict:
    service = _service(request)
    reconciler = _reconciler(service, client_id)
    intent = reconciler.on_sub_item_clicked(data.sub_item_id)
    payload = _state_payload(service, reconciler)
    payload["navigate"] = service.describe_intent(intent)
    return payload
