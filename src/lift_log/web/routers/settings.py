"""Display settings routes."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...db import SettingsRepository

router = APIRouter(prefix="/settings", tags=["settings"])


class DarkModeIn(BaseModel):
    enabled: bool


@router.get("/dark-mode")
async def get_dark_mode(request: Request):
    repo = SettingsRepository(request.app.state.tracker.storage)
    return {"enabled": await repo.get_dark_mode()}


@router.put("/dark-mode")
async def set_dark_mode(request: Request, body: DarkModeIn):
    repo = SettingsRepository(request.app.state.tracker.storage)
    await repo.set_dark_mode(body.enabled)
    return {"enabled": body.enabled}
