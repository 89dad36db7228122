# focuswall/api/v1/routes/settings.py
from fastapi import APIRouter, Depends

from focuswall.api.deps import get_store
from focuswall.core.storage import BlobStorage
from focuswall.crud.settings import get_settings, update_settings
from focuswall.schemas.settings import AppSettings, SettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])

@router.get("", response_model=AppSettings)
async def read_settings(store: BlobStorage = Depends(get_store)):
    return await get_settings(store)

@router.patch("", response_model=AppSettings)
async def update_settings_endpoint(settings_in: SettingsUpdate, store: BlobStorage = Depends(get_store)):
    return await update_settings(settings_in, store)
