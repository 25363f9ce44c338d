"""
Store settings API endpoints.

Admin endpoints read and write typed settings per group; the public endpoint
exposes only settings flagged ``is_public`` for storefront use.
"""

from fastapi import APIRouter, Depends

from ..core.exceptions import SettingNotFoundError
from ..core.response import CommerceResponse
from ..models.store import Store
from ..schemas.envelope import ErrorResponse, SuccessResponse
from ..schemas.setting import SettingsGroup, SettingsGroupUpdate
from ..services.settings_service import SettingsService
from .dependencies import get_settings_service, require_store

router = APIRouter(
    prefix="/stores/{store_id}/settings",
    tags=["settings"],
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)


@router.get("")
async def list_settings(
    store: Store = Depends(require_store),
    service: SettingsService = Depends(get_settings_service),
):
    """Return every setting of the store, grouped."""
    return CommerceResponse.success(await service.get_all_settings(store.id))


@router.get("/public")
async def list_public_settings(
    store: Store = Depends(require_store),
    service: SettingsService = Depends(get_settings_service),
):
    """Return the storefront-visible settings, grouped."""
    return CommerceResponse.success(await service.get_public_settings(store.id))


@router.get("/{group}", response_model=SuccessResponse[SettingsGroup])
async def get_settings_group(
    group: str,
    store: Store = Depends(require_store),
    service: SettingsService = Depends(get_settings_service),
):
    settings = await service.get_settings_by_group(store.id, group)
    return CommerceResponse.success(SettingsGroup(group=group, settings=settings))


@router.put("/{group}", response_model=SuccessResponse[SettingsGroup])
async def update_settings_group(
    group: str,
    payload: SettingsGroupUpdate,
    store: Store = Depends(require_store),
    service: SettingsService = Depends(get_settings_service),
):
    """Upsert every entry of the payload into ``group``; invalid entries abort the whole update."""
    entries = {key: (entry.value, entry.type, entry.is_public) for key, entry in payload.settings.items()}
    await service.set_settings(store.id, group, entries)
    settings = await service.get_settings_by_group(store.id, group)
    return CommerceResponse.success(SettingsGroup(group=group, settings=settings))


@router.delete("/{group}/{key}", status_code=204)
async def delete_setting(
    group: str,
    key: str,
    store: Store = Depends(require_store),
    service: SettingsService = Depends(get_settings_service),
):
    deleted = await service.delete_setting(store.id, group, key)
    if not deleted:
        raise SettingNotFoundError(group, key, store_id=store.id)
    return CommerceResponse.no_content()
