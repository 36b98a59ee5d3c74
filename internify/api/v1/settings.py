# internify/api/v1/settings.py
from fastapi import APIRouter, Depends

from internify.api.deps import get_store, get_current_account
from internify.schemas.settings import UserSettingsOut, UserSettingsRecord, UserSettingsUpdate
from internify.services.settings import get_user_settings, save_user_settings
from internify.store.base import RecordStore

router = APIRouter()

def _to_out(s: UserSettingsRecord) -> UserSettingsOut:
    return UserSettingsOut.model_validate(s.model_dump())

# aceita com e sem barra final
@router.get("", response_model=UserSettingsOut)
@router.get("/", response_model=UserSettingsOut, include_in_schema=False)
def read_settings(
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    return _to_out(get_user_settings(store, account_id))

@router.put("", response_model=UserSettingsOut)
@router.put("/", response_model=UserSettingsOut, include_in_schema=False)
def update_settings(
    body: UserSettingsUpdate,
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    return _to_out(save_user_settings(store, account_id, body))
