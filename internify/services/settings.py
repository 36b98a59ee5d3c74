# internify/services/settings.py
import logging
from datetime import datetime, timezone

from internify.core.errors import RecordNotFound
from internify.schemas.settings import UserSettingsRecord, UserSettingsUpdate
from internify.store.base import RecordStore

logger = logging.getLogger(__name__)

REQUIRED_BRANDING_FIELDS = (
    "company_name",
    "company_logo",
    "supervisor_name",
    "supervisor_signature",
    "ceo_name",
    "ceo_signature",
)

def _now() -> datetime:
    return datetime.now(timezone.utc)

def is_setup_complete(data: UserSettingsUpdate) -> bool:
    return all(getattr(data, f) for f in REQUIRED_BRANDING_FIELDS)

def get_user_settings(store: RecordStore, account_id: str) -> UserSettingsRecord:
    rec = store.get_settings(account_id)
    if rec is None:
        raise RecordNotFound("Settings not found", operation="get_settings")
    return rec

def save_user_settings(store: RecordStore, account_id: str, body: UserSettingsUpdate) -> UserSettingsRecord:
    """Sobrescreve as configurações inteiras; setup_completed é calculado, nunca recebido."""
    previous = store.get_settings(account_id)
    now = _now()
    record = UserSettingsRecord(
        account_id=account_id,
        **body.model_dump(),
        setup_completed=is_setup_complete(body),
        created_at=previous.created_at if previous else now,
        updated_at=now if previous else None,
    )
    saved = store.save_settings(record)
    logger.info("settings saved account=%s setup_completed=%s", account_id, saved.setup_completed)
    return saved
