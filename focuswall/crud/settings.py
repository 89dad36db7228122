# focuswall/crud/settings.py
import json
import logging
from pydantic import ValidationError

from focuswall.core.config import settings
from focuswall.core.errors import StorageUnavailableError, ValidationRejectedError
from focuswall.core.storage import BlobStorage
from focuswall.schemas.settings import MAX_AUTO_ARCHIVE_DAYS, MIN_AUTO_ARCHIVE_DAYS, AppSettings, SettingsUpdate
from focuswall.utils.schema_upgrade import upcast_settings

logger = logging.getLogger(__name__)


def _default_settings() -> AppSettings:
    return AppSettings(auto_archive_days=settings.DEFAULT_AUTO_ARCHIVE_DAYS)


async def get_settings(store: BlobStorage) -> AppSettings:
    """Stored settings, or the defaults when nothing usable is stored."""
    try:
        raw = await store.get(settings.SETTINGS_KEY)
    except StorageUnavailableError as e:
        logger.warning(f"⚠️ Reading settings failed ({e.detail}); using defaults")
        return _default_settings()
    if not raw:
        return _default_settings()

    try:
        record = json.loads(raw)
        return AppSettings.model_validate(
            upcast_settings(record, settings.DEFAULT_AUTO_ARCHIVE_DAYS)
        )
    except (TypeError, ValueError, ValidationError) as e:
        logger.warning(f"⚠️ Stored settings are malformed or out of range ({str(e)}); using defaults")
        return _default_settings()


async def update_settings(settings_in: SettingsUpdate, store: BlobStorage) -> AppSettings:
    current = await get_settings(store)
    changes = {k: v for k, v in settings_in.model_dump(exclude_unset=True).items() if v is not None}

    try:
        updated = AppSettings.model_validate({**current.model_dump(), **changes})
    except ValidationError as e:
        raise ValidationRejectedError(
            f"Auto-archive days must be between {MIN_AUTO_ARCHIVE_DAYS} and {MAX_AUTO_ARCHIVE_DAYS}"
        ) from e

    await store.set(settings.SETTINGS_KEY, json.dumps(updated.model_dump(mode="json")))
    logger.info(f"Settings saved (auto_archive_days={updated.auto_archive_days})")
    return updated
