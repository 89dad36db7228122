# focuswall/schemas/settings.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

MIN_AUTO_ARCHIVE_DAYS = 1
MAX_AUTO_ARCHIVE_DAYS = 365

class AppSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    auto_archive_days: int = Field(
        90,
        ge=MIN_AUTO_ARCHIVE_DAYS,
        le=MAX_AUTO_ARCHIVE_DAYS,
        description="Completed items are archived after this many days",
    )

class SettingsUpdate(BaseModel):
    # Range is checked by the store against AppSettings
    auto_archive_days: Optional[int] = None
