# focuswall/core/config.py

from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "Focus Wall"
    DEBUG: bool = False
    VERSION: str = "0.1.0"

    # Database Configuration (a local SQLite file holding the storage blobs)
    DATABASE_URL: str = "sqlite+aiosqlite:///./focus_wall.db"

    # Storage keys for the three persisted blobs
    GOALS_KEY: str = "focus_wall_goals"
    TASKS_KEY: str = "focus_wall_tasks"
    SETTINGS_KEY: str = "focus_wall_settings"

    # Auto-archive Configuration
    DEFAULT_AUTO_ARCHIVE_DAYS: int = Field(default=90, ge=1, le=365)
    AUTO_ARCHIVE_ON_STARTUP: bool = True

    # Server Configuration
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Optional: Environment
    ENVIRONMENT: str = "development"

    @field_validator("DATABASE_URL")
    @classmethod
    def require_async_driver(cls, value: str) -> str:
        """Plain sqlite URLs are upgraded to the aiosqlite driver"""
        if value.startswith("sqlite://"):
            return value.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return value

    @property
    def is_sqlite(self) -> bool:
        """Check if we're using a SQLite database file"""
        return self.DATABASE_URL.startswith("sqlite")

# Create a global settings instance
settings = Settings()
