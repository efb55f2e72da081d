from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from blogadmin.core.env_manager import EnvManager


class Settings(BaseSettings):
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Blog Admin")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Admin editor for blog posts"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "UTC")

    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = EnvManager.get_env_variable("LOG_FILE")

    HOST: str = EnvManager.get_env_variable("HOST", "0.0.0.0")
    PORT: int = EnvManager.get_int("PORT", 8000)

    def get_now(self):
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)


settings = Settings()
