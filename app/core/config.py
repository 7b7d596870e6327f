from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field("sqlite+aiosqlite:///./campus.db", alias="DATABASE_URL")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Comma-separated, e.g. "http://localhost:5173,https://panel.campus.edu".
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    assistant_webhook_url: Optional[str] = Field(None, alias="ASSISTANT_WEBHOOK_URL")
    assistant_timeout_seconds: float = Field(30.0, alias="ASSISTANT_TIMEOUT_SECONDS")

    dashboard_top_courses: int = Field(5, alias="DASHBOARD_TOP_COURSES")
    dashboard_recent_courses: int = Field(5, alias="DASHBOARD_RECENT_COURSES")

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
