from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.timezones.data import is_valid_zone_id


class Settings(BaseSettings):
    """Application-level settings loaded from environment variables."""

    app_name: str = "Time Zone Conversion Agent"
    app_description: str = (
        "An agent that converts times like '7:22pm PST to CET' across timezones."
    )
    local_timezone: str | None = None
    favorite_timezones: str = ""
    hour12: bool = True
    profiles_csv: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("local_timezone")
    @classmethod
    def _check_local_timezone(cls, value: str | None) -> str | None:
        if value and not is_valid_zone_id(value):
            raise ValueError(f"local_timezone must be an IANA zone id, got {value!r}")
        return value or None


settings = Settings()
