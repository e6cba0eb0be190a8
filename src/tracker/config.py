"""Application configuration and settings management."""

from pathlib import Path
from typing import Annotated, Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Driver Customer Tracker"
    data_root: Path = Field(default=Path("data"), description="Directory holding the key-value store files.")
    user_key: str = Field(default="driver-user", description="Storage key for the signed-in user profile.")
    customers_key: str = Field(default="driver-customers", description="Storage key for the customer collection.")
    login_delay_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Artificial delay applied by the mock sign-in flow.",
    )
    supported_providers: Annotated[tuple[str, ...], NoDecode] = Field(default=("google", "apple"))
    mock_user_name: str = "John Driver"
    mock_user_email_local: str = "john.driver"
    mock_user_avatar: str = Field(
        default=(
            "https://images.pexels.com/photos/2379004/pexels-photo-2379004.jpeg"
            "?auto=compress&cs=tinysrgb&w=150&h=150&dpr=2"
        ),
        description="Avatar URL attached to mock user profiles.",
    )
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("supported_providers", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
