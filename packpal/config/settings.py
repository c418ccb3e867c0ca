from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional, List


class Settings(BaseSettings):
    # Storage
    storage_backend: str = "memory"  # memory | supabase

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Bypasses RLS, used by the storage layer when set

    # Events
    invite_code_length: int = 8

    # Realtime
    ws_path: str = "/ws"
    ws_allow_unverified_user_id: bool = False  # development only: trust a bare userId on authenticate

    # App
    app_name: str = "packpal"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @field_validator("invite_code_length")
    @classmethod
    def invite_code_minimum(cls, value: int) -> int:
        if value < 6:
            raise ValueError("invite_code_length must be at least 6")
        return value

    @field_validator("storage_backend")
    @classmethod
    def known_backend(cls, value: str) -> str:
        value = value.lower()
        if value not in ("memory", "supabase"):
            raise ValueError("storage_backend must be 'memory' or 'supabase'")
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
