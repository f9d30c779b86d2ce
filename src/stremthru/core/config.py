from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # alldebrid
    alldebrid_api_key: str | None = Field(default=None, repr=False)
    alldebrid_base_url: str = ""
    alldebrid_timeout_s: float | None = None

    log_level: str = "INFO"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_alldebrid_api_key(self) -> str:
        if not self.alldebrid_api_key:
            raise RuntimeError(
                "ALLDEBRID_API_KEY is not set. Set it in the environment or .env file."
            )
        return self.alldebrid_api_key


settings = Settings()
