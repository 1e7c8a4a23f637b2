from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    app_name: str = "Request ID Service"
    debug: bool = False
    log_level: str = "INFO"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name, default)
    return v.strip().lstrip("\ufeff")  # removes BOM if present


def load_settings() -> Settings:
    return Settings(
        app_name=_env("REQUESTID_APP_NAME") or "Request ID Service",
        debug=_env("DEBUG", "0").lower() in ("1", "true", "yes", "on"),
        log_level=_env("LOG_LEVEL") or "INFO",
    )


settings = load_settings()
