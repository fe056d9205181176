# elearning/core/config.py
from __future__ import annotations

import os
from typing import List, Optional
from pydantic import BaseModel


def _get_bool(env_name: str, default: bool = False) -> bool:
    val = os.getenv(env_name)
    if val is None:
        return default
    return str(val).strip().lower() not in {"0", "false", "no", "off", ""}


def _get_int(env_name: str, default: int) -> int:
    val = os.getenv(env_name)
    if val is None or not str(val).strip():
        return default
    return int(val)


def _get_float(env_name: str, default: float) -> float:
    val = os.getenv(env_name)
    if val is None or not str(val).strip():
        return default
    return float(val)


def _split_csv(env_name: str, default: str = "") -> List[str]:
    raw = os.getenv(env_name, default)
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


class Settings(BaseModel):
    # ------------------------- App -------------------------
    APP_NAME: str = os.getenv("APP_NAME", "E-Learning Portal")
    DEBUG: bool = _get_bool("DEBUG", False)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ------------------------- Server -------------------------
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int("PORT", 8080)
    WORKER_THREADS: int = _get_int("WORKER_THREADS", 10)
    # 0 disables the per-request timeout
    REQUEST_TIMEOUT_SECONDS: float = _get_float("REQUEST_TIMEOUT_SECONDS", 30.0)

    # ------------------------- DB -------------------------
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///elearning.db")

    # ------------------------- HTTP -------------------------
    # e.g. CORS_ALLOW_ORIGINS="http://localhost:5173,http://127.0.0.1:3000"
    CORS_ALLOW_ORIGINS: List[str] = _split_csv("CORS_ALLOW_ORIGINS", "*")
    STATIC_DIR: Optional[str] = os.getenv("STATIC_DIR")
    # False keeps every error response at 200 for existing clients
    STRICT_HTTP_STATUS: bool = _get_bool("STRICT_HTTP_STATUS", False)

    # ------------------------- Derived flags -------------------------
    @property
    def DB_IS_SQLITE(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def DB_IS_MEMORY(self) -> bool:
        return self.DB_IS_SQLITE and (
            self.DATABASE_URL in {"sqlite://", "sqlite:///:memory:"}
            or "mode=memory" in self.DATABASE_URL
        )

    @property
    def SQLALCHEMY_ECHO(self) -> bool:
        return self.DEBUG


settings = Settings()
