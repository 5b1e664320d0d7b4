"""
Configuración

Todo se lee de variables de entorno (cargadas desde ``.env`` en ``main``).
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


def get_backend_url() -> str:
    url = (os.getenv("BACKEND_API_URL") or "http://localhost:8080").strip()
    return url.rstrip("/")


def get_backend_timeout() -> float:
    try:
        t = float(os.getenv("BACKEND_TIMEOUT_SECONDS", "10"))
    except Exception:
        t = 10.0
    return t if t > 0 else 10.0


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def get_allowed_origins() -> Tuple[str, ...]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS")
    if not raw:
        return ("http://localhost:3000", "http://localhost:3001", "http://127.0.0.1:3000")
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def get_default_hora_inicio() -> str:
    return (os.getenv("DEFAULT_HORA_INICIO") or "08:00").strip()


@dataclass(frozen=True)
class Settings:
    backend_url: str
    backend_timeout: float
    log_level: str
    allowed_origins: Tuple[str, ...]
    default_hora_inicio: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        backend_url=get_backend_url(),
        backend_timeout=get_backend_timeout(),
        log_level=get_log_level(),
        allowed_origins=get_allowed_origins(),
        default_hora_inicio=get_default_hora_inicio(),
    )
