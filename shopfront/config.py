from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../shopfront repo root
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    export_dir: str
    log_level: str
    decimals: int


def load_settings() -> Settings:
    decimals = _get_int("DECIMALS", default=2)
    return Settings(
        export_dir=_get_path("EXPORT_DIR", "SHOPFRONT_EXPORT_DIR", default=str(ROOT_DIR / "exports")),
        log_level=(_get_env("LOG_LEVEL", "SHOPFRONT_LOG_LEVEL", default="INFO") or "INFO").upper(),
        decimals=2 if decimals is None else decimals,
    )


settings = load_settings()
