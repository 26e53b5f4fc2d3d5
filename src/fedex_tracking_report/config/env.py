# src/fedex_tracking_report/config/env.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import dotenv_values, find_dotenv, load_dotenv

from fedex_tracking_report.models import EnvCfg


class EnvError(RuntimeError):
    """Raised when required environment variables are missing."""


REQUIRED_KEYS: Tuple[str, ...] = (
    "FEDEX_CLIENT_ID",
    "FEDEX_CLIENT_SECRET",
)


def find_project_dotenv(start: Optional[Path] = None) -> Path:
    """
    Locate the nearest `.env`, first via python-dotenv's CWD search, then by
    walking upward from `start`. Returns Path() when nothing is found.
    """
    found = find_dotenv(filename=".env", usecwd=True)
    if found:
        return Path(found).resolve()

    start_path = Path.cwd() if start is None else Path(start)
    for p in (start_path, *start_path.parents):
        candidate = p / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return Path()


def env(name: str, *, default: Optional[str] = None, required: bool = False, cast=None):
    """
    Read one variable from the process environment.

    - Missing and `required=True` -> KeyError(name).
    - `cast` is applied to the raw string; cast errors propagate.
    """
    raw = os.getenv(name)
    if raw is None or raw == "":
        if required:
            raise KeyError(name)
        return default
    return cast(raw) if cast is not None else raw


def load_env(
    dotenv_path: Optional[Path] = None,
    *,
    override: bool = False,
    required_keys: Tuple[str, ...] = (),
    strict: bool = False,
) -> Dict[str, str]:
    """
    Load a .env file into os.environ and return the key/values it contained.

    With no `dotenv_path` the nearest project .env is used (if any).
    Existing process values win unless `override=True`.
    With `strict=True`, every key in `required_keys` must be set afterwards.
    """
    path = Path(dotenv_path) if dotenv_path else find_project_dotenv()

    loaded: Dict[str, str] = {}
    if path.is_file():
        load_dotenv(dotenv_path=path, override=override)
        loaded = {k: v for k, v in dotenv_values(path).items() if v is not None}

    if strict and required_keys:
        missing = [k for k in required_keys if not os.getenv(k)]
        if missing:
            raise EnvError(
                f"Missing required environment variable(s): {', '.join(missing)}")

    return loaded


def get_app_env(dotenv_path: Path | str | None = ".env", *, strict: bool = True) -> EnvCfg:
    """
    Load FedEx credentials (and optional endpoint overrides) into an EnvCfg.

    `dotenv_path=None` falls back to discovery of the nearest .env.
    Process environment is never overridden by the file.
    """
    load_env(
        Path(dotenv_path) if dotenv_path else None,
        override=False,
        required_keys=REQUIRED_KEYS,
        strict=strict,
    )

    return EnvCfg(
        FEDEX_CLIENT_ID=env("FEDEX_CLIENT_ID", default=""),
        FEDEX_CLIENT_SECRET=env("FEDEX_CLIENT_SECRET", default=""),
        FEDEX_TOKEN_URL=env("FEDEX_TOKEN_URL"),
        FEDEX_TRACKING_URL=env("FEDEX_TRACKING_URL"),
    )


__all__ = [
    "EnvError",
    "REQUIRED_KEYS",
    "find_project_dotenv",
    "load_env",
    "env",
    "get_app_env",
]
