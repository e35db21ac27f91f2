import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class SyncConfig:
    """Settings for one sync process, built once at start-up."""
    database_url: str
    service_key: Optional[str] = None
    http_timeout: float = 15.0
    include_mlh: bool = True
    mlh_season: Optional[int] = None
    sync_interval_hours: int = 6
    log_level: str = "INFO"


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_number(name: str, value: str, cast):
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def load_config(env: Mapping[str, str] = None) -> SyncConfig:
    """
    Build a SyncConfig from the process environment.
    A .env file is loaded first when reading from os.environ.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    database_url = env.get("DATABASE_URL")
    if not database_url:
        raise ValueError("DATABASE_URL environment variable is not set")

    service_key = env.get("DATABASE_SERVICE_KEY") or env.get("SUPABASE_SERVICE_ROLE_KEY")

    config = SyncConfig(database_url=database_url, service_key=service_key or None)
    overrides = {}
    if env.get("HTTP_TIMEOUT"):
        overrides["http_timeout"] = _parse_number("HTTP_TIMEOUT", env["HTTP_TIMEOUT"], float)
    if env.get("SYNC_INCLUDE_MLH"):
        overrides["include_mlh"] = _parse_bool("SYNC_INCLUDE_MLH", env["SYNC_INCLUDE_MLH"])
    if env.get("MLH_SEASON"):
        overrides["mlh_season"] = _parse_number("MLH_SEASON", env["MLH_SEASON"], int)
    if env.get("SYNC_INTERVAL_HOURS"):
        overrides["sync_interval_hours"] = _parse_number(
            "SYNC_INTERVAL_HOURS", env["SYNC_INTERVAL_HOURS"], int
        )
    if env.get("LOG_LEVEL"):
        overrides["log_level"] = env["LOG_LEVEL"].upper()

    return replace(config, **overrides)
