import pytest

from backend.config import SyncConfig, load_config
from backend.db import build_database_url


def test_load_config_requires_database_url():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        load_config({})


def test_load_config_defaults():
    config = load_config({"DATABASE_URL": "postgresql://postgres@db.example.co:5432/postgres"})

    assert config == SyncConfig(database_url="postgresql://postgres@db.example.co:5432/postgres")
    assert config.http_timeout == 15.0
    assert config.include_mlh is True
    assert config.sync_interval_hours == 6


def test_load_config_reads_overrides():
    config = load_config({
        "DATABASE_URL": "sqlite://",
        "SUPABASE_SERVICE_ROLE_KEY": "service-secret",
        "HTTP_TIMEOUT": "2.5",
        "SYNC_INCLUDE_MLH": "no",
        "MLH_SEASON": "2026",
        "SYNC_INTERVAL_HOURS": "12",
        "LOG_LEVEL": "debug",
    })

    assert config.service_key == "service-secret"
    assert config.http_timeout == 2.5
    assert config.include_mlh is False
    assert config.mlh_season == 2026
    assert config.sync_interval_hours == 12
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [
    ("HTTP_TIMEOUT", "fast"),
    ("SYNC_INCLUDE_MLH", "maybe"),
    ("SYNC_INTERVAL_HOURS", "1.5"),
])
def test_load_config_rejects_invalid_values(name, value):
    with pytest.raises(ValueError, match=name):
        load_config({"DATABASE_URL": "sqlite://", name: value})


def test_service_key_becomes_database_password():
    config = SyncConfig(
        database_url="postgresql://postgres@db.example.co:5432/postgres",
        service_key="s3cret",
    )

    url = build_database_url(config)

    assert url.password == "s3cret"
    assert url.host == "db.example.co"
