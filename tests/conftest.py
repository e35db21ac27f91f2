import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.config import SyncConfig
from backend.db import Base
import backend.models

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def config():
    return SyncConfig(database_url="sqlite://", http_timeout=1)


@pytest.fixture
def session_factory():
    # One shared in-memory connection so every session sees the same tables.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


def _make_raw(title="AI Sprint", source="devfolio", deadline_days=10, now=NOW, **overrides):
    raw = {
        "title": title,
        "description": "Build things",
        "start_date": now + timedelta(days=deadline_days + 2),
        "end_date": now + timedelta(days=deadline_days + 4),
        "registration_deadline": now + timedelta(days=deadline_days),
        "registration_url": "https://example.com/hack",
        "source": source,
        "mode": "online",
        "location": "Remote",
        "prize_pool": "$5,000",
        "image_url": None,
        "skills": ["Python", "React"],
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def make_raw():
    return _make_raw

