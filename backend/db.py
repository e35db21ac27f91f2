from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from backend.config import SyncConfig

Base = declarative_base()


def build_database_url(config: SyncConfig):
    """Return the connection URL, with the service key as password when one is configured."""
    url = make_url(config.database_url)
    if config.service_key:
        url = url.set(password=config.service_key)
    return url


@lru_cache(maxsize=None)
def _engine_for(url_string: str):
    url = make_url(url_string)
    if url.get_backend_name() == "postgresql":
        return create_engine(
            url,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_size=10,
            max_overflow=20,
            echo=False,  # Set to True for debugging SQL queries
            connect_args={
                "options": "-c timezone=utc -c statement_timeout=60000"
            }
        )
    return create_engine(url, pool_pre_ping=True, echo=False)


def get_engine(config: SyncConfig):
    return _engine_for(build_database_url(config).render_as_string(hide_password=False))


def get_session_factory(config: SyncConfig):
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(config))
