import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from functools import partial

from sqlalchemy.exc import SQLAlchemyError

from adapters.devfolio import fetch_devfolio_hackathons
from adapters.devpost import fetch_devpost_hackathons
from adapters.fallback import fetch_community_hackathons, fetch_unstop_hackathons
from adapters.mlh import scrape_mlh_events

from backend.config import SyncConfig, load_config
from backend.crud import SyncStats, deactivate_expired, sync_records
from backend.db import get_session_factory
from backend.init_db import create_all_tables
from backend.validation import validate_records

logger = logging.getLogger(__name__)


def live_sources(config: SyncConfig):
    """Sources backed by a network call; fetched concurrently."""
    sources = [
        ("Devfolio", partial(fetch_devfolio_hackathons, timeout=config.http_timeout)),
        ("Devpost", partial(fetch_devpost_hackathons, timeout=config.http_timeout)),
    ]
    if config.include_mlh:
        sources.append(
            ("MLH", partial(scrape_mlh_events, timeout=config.http_timeout, season=config.mlh_season))
        )
    return sources


def static_sources():
    return [
        ("Unstop", fetch_unstop_hackathons),
        ("Community", fetch_community_hackathons),
    ]


def fetch_source(source_name, fetch_func) -> list:
    """Run one adapter. An adapter that raises contributes no records."""
    try:
        hackathons = fetch_func()
    except Exception as e:
        logger.error(f"Error fetching from {source_name}: {e}")
        return []
    if not isinstance(hackathons, list):
        logger.error(f"{source_name} returned {type(hackathons).__name__} instead of a list")
        return []
    logger.info(f"Fetched {len(hackathons)} hackathons from {source_name}.")
    return hackathons


def collect_hackathons(live, static) -> list:
    """Fetch live sources in parallel and static sources inline, merged in declared order."""
    results = {}
    if live:
        with ThreadPoolExecutor(max_workers=len(live)) as executor:
            future_to_source = {executor.submit(fetch_source, name, fetch_func): name for name, fetch_func in live}
            for future, name in future_to_source.items():
                results[name] = future.result()

    all_hackathons = []
    for name, _ in live:
        all_hackathons.extend(results[name])
    for name, fetch_func in static:
        all_hackathons.extend(fetch_source(name, fetch_func))
    return all_hackathons


def run_sync(config: SyncConfig, session_factory=None, live=None, static=None, now: datetime = None) -> dict:
    """
    Fetch every source, validate, upsert and deactivate expired hackathons.
    Returns the summary {success, message, stats}.
    """
    logger.info("Starting hackathon sync...")
    if session_factory is None:
        create_all_tables(config)
        session_factory = get_session_factory(config)
    live = live_sources(config) if live is None else live
    static = static_sources() if static is None else static

    raw_hackathons = collect_hackathons(live, static)
    logger.info(f"Total hackathons to sync: {len(raw_hackathons)}")

    records, rejected = validate_records(raw_hackathons)
    stats = SyncStats(total=len(raw_hackathons), rejected=len(rejected), skipped=len(rejected))

    now = now or datetime.now(timezone.utc)
    db = session_factory()
    try:
        sync_records(db, records, now=now, stats=stats)
        try:
            stats.deactivated = deactivate_expired(db, now=now)
            logger.info(f"Deactivated {stats.deactivated} hackathons past their registration deadline.")
        except SQLAlchemyError as e:
            logger.error(f"Error deactivating old hackathons: {e}")
    finally:
        db.close()

    message = f"Sync completed. Inserted: {stats.inserted}, Updated: {stats.updated}, Skipped: {stats.skipped}"
    logger.info(message)
    return {
        "success": True,
        "message": message,
        "stats": stats.as_dict(),
    }


if __name__ == "__main__":
    config = load_config()
    logging.basicConfig(level=config.log_level, format='%(asctime)s %(levelname)s %(message)s')
    run_sync(config)
