import logging
import uuid
from dataclasses import dataclass, asdict
from datetime import datetime, timezone

from sqlalchemy import String, cast, literal_column, or_, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.models import HackathonDB
from backend.schemas import HackathonRecord, to_utc

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE support
_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

# Columns overwritten when a (title, source) row already exists
MUTABLE_FIELDS = (
    "description",
    "start_date",
    "end_date",
    "registration_deadline",
    "registration_url",
    "mode",
    "location",
    "prize_pool",
    "image_url",
    "skills",
    "dates_estimated",
    "updated_at",
)


@dataclass
class SyncStats:
    inserted: int = 0
    updated: int = 0
    skipped: int = 0
    rejected: int = 0
    deactivated: int = 0
    total: int = 0

    def as_dict(self):
        return asdict(self)


def _row_values(hack: HackathonRecord):
    return {
        "title": hack.title,
        "description": hack.description,
        "start_date": hack.start_date,
        "end_date": hack.end_date,
        "registration_deadline": hack.registration_deadline,
        "registration_url": hack.registration_url,
        "source": hack.source.value,
        "mode": hack.mode.value,
        "location": hack.location,
        "prize_pool": hack.prize_pool,
        "image_url": hack.image_url,
        "skills": list(hack.skills),
        "dates_estimated": hack.dates_estimated,
    }


def upsert_hackathon(db: Session, hack: HackathonRecord, now: datetime) -> bool:
    """
    Insert or update a hackathon keyed by (title, source) in a single statement.
    Returns True if the row was newly created, False if an existing row was updated.

    PostgreSQL reports the outcome through the system column xmax, which is 0
    only for freshly inserted tuples. SQLite has no equivalent, so there the
    returned created_at is compared with now and two runs must never share the
    same now on that path.
    """
    dialect = db.get_bind().dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise ValueError(f"Unsupported database dialect for upsert: {dialect}")

    stmt = insert(HackathonDB).values(
        id=str(uuid.uuid4()),
        is_active=hack.is_active,
        created_at=now,
        updated_at=now,
        **_row_values(hack),
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["title", "source"],
        set_={field: stmt.excluded[field] for field in MUTABLE_FIELDS},
    )
    if dialect == "postgresql":
        stmt = stmt.returning(literal_column("xmax = 0").label("inserted"))
    else:
        stmt = stmt.returning(HackathonDB.created_at)

    try:
        returned = db.execute(stmt).scalar_one()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error in upsert_hackathon for {hack.title!r}: {e}")
        raise

    if dialect == "postgresql":
        return bool(returned)
    # created_at only equals the write timestamp when this statement inserted the row
    return to_utc(returned) == to_utc(now)


def sync_records(db: Session, records, now: datetime = None, stats: SyncStats = None) -> SyncStats:
    """Upsert records one at a time, counting inserts, updates and failed writes."""
    now = now or datetime.now(timezone.utc)
    stats = stats or SyncStats()
    seen = set()

    for hack in records:
        try:
            is_new = upsert_hackathon(db, hack, now)
        except SQLAlchemyError:
            stats.skipped += 1
            continue

        if is_new and hack.key not in seen:
            stats.inserted += 1
        else:
            stats.updated += 1
        seen.add(hack.key)

    return stats


def deactivate_expired(db: Session, now: datetime = None) -> int:
    """Mark every active hackathon whose registration deadline has passed as inactive."""
    now = now or datetime.now(timezone.utc)
    try:
        result = db.execute(
            update(HackathonDB)
            .where(HackathonDB.registration_deadline < now)
            .where(HackathonDB.is_active.is_(True))
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        db.commit()
        return result.rowcount
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error in deactivate_expired: {e}")
        raise


def get_active_hackathons(db: Session, now: datetime = None, sources=None, mode=None, keyword=None, limit: int = 50):
    """
    Active hackathons still open for registration, soonest deadline first.
    Optional filters: list of sources, a mode and a keyword matched against title and skills.
    """
    now = now or datetime.now(timezone.utc)
    try:
        q = db.query(HackathonDB)\
            .filter(HackathonDB.is_active.is_(True))\
            .filter(HackathonDB.registration_deadline >= now)
        if sources:
            q = q.filter(HackathonDB.source.in_(sources))
        if mode:
            q = q.filter(HackathonDB.mode == mode)
        if keyword:
            search_term = f"%{keyword}%"
            q = q.filter(or_(HackathonDB.title.ilike(search_term), cast(HackathonDB.skills, String).ilike(search_term)))
        return q.order_by(HackathonDB.registration_deadline.asc()).limit(limit).all()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_active_hackathons: {e}")
        raise


def get_hackathon(db: Session, title: str, source: str):
    try:
        return db.query(HackathonDB).filter_by(title=title, source=source).first()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_hackathon: {e}")
        return None
