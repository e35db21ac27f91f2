import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from backend.schemas import HackathonRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    record: HackathonRecord


@dataclass(frozen=True)
class Rejected:
    title: Optional[str]
    source: Optional[str]
    reason: str


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ())) or "record"
        parts.append(f"{field}: {err.get('msg')}")
    return "; ".join(parts)


def validate_record(raw: Dict[str, Any]) -> Union[Accepted, Rejected]:
    """Turn one adapter dictionary into an Accepted record or a Rejected one with a reason."""
    if not isinstance(raw, dict):
        return Rejected(title=None, source=None, reason=f"expected a mapping, got {type(raw).__name__}")
    try:
        return Accepted(HackathonRecord(**raw))
    except ValidationError as e:
        return Rejected(title=raw.get("title"), source=raw.get("source"), reason=_describe(e))


def validate_records(raws) -> Tuple[List[HackathonRecord], List[Rejected]]:
    accepted = []
    rejected = []
    for raw in raws:
        outcome = validate_record(raw)
        if isinstance(outcome, Accepted):
            accepted.append(outcome.record)
        else:
            logger.warning(f"Rejected hackathon {outcome.title!r} from {outcome.source}: {outcome.reason}")
            rejected.append(outcome)
    return accepted, rejected
