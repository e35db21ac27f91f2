from datetime import date, datetime, time, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Source(str, Enum):
    MLH = "mlh"
    DEVFOLIO = "devfolio"
    UNSTOP = "unstop"
    DEVPOST = "devpost"
    COMMUNITY = "community"


class Mode(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"


def parse_skills(v):
    if v is None:
        return []
    if isinstance(v, str):
        return [skill.strip() for skill in v.split(",") if skill.strip()]
    return v


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class HackathonRecord(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    registration_deadline: datetime
    registration_url: str
    source: Source
    mode: Mode
    location: Optional[str] = None
    prize_pool: Optional[str] = None
    image_url: Optional[str] = None
    skills: List[str] = []
    dates_estimated: bool = False
    is_active: bool = True

    model_config = {
        "from_attributes": True,
        "str_strip_whitespace": True,
    }

    @field_validator("start_date", "end_date", "registration_deadline", mode="before")
    @classmethod
    def promote_dates(cls, v):
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min, tzinfo=timezone.utc)
        return v

    @field_validator("start_date", "end_date", "registration_deadline")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return to_utc(v)

    @field_validator("registration_url")
    @classmethod
    def require_absolute_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("must be an absolute http(s) URL")
        return v

    @field_validator("mode", "source", mode="before")
    @classmethod
    def lowercase_enum(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("description", "location", "prize_pool", "image_url", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, v):
        return parse_skills(v)

    @property
    def key(self):
        return self.title, self.source.value


class HackathonOut(BaseModel):
    """Row shape returned by the listing endpoint."""
    id: str
    title: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    registration_deadline: datetime
    registration_url: str
    source: str
    mode: str
    location: Optional[str] = None
    prize_pool: Optional[str] = None
    image_url: Optional[str] = None
    skills: List[str] = []
    dates_estimated: bool = False
    is_active: bool = True

    model_config = {
        "from_attributes": True
    }

    @field_validator("skills", mode="before")
    @classmethod
    def stored_skills(cls, v):
        # Stored as a JSON list; tags may contain commas
        return v if v is not None else []
