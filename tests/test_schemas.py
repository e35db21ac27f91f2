from datetime import date, datetime, timedelta, timezone

import pytest

pytest.importorskip("pydantic")
from pydantic import ValidationError

from backend.schemas import HackathonOut, HackathonRecord, Mode, Source


def test_record_splits_skills_from_string_and_keeps_duplicates(make_raw):
    hack = HackathonRecord(**make_raw(skills="AI, Web3 ,  Cloud  , AI"))

    assert hack.skills == ["AI", "Web3", "Cloud", "AI"]


def test_record_keeps_skills_list_as_is(make_raw):
    hack = HackathonRecord(**make_raw(skills=["ml", "iot"]))

    assert hack.skills == ["ml", "iot"]


def test_record_normalizes_enums_case_insensitively(make_raw):
    hack = HackathonRecord(**make_raw(mode="Hybrid", source="DEVPOST"))

    assert hack.mode is Mode.HYBRID
    assert hack.source is Source.DEVPOST
    assert hack.key == ("AI Sprint", "devpost")


def test_record_promotes_dates_and_converts_to_utc(make_raw):
    ist = timezone(timedelta(hours=5, minutes=30))
    hack = HackathonRecord(**make_raw(
        start_date=date(2026, 4, 10),
        end_date=datetime(2026, 4, 12, 9, 0),
        registration_deadline=datetime(2026, 4, 1, 5, 30, tzinfo=ist),
    ))

    assert hack.start_date == datetime(2026, 4, 10, tzinfo=timezone.utc)
    assert hack.end_date == datetime(2026, 4, 12, 9, 0, tzinfo=timezone.utc)
    assert hack.registration_deadline == datetime(2026, 4, 1, 0, 0, tzinfo=timezone.utc)


def test_record_does_not_enforce_date_ordering(make_raw):
    hack = HackathonRecord(**make_raw(start_date=date(2026, 5, 1), end_date=date(2026, 4, 1)))

    assert hack.end_date < hack.start_date


def test_record_blank_optionals_become_none(make_raw):
    hack = HackathonRecord(**make_raw(description="  ", image_url="", location=None))

    assert hack.description is None
    assert hack.image_url is None
    assert hack.location is None
    assert hack.is_active is True
    assert hack.dates_estimated is False


@pytest.mark.parametrize("overrides", [
    {"title": "   "},
    {"source": "hackerearth"},
    {"mode": "remote"},
    {"registration_url": "devfolio.co/hack"},
    {"start_date": None},
])
def test_record_rejects_malformed_fields(make_raw, overrides):
    with pytest.raises(ValidationError):
        HackathonRecord(**make_raw(**overrides))


def test_hackathon_out_keeps_stored_skills_intact():
    row = {
        "id": "abc-1",
        "title": "Build Night",
        "start_date": datetime(2026, 3, 1),
        "end_date": datetime(2026, 3, 3),
        "registration_deadline": datetime(2026, 2, 20),
        "registration_url": "https://example.com/h2",
        "source": "mlh",
        "mode": "hybrid",
        "skills": ["Fintech, Banking", "AI"],
    }

    out = HackathonOut(**row)

    assert out.skills == ["Fintech, Banking", "AI"]


def test_hackathon_out_reads_missing_skills_as_empty():
    row = {
        "id": "abc-2",
        "title": "Quiet Jam",
        "start_date": datetime(2026, 3, 1),
        "end_date": datetime(2026, 3, 3),
        "registration_deadline": datetime(2026, 2, 20),
        "registration_url": "https://example.com/h3",
        "source": "mlh",
        "mode": "online",
        "skills": None,
    }

    assert HackathonOut(**row).skills == []
