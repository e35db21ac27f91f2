from datetime import date, datetime, time, timedelta, timezone

MONTH_NAMES = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def days_from(now: datetime, days: int) -> datetime:
    return now + timedelta(days=days)


def at_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def parse_iso_datetime(value):
    """
    Parses ISO timestamps from platform APIs like:
    - '2025-07-19T00:00:00+05:30'
    - '2025-07-19T00:00:00.000Z'
    - '2025-07-19'
    Returns an aware UTC datetime or None.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _strptime_day(text: str):
    for fmt in ("%b %d, %Y", "%B %d, %Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date {text!r}")


def parse_hackathon_dates(date_str: str):
    """
    Parses date range strings like:
    - 'May 26 - Jul 10, 2025' (different months)
    - 'Jul 10 - 20, 2025' (same month)
    - 'Jul 10, 2025' (single day)
    - 'Nov 25, 2025 - Jan 12, 2026' (different years)
    - 'Jan 06 - 08, 2026' (same month, different days)
    """
    if not date_str or not isinstance(date_str, str):
        return None, None
    try:
        if " - " in date_str:
            start_str, end_str = date_str.split(" - ")

            start_str = start_str.strip()
            end_str = end_str.strip()

            # If start_str has a comma, it carries its own year (e.g., "Nov 25, 2025")
            if "," in start_str:
                full_start_str = start_str
            elif "," in end_str:
                year = end_str.split(",")[-1].strip()
                full_start_str = f"{start_str}, {year}"
            else:
                full_start_str = start_str

            # If no month in end, take it from start_str
            end_has_month = any(month.lower() in end_str.lower() for month in MONTH_NAMES)
            if end_has_month:
                full_end_str = end_str
            else:
                start_month = start_str.split(" ")[0]
                full_end_str = f"{start_month} {end_str}"

            return _strptime_day(full_start_str), _strptime_day(full_end_str)
        else:
            day = _strptime_day(date_str.strip())
            return day, day
    except (ValueError, IndexError):
        return None, None
