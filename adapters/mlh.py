import logging
import re
from datetime import date, timedelta

import cloudscraper
from bs4 import BeautifulSoup

from adapters.dates import at_midnight, days_from, parse_hackathon_dates, parse_iso_datetime, utc_now

logger = logging.getLogger(__name__)

EVENTS_URL = "https://mlh.io/seasons/{season}/events"
FALLBACK_LINK = "https://mlh.io/events"

GUESSED_SKILLS = ["JavaScript", "Python", "React", "Node.js"]

HYBRID_PATTERN = re.compile(r"hybrid", re.IGNORECASE)
DIGITAL_PATTERN = re.compile(r"digital|online|virtual", re.IGNORECASE)


def current_season(today: date = None) -> int:
    """MLH seasons are named after the year they end in and open in late summer."""
    today = today or date.today()
    return today.year + 1 if today.month >= 8 else today.year


def infer_mode(block_text: str, location: str = None) -> str:
    if HYBRID_PATTERN.search(block_text):
        return "hybrid"
    if DIGITAL_PATTERN.search(block_text) or DIGITAL_PATTERN.search(location or ""):
        return "online"
    return "offline"


def _text(tag):
    return tag.get_text(" ", strip=True) if tag else ""


def _event_location(event):
    location_tag = event.find(class_="event-location")
    if not location_tag:
        return None
    city = _text(location_tag.find("span", itemprop="city"))
    state = _text(location_tag.find("span", itemprop="state"))
    if city or state:
        return ", ".join(part for part in (city, state) if part)
    return _text(location_tag) or None


def _event_dates(event, date_str: str, now):
    """Returns (start, end, estimated). Falls back to now + 30 days when nothing parses."""
    start_tag = event.find("meta", itemprop="startDate")
    end_tag = event.find("meta", itemprop="endDate")
    start = parse_iso_datetime(start_tag.get("content")) if start_tag else None
    end = parse_iso_datetime(end_tag.get("content")) if end_tag else None
    if start:
        return start, end or start, False

    start_day, end_day = parse_hackathon_dates(date_str)
    if start_day:
        return at_midnight(start_day), at_midnight(end_day), False

    start = days_from(now, 30)
    return start, start + timedelta(days=2), True


def parse_events(html: str, now=None) -> list[dict]:
    now = now or utc_now()
    soup = BeautifulSoup(html, "html.parser")
    event_divs = soup.find_all("div", class_="event-wrapper") or soup.find_all("div", class_="event")

    events = []
    for event in event_divs:
        name = _text(event.find("h3", class_="event-name"))
        if not name:
            continue

        date_str = _text(event.find("p", class_="event-date"))
        location = _event_location(event)

        link_tag = event.find("a", class_="event-link")
        link = link_tag.get("href") if link_tag else None

        image_tag = event.find("img", class_="event-logo") or event.find("img")
        image_url = image_tag.get("src") if image_tag else None

        start, end, estimated = _event_dates(event, date_str, now)

        events.append({
            "title": name,
            "description": f"Join {name} - an MLH hackathon event. Build something amazing with fellow developers!",
            "start_date": start,
            "end_date": end,
            "registration_deadline": start,
            "registration_url": link or FALLBACK_LINK,
            "source": "mlh",
            "mode": infer_mode(_text(event), location),
            "location": location,
            "prize_pool": None,
            "image_url": image_url,
            "skills": list(GUESSED_SKILLS),
            "dates_estimated": estimated,
        })
    return events


def scrape_mlh_events(timeout: float = 15, season: int = None, now=None) -> list[dict]:
    season = season or current_season()
    url = EVENTS_URL.format(season=season)
    logger.info(f"Fetching MLH hackathons for season {season}...")

    try:
        scraper = cloudscraper.create_scraper()
        response = scraper.get(url, timeout=timeout)
        if response.status_code != 200:
            logger.warning(f"Failed to fetch MLH page for season {season}. Status code: {response.status_code}")
            return []
        events = parse_events(response.text, now)
    except Exception as e:
        logger.error(f"Error fetching MLH hackathons: {e}")
        return []

    logger.info(f"Found {len(events)} MLH hackathons")
    return events


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')
    for h in scrape_mlh_events()[:5]:
        print(f"- {h['title']} [{h['mode']}] {h['location']}")
