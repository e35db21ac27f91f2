import logging

import requests
from bs4 import BeautifulSoup

from adapters.dates import at_midnight, parse_hackathon_dates, utc_now
from adapters.devfolio import theme_names
from adapters.fallback import devpost_fallback

logger = logging.getLogger(__name__)

LISTING_URL = "https://devpost.com/api/hackathons"


def clean_prize(prize_amount):
    """Devpost returns the prize total as an HTML snippet."""
    if not prize_amount:
        return None
    if isinstance(prize_amount, (int, float)):
        return f"${prize_amount:,}"
    text = BeautifulSoup(str(prize_amount), "html.parser").get_text().strip()
    return text or None


def clean_thumbnail(banner_url):
    if not banner_url:
        return None
    if banner_url.startswith("//"):
        banner_url = f"https:{banner_url}"
    return banner_url.replace("medium_square", "original")


def map_hackathon(item: dict, now) -> dict:
    start_day, end_day = parse_hackathon_dates(item.get("submission_period_dates"))
    dates_estimated = start_day is None
    if dates_estimated:
        start_date = end_date = now
    else:
        start_date, end_date = at_midnight(start_day), at_midnight(end_day)

    location = None
    if item.get("displayed_location"):
        location = item["displayed_location"].get("location")
    location = location or item.get("location")

    online = bool(item.get("online_only")) or location == "Online"

    return {
        "title": item.get("title"),
        "description": item.get("tagline"),
        "start_date": start_date,
        "end_date": end_date,
        # Registration stays open until the submission period closes
        "registration_deadline": end_date,
        "registration_url": item.get("url"),
        "source": "devpost",
        "mode": "online" if online else "offline",
        "location": location,
        "prize_pool": clean_prize(item.get("prize_amount")),
        "image_url": clean_thumbnail(item.get("thumbnail_url")),
        "skills": theme_names(item.get("themes")),
        "dates_estimated": dates_estimated,
    }


def fetch_devpost_hackathons(timeout: float = 15, now=None) -> list[dict]:
    """
    Fetches upcoming and open hackathons from the Devpost listing API.
    Falls back to the static Devpost list when the API is unreachable.
    """
    now = now or utc_now()
    logger.info("Fetching Devpost hackathons...")
    try:
        response = requests.get(
            LISTING_URL,
            params=[("status", "upcoming"), ("status", "open")],
            timeout=timeout,
        )
        if not response.ok:
            logger.warning(f"Devpost API returned status {response.status_code}, using fallback data")
            return devpost_fallback(now)

        hackathon_data = response.json().get("hackathons") or []
        hackathons = [map_hackathon(item, now) for item in hackathon_data]
    except Exception as e:
        logger.error(f"Error fetching Devpost hackathons: {e}")
        return devpost_fallback(now)

    logger.info(f"Found {len(hackathons)} Devpost hackathons")
    return hackathons


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')
    for h in fetch_devpost_hackathons()[:5]:
        print(f"- {h['title']}: {h['start_date']} to {h['end_date']}")
