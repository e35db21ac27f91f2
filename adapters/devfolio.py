import logging

import requests

from adapters.dates import parse_iso_datetime
from adapters.fallback import devfolio_fallback

logger = logging.getLogger(__name__)

SEARCH_URL = "https://api.devfolio.co/api/search/hackathons"

HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
}


def format_prize(amount):
    """Format a rupee amount with thousands separators; free text passes through."""
    if amount in (None, "", 0):
        return None
    try:
        return f"₹{int(float(amount)):,}"
    except (TypeError, ValueError):
        return str(amount)


def theme_names(themes):
    names = []
    for theme in themes or []:
        if isinstance(theme, dict):
            name = theme.get("name")
        else:
            name = theme
        if name:
            names.append(str(name))
    return names


def map_hit(item: dict) -> dict:
    starts_at = parse_iso_datetime(item.get("starts_at"))
    ends_at = parse_iso_datetime(item.get("ends_at"))
    deadline = parse_iso_datetime(item.get("reg_ends_at")) or starts_at
    slug = item.get("slug")

    return {
        "title": item.get("name"),
        "description": item.get("desc") or item.get("tagline"),
        "start_date": starts_at,
        "end_date": ends_at,
        "registration_deadline": deadline,
        "registration_url": f"https://{slug}.devfolio.co" if slug else None,
        "source": "devfolio",
        "mode": "online" if item.get("is_online") else "offline",
        "location": item.get("location"),
        "prize_pool": format_prize(item.get("prize_pool")),
        "image_url": item.get("logo"),
        "skills": theme_names(item.get("themes")),
    }


def fetch_devfolio_hackathons(timeout: float = 15, now=None) -> list[dict]:
    """
    Fetches hackathons open for applications from the Devfolio search API.
    Falls back to the static Devfolio list when the API is unreachable.
    """
    logger.info("Fetching Devfolio hackathons...")
    try:
        response = requests.post(
            SEARCH_URL,
            json={"type": "application_open", "from": 0, "size": 50},
            headers=HEADERS,
            timeout=timeout,
        )
        if not response.ok:
            logger.warning(f"Devfolio API returned status {response.status_code}, using fallback data")
            return devfolio_fallback(now)

        data = response.json()
        hits = (data.get("hits") or {}).get("hits") or []
        hackathons = [map_hit(hit.get("_source") or {}) for hit in hits]
    except Exception as e:
        logger.error(f"Error fetching Devfolio hackathons: {e}")
        return devfolio_fallback(now)

    logger.info(f"Found {len(hackathons)} Devfolio hackathons")
    return hackathons


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')
    for h in fetch_devfolio_hackathons()[:5]:
        print(f"- {h['title']} ({h['registration_url']})")
