"""
Hand-written hackathon listings.

Used directly for platforms without an accessible API (Unstop, community
events) and as the degraded path when the Devfolio or Devpost APIs fail.
Dates are offsets in days from the time of the call.
"""
import logging

from adapters.dates import days_from, utc_now

logger = logging.getLogger(__name__)

# (title, description, start, end, deadline, url, mode, location, prize_pool, image_url, skills)
DEVFOLIO_SAMPLES = [
    (
        "ETHIndia 2025",
        "Asia's largest Ethereum hackathon. Build the future of Web3 with 2000+ hackers.",
        45, 47, 40,
        "https://ethindia.co",
        "offline",
        "Bangalore, India",
        "₹50,00,000",
        "https://assets.devfolio.co/hackathons/ethindia/logo.png",
        ["Solidity", "Web3", "Ethereum", "React"],
    ),
    (
        "HackThisFall 5.0",
        "India's most welcoming hackathon. 48 hours of innovation and learning.",
        30, 32, 25,
        "https://hackthisfall.tech",
        "hybrid",
        "Virtual & Jaipur",
        "₹10,00,000",
        None,
        ["JavaScript", "Python", "AI/ML", "Open Source"],
    ),
    (
        "Unfold 2025",
        "Coindcx's flagship Web3 hackathon. Build, learn, and win prizes.",
        60, 62, 55,
        "https://unfold.devfolio.co",
        "offline",
        "Bangalore, India",
        "₹25,00,000",
        None,
        ["Blockchain", "DeFi", "Smart Contracts", "TypeScript"],
    ),
]

DEVPOST_SAMPLES = [
    (
        "Google Solution Challenge 2025",
        "Build solutions using Google technologies to address UN Sustainable Development Goals.",
        20, 90, 15,
        "https://developers.google.com/community/gdsc-solution-challenge",
        "online",
        "Global",
        "$10,000",
        None,
        ["Flutter", "Firebase", "Google Cloud", "Android"],
    ),
    (
        "Microsoft Imagine Cup 2025",
        "Global technology competition for students to solve real-world problems.",
        25, 120, 20,
        "https://imaginecup.microsoft.com",
        "online",
        "Global",
        "$100,000",
        None,
        ["Azure", "AI/ML", ".NET", "Power Platform"],
    ),
    (
        "NASA Space Apps Challenge",
        "Annual hackathon using NASA data to solve challenges facing humanity and Earth.",
        35, 37, 30,
        "https://www.spaceappschallenge.org",
        "hybrid",
        "Global (200+ locations)",
        "$5,000",
        None,
        ["Data Science", "Python", "JavaScript", "Space Tech"],
    ),
]

UNSTOP_SAMPLES = [
    (
        "Smart India Hackathon 2025",
        "India's largest open innovation platform for students to solve government problems.",
        50, 52, 45,
        "https://www.sih.gov.in",
        "offline",
        "India (Multiple Nodal Centers)",
        "₹1,00,000",
        None,
        ["IoT", "AI/ML", "Blockchain", "Mobile Apps"],
    ),
    (
        "Flipkart GRiD 6.0",
        "Annual engineering excellence challenge by Flipkart for students.",
        40, 42, 35,
        "https://unstop.com/hackathons/flipkart-grid",
        "online",
        "Virtual",
        "₹3,00,000",
        None,
        ["DSA", "System Design", "Machine Learning", "SQL"],
    ),
    (
        "Amazon ML Summer School",
        "Learn ML from Amazon scientists and build real projects.",
        55, 85, 50,
        "https://unstop.com/hackathons/amazon-ml",
        "online",
        "Virtual",
        "Pre-placement Interview",
        None,
        ["Machine Learning", "Python", "Deep Learning", "AWS"],
    ),
]

COMMUNITY_SAMPLES = [
    (
        "IIT Bombay Techfest Hackathon",
        "Asia's largest science and technology festival hackathon.",
        70, 72, 65,
        "https://techfest.org/hackathon",
        "hybrid",
        "IIT Bombay, Mumbai",
        "₹5,00,000",
        None,
        ["Full Stack", "AI/ML", "IoT", "Robotics"],
    ),
    (
        "GDG DevFest India Hackathon",
        "Google Developer Groups community hackathon across India.",
        80, 82, 75,
        "https://devfest.gdg.community",
        "offline",
        "Multiple Cities, India",
        "₹2,00,000",
        None,
        ["Angular", "Flutter", "Firebase", "TensorFlow"],
    ),
    (
        "MLSA Hackathon 2025",
        "Microsoft Learn Student Ambassadors hackathon for students worldwide.",
        90, 92, 85,
        "https://studentambassadors.microsoft.com",
        "online",
        "Global",
        "$5,000",
        None,
        ["Azure", "GitHub", "VS Code", "Power Automate"],
    ),
]


def build_samples(samples, source: str, now=None) -> list[dict]:
    now = now or utc_now()
    hackathons = []
    for (title, description, start, end, deadline, url, mode, location,
         prize_pool, image_url, skills) in samples:
        hackathons.append({
            "title": title,
            "description": description,
            "start_date": days_from(now, start),
            "end_date": days_from(now, end),
            "registration_deadline": days_from(now, deadline),
            "registration_url": url,
            "source": source,
            "mode": mode,
            "location": location,
            "prize_pool": prize_pool,
            "image_url": image_url,
            "skills": list(skills),
            "dates_estimated": True,
        })
    return hackathons


def devfolio_fallback(now=None) -> list[dict]:
    return build_samples(DEVFOLIO_SAMPLES, "devfolio", now)


def devpost_fallback(now=None) -> list[dict]:
    return build_samples(DEVPOST_SAMPLES, "devpost", now)


def fetch_unstop_hackathons(now=None) -> list[dict]:
    hackathons = build_samples(UNSTOP_SAMPLES, "unstop", now)
    logger.info(f"Loaded {len(hackathons)} Unstop hackathons from the static list.")
    return hackathons


def fetch_community_hackathons(now=None) -> list[dict]:
    hackathons = build_samples(COMMUNITY_SAMPLES, "community", now)
    logger.info(f"Loaded {len(hackathons)} community hackathons from the static list.")
    return hackathons
