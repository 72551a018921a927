"""
Database seeding module for development and testing.
Populates empty tables with sample articles, video tutorials and water zones.
"""

import json
import logging
from datetime import date, datetime, timedelta, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from waterwise.core.config import settings
from waterwise.models.content import Article, VideoTutorial
from waterwise.models.water_zone import WaterZone

logger = logging.getLogger(__name__)

SAMPLE_ARTICLES = [
    {
        "title": "Drip Irrigation Basics",
        "category": "technology",
        "author": "Priya Nair",
        "date": date(2024, 3, 12),
        "tags": ["irrigation", "farming"],
        "image_url": "https://images.unsplash.com/photo-1563514227147-6d2ff665a6a0",
        "content": (
            "Drip irrigation delivers water directly to the root zone of each plant.\n\n"
            "Compared with flood irrigation it can cut water use by 30 to 50 percent, "
            "while reducing weeds and soil erosion.\n\n"
            "Start with a filter and pressure regulator, lay the mainline along the "
            "beds and punch emitters next to every plant."
        ),
    },
    {
        "title": "Why Groundwater Is Falling",
        "category": "research",
        "author": "Arjun Mehta",
        "date": date(2024, 2, 2),
        "tags": ["groundwater", "policy"],
        "image_url": "https://images.unsplash.com/photo-1500375592092-40eb2168fd21",
        "content": (
            "Across much of India groundwater is extracted faster than monsoon rains "
            "can recharge it.\n\n"
            "Satellite gravity measurements show the steepest declines in the "
            "north-western states, where wells supply most irrigation."
        ),
    },
    {
        "title": "Ten Ways to Save Water at Home",
        "category": "conservation",
        "author": "Kavya Rao",
        "date": date(2024, 1, 18),
        "tags": ["household", "tips"],
        "image_url": "https://images.unsplash.com/photo-1527066579998-dbbae57f45ce",
        "content": (
            "Fix leaking taps: a single leak can waste thousands of litres a year.\n\n"
            "Reuse the water from washing vegetables for your plants, and run washing "
            "machines only with full loads."
        ),
    },
]

SAMPLE_VIDEOS = [
    {
        "title": "Building a Rooftop Rainwater System",
        "description": "Step by step installation of gutters, first-flush diverter and storage tank.",
        "category": "tutorials",
        "duration": "12:45",
        "instructor": "Ravi Kumar",
        "date": date(2024, 3, 1),
        "thumbnail_url": "https://img.youtube.com/vi/7ncQ8cJ2kDo/hqdefault.jpg",
        "video_url": "https://www.youtube.com/watch?v=7ncQ8cJ2kDo",
    },
    {
        "title": "Greywater Filter Demonstration",
        "description": "A sand and gravel greywater filter built from recycled drums.",
        "category": "demonstrations",
        "duration": "8:20",
        "instructor": "Meera Iyer",
        "date": date(2024, 2, 14),
        "thumbnail_url": "https://img.youtube.com/vi/Qq8lJ2Y4cOs/hqdefault.jpg",
        "video_url": "https://youtu.be/Qq8lJ2Y4cOs",
    },
    {
        "title": "Aquifers Explained",
        "description": "Lecture on how aquifers store and release groundwater.",
        "category": "lectures",
        "duration": "25:10",
        "instructor": "Dr. S. Banerjee",
        "date": date(2024, 1, 9),
        "thumbnail_url": "https://example.org/thumbnails/aquifers.jpg",
        "video_url": "https://example.org/videos/aquifers.mp4",
    },
]


def sample_zones(now: datetime) -> list:
    """Sample zones; positions use every stored encoding the map accepts."""
    return [
        {
            "location": "Chennai",
            "sub_city": "Velachery",
            "state": "Tamil Nadu",
            "position": json.dumps([12.9815, 80.2180]),
            "severity": "high",
            "water_level": 2.1,
            "rainfall_data": 18.0,
            "groundwater_level": 14.5,
            "last_updated": now - timedelta(days=1),
        },
        {
            "location": "Bangalore",
            "sub_city": "Whitefield",
            "state": "Karnataka",
            "position": [12.9698, 77.7500],
            "severity": "high",
            "water_level": 3.4,
            "rainfall_data": 22.5,
            "groundwater_level": 21.0,
            "last_updated": now - timedelta(days=3),
        },
        {
            "location": "Pune",
            "sub_city": "Kothrud",
            "state": "Maharashtra",
            "position": {"0": 18.5074, "1": 73.8077},
            "severity": "medium",
            "water_level": 5.8,
            "rainfall_data": 41.0,
            "groundwater_level": 9.2,
            "last_updated": now - timedelta(days=12),
        },
        {
            "location": "Jaipur",
            "sub_city": "Malviya Nagar",
            "state": "Rajasthan",
            "position": [26.8549, 75.8243],
            "severity": "high",
            "water_level": 1.2,
            "rainfall_data": 5.5,
            "groundwater_level": 32.8,
            "last_updated": now - timedelta(days=45),
        },
        {
            "location": "Kochi",
            "sub_city": "Edappally",
            "state": "Kerala",
            "position": [10.0261, 76.3125],
            "severity": "low",
            "water_level": 9.6,
            "rainfall_data": 112.0,
            "groundwater_level": 4.1,
            "last_updated": now - timedelta(days=2),
        },
    ]


def _seed_table(db: Session, model, rows: list) -> int:
    if db.query(model).first():
        logger.info(f"{model.__tablename__} already populated, skipping")
        return 0
    db.add_all(model(**row) for row in rows)
    db.commit()
    logger.info(f"Seeded {len(rows)} rows into {model.__tablename__}")
    return len(rows)


def seed_data(db: Session) -> None:
    """
    Seed the database with sample data where tables are empty.
    Only runs if SEEDING=true in settings.
    """
    if not settings.seeding:
        logger.info("Skipping seeding (SEEDING=false)")
        return

    logger.info("Checking if database seeding is needed...")
    try:
        _seed_table(db, Article, SAMPLE_ARTICLES)
        _seed_table(db, VideoTutorial, [dict(row, views=0) for row in SAMPLE_VIDEOS])
        _seed_table(db, WaterZone, sample_zones(datetime.now(timezone.utc)))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}")
        raise
