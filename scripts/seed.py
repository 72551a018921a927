import logging
import os
import sys

# Add parent directory to path so we can import waterwise
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from waterwise.core.config import settings
from waterwise.core.database import SessionLocal, init_db
from waterwise.core.logging_config import setup_logging
from waterwise.core.seeding import seed_data

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    logger.info("Starting database seeding (articles, videos, water zones)...")
    settings.seeding = True

    init_db()
    db = SessionLocal()
    try:
        seed_data(db)
        logger.info("Seeding completed successfully.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
