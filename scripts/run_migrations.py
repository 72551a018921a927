#!/usr/bin/env python3
"""
Database migration runner for WaterWise.
"""
import logging
import subprocess
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from waterwise.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _alembic(*args: str) -> bool:
    try:
        result = subprocess.run(
            ["alembic", *args], check=True, capture_output=True, text=True
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"alembic {' '.join(args)} failed: {e.stderr}")
        return False
    logger.info(f"Output: {result.stdout}")
    return True


def run_migrations() -> bool:
    logger.info("Running database migrations...")
    return _alembic("upgrade", "head")


def create_migration(message: str) -> bool:
    logger.info(f"Creating migration: {message}")
    return _alembic("revision", "--autogenerate", "-m", message)


def main():
    setup_logging()

    if len(sys.argv) < 2 or sys.argv[1] not in ("upgrade", "create"):
        print("Usage: python run_migrations.py [upgrade|create] [message]")
        sys.exit(1)

    if sys.argv[1] == "upgrade":
        success = run_migrations()
    else:
        if len(sys.argv) < 3:
            print("Usage: python run_migrations.py create 'migration message'")
            sys.exit(1)
        success = create_migration(sys.argv[2])

    if not success:
        sys.exit(1)


if __name__ == "__main__":
    main()
