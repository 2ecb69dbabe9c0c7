"""
Infrastructure Setup Script for the Catalog Service
This script checks the database connection and creates the catalog tables.
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from src.db.postgres_client import db

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_database_connection() -> bool:
    """Check if the PostgreSQL connection is working."""
    logger.info("Checking database connection...")

    try:
        if db.ping():
            logger.info("PostgreSQL connection: OK")
            return True
        logger.error("PostgreSQL connection: Failed")
    except SQLAlchemyError as e:
        logger.error(f"PostgreSQL connection error: {e}")
    return False


def main() -> bool:
    """Main setup function."""
    logger.info("Setting up Catalog Service...")

    if not check_database_connection():
        logger.error("Database connection check failed!")
        return False

    try:
        db.create_tables()
    except SQLAlchemyError as e:
        logger.error(f"Table creation failed: {e}")
        return False

    logger.info("Setup complete! Ready to start the server.")
    return True


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
