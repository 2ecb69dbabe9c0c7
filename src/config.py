"""Runtime configuration read from the environment."""

import os

from dotenv import load_dotenv

load_dotenv()

POSTGRES_CONFIG = {
    "host": os.getenv("POSTGRES_HOST", "localhost"),
    "port": int(os.getenv("POSTGRES_PORT", "5432")),
    "database": os.getenv("POSTGRES_DB", "catalog"),
    "user": os.getenv("POSTGRES_USER", "postgres"),
    "password": os.getenv("POSTGRES_PASSWORD", "postgres"),
}

# Full SQLAlchemy URL; takes precedence over POSTGRES_CONFIG when set
DATABASE_URL = os.getenv("DATABASE_URL")

MEDIA_SERVICE_URL = os.getenv("MEDIA_SERVICE_URL", "http://localhost:8081")
MEDIA_SERVICE_TIMEOUT = float(os.getenv("MEDIA_SERVICE_TIMEOUT", "5"))

MAX_UPLOADED_IMAGES = int(os.getenv("MAX_UPLOADED_IMAGES", "5"))

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
