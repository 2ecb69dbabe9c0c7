#!/usr/bin/env python3
"""
Catalog Service Startup Script
This script starts the FastAPI server with all services.
"""

import logging

import uvicorn

from src.config import LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info("Starting Catalog Service...")
    logger.info("Available endpoints:")
    logger.info("  - Health Check: GET /health")
    logger.info("  - Catalog items: /api/{courses,training-sessions,seminars,physical-goods}")
    logger.info("  - Images: POST/DELETE /api/{family}/{owner_id}/images")
    logger.info("  - Video: PUT/DELETE /api/{family}/{owner_id}/video")
    logger.info("  - Course parts: /api/course-parts")
    logger.info("  - Products: GET /api/products")
    logger.info("  - API Docs: http://localhost:8000/docs")

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=LOG_LEVEL.lower()
    )
