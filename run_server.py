#!/usr/bin/env python3
"""
Onboard Scheduler - service launcher
Serves the tool endpoints (FastAPI) on the configured port
"""
import logging
import uvicorn
from onboard.config import settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    logger.info("Starting Onboard Scheduler service...")
    logger.info(f"Tool server will run on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "onboard.main:app",
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
