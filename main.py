"""
Main entry point for the Career Agents API.

Runs the FastAPI app with uvicorn on API_HOST:API_PORT.
"""

import uvicorn

from config.settings import settings
from utils.logging_config import configure_logging


def main():
    configure_logging()
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
