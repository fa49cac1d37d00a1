"""
Run the API server:

  python -m marketing_api

Host, port and log level come from HOST, PORT and LOG_LEVEL (env or .env).
"""

import logging
import sys

import uvicorn

from marketing_api.core.config import get_settings
from marketing_api.core.store import DataLoadError
from marketing_api.main import create_app

logger = logging.getLogger("marketing_api")


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    try:
        app = create_app(settings=settings)
    except DataLoadError as e:
        logger.error("Failed to load data: %s", e.message)
        return 1

    logger.info("Amana Marketing API listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
