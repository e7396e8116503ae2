"""
Run the API with uvicorn on HOST:PORT from settings:

  python -m tasktrack.server

or via the installed console script `tasktrack-server`.
"""

import logging
import sys

import uvicorn

from tasktrack.core.config import get_settings
from tasktrack.core.log import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info(
        "Starting Tasktrack on %s:%s (env=%s)",
        settings.HOST,
        settings.PORT,
        settings.APP_ENV,
    )
    uvicorn.run(
        "tasktrack.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
