"""Entrypoint that reads PORT from the environment and starts the server."""
import logging
import sys

import uvicorn

from app.config import ConfigError, get_settings
from app.main import create_app

logger = logging.getLogger("run")


def main():
    try:
        settings = get_settings()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
