"""
Server entrypoint. Run from project root:

  python -m careconnect.server

or via the installed console script: careconnect
"""

import logging

import uvicorn

from careconnect.core.config import get_settings


def main() -> None:
    """Configure logging and serve the app on HOST:PORT (default port 3001)."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logging.getLogger(__name__).info("Server running on port %s", settings.PORT)
    uvicorn.run(
        "careconnect.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
