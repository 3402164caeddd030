"""Run the Steam Library API with uvicorn: ``python -m steam_library``."""

import logging

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, API keys included, at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger("steam_library")
    for variable in settings.missing_keys():
        logger.warning("%s not set; routes that need it will answer with errors.", variable)

    uvicorn.run("steam_library.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
