import logging

from .config import settings


def setup_logging() -> None:
    log_level = settings.log_level.upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    logging.getLogger("jwt_inspector").setLevel(log_level)
