## Logging setup shared by the web app and scripts
import logging

from studypath.settings import settings

LOG_FORMAT = "[%(asctime)s] [%(name)s] %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
