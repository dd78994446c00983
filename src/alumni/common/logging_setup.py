"""
Logging setup with rotation for the alumni showcase
"""
import logging
from logging.handlers import RotatingFileHandler

from alumni.config import Settings

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

# chatty libraries used while fetching / serving; only their warnings matter here
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(settings: Settings | None = None, *, console: bool = True):
    """
    Configure the "alumni" logger from Settings (ALUMNI_LOG_PATH / ALUMNI_LOG_LEVEL).

    Log file rotates at 2MB with 5 backups. Calling it again replaces the
    handlers, so streamlit reruns don't duplicate output.

    Returns:
        logging.Logger: the configured "alumni" logger
    """
    settings = settings or Settings.from_env()
    level = str(settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {settings.log_level!r}")

    log_file = settings.log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("alumni")
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=2*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("logging to %s at %s", log_file, level)
    return logger
