import sys

from loguru import logger

from ratecache import config

# (Brief) Turns on the package's records and replaces loguru's default sink with a stderr sink at the given level.
# (Usage) Call once at application start. Until then the package logs nothing; library code only emits DEBUG records.
def setup_logging(level: str | None = None):
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or config.settings.log_level).upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
    )
    logger.enable("ratecache")
    return logger
