import sys

from loguru import logger

from config import Settings

LOG_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSSZ} | {level} | {message} | {extra}"


def setup_logging(settings: Settings) -> None:
    """Replace loguru's default handler with the configured sink.

    With ``LOG_FILE`` set, records go to that file, rotated daily. Otherwise
    they go to stderr. Calling this again (one call per ``create_app``)
    simply swaps the handler.
    """
    logger.remove()
    if settings.log_file:
        logger.add(
            sink=settings.log_file,
            format=LOG_FORMAT,
            level=settings.log_level.upper(),
            serialize=settings.log_serialize,
            rotation="1 day",
        )
    else:
        logger.add(
            sink=sys.stderr,
            format=LOG_FORMAT,
            level=settings.log_level.upper(),
            serialize=settings.log_serialize,
        )
