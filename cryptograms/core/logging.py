import logging

from rich.console import Console
from rich.logging import RichHandler

from cryptograms.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger once for the whole process.

    Development gets colour console output through Rich; other environments
    get plain single-line records suitable for a log collector.
    """
    level = "DEBUG" if settings.debug else settings.log_level.upper()

    if settings.is_development:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)

    # SQL echo is far too chatty below WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
