import logging
from typing import Optional

from .config import Config


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[int] = None) -> None:
    """Install a stream handler on the root logger.

    Falls back to ``Config.LOG_LEVEL`` when no explicit level is given.
    """
    logging.basicConfig(
        level=level if level is not None else Config.log_level(),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ]
    )
