"""Logging configuration for the application."""

import logging
import sys

from debook.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging.

    Application code logs through logfire; this covers third-party
    libraries (uvicorn, aiokafka, sqlalchemy) that use ``logging``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # aiokafka logs every rebalance and reconnect at INFO
    logging.getLogger("aiokafka").setLevel(logging.WARNING)
    logging.getLogger("kafka").setLevel(logging.WARNING)

    logging.getLogger("debook").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: service={settings.service}, "
        f"environment={settings.environment}, level={logging.getLevelName(level)}"
    )
