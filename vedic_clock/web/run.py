"""
Run script for the clock API.
"""

import sys
from typing import Any, Dict

import uvicorn
from loguru import logger

from ..config import load_config
from ..orchestration.clock_service import ClockService
from .app import create_app

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


UVICORN_LEVELS = ('critical', 'error', 'warning', 'info', 'debug', 'trace')


def uvicorn_log_level(level: Any) -> str:
    """Map a loguru level name onto uvicorn's; unknown names (e.g. SUCCESS) become info."""
    name = str(level).lower()
    return name if name in UVICORN_LEVELS else 'info'


def configure_logging(config: Dict[str, Any]) -> None:
    """Replace loguru's default sink with stderr (and an optional file)."""
    log_config = config.get('logging', {})
    level = log_config.get('level', 'INFO')

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    if log_config.get('file'):
        logger.add(log_config['file'], rotation=log_config.get('rotation', '10 MB'), level=level)


def main():
    """Main entry point."""
    config = load_config()
    configure_logging(config)

    service = ClockService(config)
    app = create_app(service, config)

    host = config['server']['host']
    port = config['server']['port']
    logger.info(f"API on http://{host}:{port}")

    # uvicorn handles SIGINT/SIGTERM and runs the app's shutdown hook
    uvicorn.run(app, host=host, port=port, log_level=uvicorn_log_level(config['logging']['level']))


if __name__ == "__main__":
    main()
