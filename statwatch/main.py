# statwatch/main.py

import sys
import asyncio

from .config import Config
from .core.exceptions import ConfigurationError
from .services.poller import StatsPoller
from .utils.logger import LoggerSetup

logger = LoggerSetup.setup(__name__)


async def main() -> None:
    """Application entry point"""
    try:
        config = Config()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    poller = StatsPoller(config.probe)
    await poller.run()


def run() -> None:
    """Console script entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutdown requested")


if __name__ == "__main__":
    run()
