"""Console entry point: total cost of every watch and clock in the store."""

import sys

from configs import settings
from src.controllers.console_controller import run
from src.logger_config import get_logger
from src.services.catalog.fetcher import CatalogClient
from src.services.catalog.service import TimepieceCostService

logger = get_logger("catalog", settings.LOG_LEVEL)
get_logger("console", settings.LOG_LEVEL)


def main() -> int:
    """Build the service from settings and run the interactive calculation."""
    logger.info("Sweeping catalog at %s", settings.CATALOG_ENDPOINT)
    client = CatalogClient(
        settings.CATALOG_ENDPOINT, timeout=settings.CATALOG_REQUEST_TIMEOUT
    )
    return run(TimepieceCostService(client))


if __name__ == "__main__":
    sys.exit(main())
