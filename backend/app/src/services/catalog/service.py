"""High-level service that prices every timepiece in the catalog."""

from __future__ import annotations

import logging
from typing import List, Optional

from .fetcher import CatalogClient
from .filters import select_timepieces
from .models import Product
from .pricing import CostReport, build_cost_report
from .taxes import DEFAULT_TAX_TABLE, TaxTable

logger = logging.getLogger("catalog.service")


class TimepieceCostService:
    """Coordinate the catalog sweep, the filter and the aggregation."""

    def __init__(
        self, client: CatalogClient, tax_table: TaxTable = DEFAULT_TAX_TABLE
    ) -> None:
        self.client = client
        self.tax_table = tax_table

    def collect_timepieces(self) -> List[Product]:
        """Sweep the whole catalog, then keep its watches and clocks."""
        pages = self.client.fetch_all_pages()
        timepieces = select_timepieces(pages)
        logger.info(
            "Found %d timepieces across %d catalog pages", len(timepieces), len(pages)
        )
        return timepieces

    def price(self, timepieces: List[Product], region_code: Optional[str]) -> CostReport:
        multiplier = self.tax_table.resolve(region_code)
        logger.debug("Using tax multiplier %s for region %r", multiplier, region_code)
        return build_cost_report(timepieces, multiplier)

    def calculate(self, region_code: Optional[str]) -> CostReport:
        """Run the full pipeline for ``region_code``."""
        return self.price(self.collect_timepieces(), region_code)
