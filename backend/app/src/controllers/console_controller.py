"""Console prompt and output for the timepiece cost calculator."""

from __future__ import annotations

import logging
from typing import Callable

from src.services.catalog.models import CatalogError
from src.services.catalog.service import TimepieceCostService
from src.services.catalog.taxes import Region

logger = logging.getLogger("console")

PROMPT = "Please enter your province/territory of residence:"
REGION_CHOICES = ", ".join(region.value for region in Region)


def prompt_region_code(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> str:
    """Ask for a province code and return its first token upper-cased."""

    output_fn(PROMPT)
    output_fn(REGION_CHOICES)
    answer = input_fn("")
    tokens = answer.split()
    return tokens[0].upper() if tokens else ""


def run(
    service: TimepieceCostService,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Sweep the catalog, prompt for a region and print the cost breakdown."""

    try:
        timepieces = service.collect_timepieces()
    except CatalogError as exc:
        logger.error("Catalog sweep aborted on page %d (%s)", exc.page, exc.url)
        output_fn(f"Unable to compute the total: {exc.message}")
        return 1

    region_code = prompt_region_code(input_fn, output_fn)
    report = service.price(timepieces, region_code)
    output_fn(report.render_summary())
    return 0
