"""Test the end-to-end timepiece cost service."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.services.catalog.fetcher import CatalogClient
from src.services.catalog.models import CatalogFetchError
from src.services.catalog.service import TimepieceCostService
from src.services.catalog.taxes import TaxTable
from src.services.catalog.utils import format_cad

from catalog_fixtures import fake_response, product_payload, session_returning, variant_payload

ENDPOINT = "http://shop.example/products.json"


@pytest.fixture()
def clock_catalog():
    session = session_returning(
        fake_response(
            {
                "products": [
                    product_payload(
                        "Clock",
                        "Clock",
                        [
                            variant_payload("V1", "10.00"),
                            variant_payload("V2", "5.00", available=False),
                        ],
                    ),
                    product_payload("Lamp", "Lamp", [variant_payload("Bulb", "99.00")]),
                ]
            }
        ),
        fake_response({"products": []}),
    )
    return CatalogClient(ENDPOINT, session=session)


def test_single_clock_in_alberta_totals_ten_fifty(clock_catalog):
    report = TimepieceCostService(clock_catalog).calculate("AB")

    assert report.total == Decimal("10.50")
    assert format_cad(report.total) == "$10.50"
    assert [charge.variant_title for charge in report.unavailable] == ["V2"]


def test_collect_timepieces_skips_other_categories(clock_catalog):
    timepieces = TimepieceCostService(clock_catalog).collect_timepieces()

    assert [product.title for product in timepieces] == ["Clock"]


def test_injected_tax_table_is_used(clock_catalog):
    service = TimepieceCostService(clock_catalog, tax_table=TaxTable({"AB": Decimal("2")}))

    assert service.calculate("ab").total == Decimal("20.00")


def test_fetch_failure_propagates():
    client = MagicMock(spec=CatalogClient)
    client.fetch_all_pages.side_effect = CatalogFetchError(3, ENDPOINT, "boom")

    with pytest.raises(CatalogFetchError):
        TimepieceCostService(client).calculate("ON")
