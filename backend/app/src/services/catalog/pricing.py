"""Tax-aware cost aggregation over timepiece variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List

from .models import Product, Variant
from .utils import format_cad

logger = logging.getLogger("catalog.pricing")

ZERO = Decimal("0")


@dataclass(slots=True)
class VariantCharge:
    """Contribution of a single variant to the order."""

    product_title: str
    variant_title: str
    purchasable: bool
    amount: Decimal = ZERO


@dataclass(slots=True)
class ProductSubtotal:
    """Sum of a product's variant charges."""

    title: str
    charges: List[VariantCharge] = field(default_factory=list)

    @property
    def subtotal(self) -> Decimal:
        return sum((charge.amount for charge in self.charges), ZERO)


@dataclass(slots=True)
class CostReport:
    """Grand total plus the breakdown that produced it."""

    tax_multiplier: Decimal
    products: List[ProductSubtotal] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum((product.subtotal for product in self.products), ZERO)

    @property
    def unavailable(self) -> List[VariantCharge]:
        return [
            charge
            for product in self.products
            for charge in product.charges
            if not charge.purchasable
        ]

    def render_summary(self) -> str:
        """Turn the report into a plain-text breakdown."""
        lines: List[str] = []
        for product in self.products:
            lines.append(f"{product.title}: {format_cad(product.subtotal)}")
        skipped = len(self.unavailable)
        if skipped:
            lines.append(f"{skipped} variant(s) unavailable for order.")
        lines.append(f"The total cost is {format_cad(self.total)}")
        return "\n".join(lines)


def variant_cost(variant: Variant, tax_multiplier: Decimal) -> Decimal:
    """Exact contribution of one variant; zero when it cannot be purchased."""
    if not variant.purchasable:
        return ZERO
    if variant.taxable:
        return variant.price * tax_multiplier
    return variant.price


def build_cost_report(
    products: Iterable[Product], tax_multiplier: Decimal
) -> CostReport:
    """Price every variant of ``products`` without intermediate rounding."""
    report = CostReport(tax_multiplier=tax_multiplier)
    for product in products:
        entry = ProductSubtotal(title=product.title)
        for variant in product.variants:
            if not variant.purchasable:
                logger.info("%s %s is unavailable for order.", variant.title, product.title)
            entry.charges.append(
                VariantCharge(
                    product_title=product.title,
                    variant_title=variant.title,
                    purchasable=variant.purchasable,
                    amount=variant_cost(variant, tax_multiplier),
                )
            )
        report.products.append(entry)
    return report


def compute_total(products: Iterable[Product], tax_multiplier: Decimal) -> Decimal:
    """Grand total for buying one of every purchasable variant."""
    return build_cost_report(products, tax_multiplier).total
