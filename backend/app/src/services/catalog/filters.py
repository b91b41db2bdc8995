"""Selection of timepieces from fetched catalog pages."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List, Union

from .models import Page, Product

TIMEPIECE_CATEGORIES: FrozenSet[str] = frozenset({"Watch", "Clock"})


def is_timepiece(product: Product) -> bool:
    """Exact, case-sensitive category match."""
    return product.category in TIMEPIECE_CATEGORIES


def _iter_products(items: Iterable[Union[Page, Product]]) -> Iterator[Product]:
    for item in items:
        if isinstance(item, Page):
            yield from item.products
        else:
            yield item


def select_timepieces(pages: Iterable[Union[Page, Product]]) -> List[Product]:
    """Return every Watch or Clock in catalog order.

    Accepts pages or an already flattened product list, so the filter can be
    re-applied to its own output.
    """
    return [product for product in _iter_products(pages) if is_timepiece(product)]
