"""HTTP client that sweeps the paginated ``products.json`` catalog."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterator, List, Optional

import requests
from pydantic import ValidationError

from .models import CatalogDecodeError, CatalogFetchError, Page

logger = logging.getLogger("catalog.fetcher")

FIRST_PAGE = 1


class CatalogClient:
    """Fetch catalog pages one at a time until an empty page comes back."""

    def __init__(
        self,
        endpoint: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_page(self, index: int) -> Page:
        """Request and decode ``endpoint?page=<index>``."""

        try:
            response = self.session.get(
                self.endpoint, params={"page": index}, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.error("Failed to fetch catalog page %d: %s", index, exc)
            raise CatalogFetchError(
                index, self.endpoint, f"Could not fetch catalog page {index}: {exc}"
            ) from exc

        try:
            payload = response.json(parse_float=Decimal)
        except ValueError as exc:
            logger.error("Catalog page %d is not valid JSON: %s", index, exc)
            raise CatalogDecodeError(
                index,
                self.endpoint,
                f"Catalog page {index} returned malformed JSON: {exc}",
                body=response.text,
            ) from exc

        try:
            page = Page.model_validate(payload)
        except ValidationError as exc:
            logger.error("Catalog page %d has an unexpected shape: %s", index, exc)
            raise CatalogDecodeError(
                index,
                self.endpoint,
                f"Catalog page {index} has an unexpected shape: {exc}",
                body=response.text,
            ) from exc

        logger.debug("Fetched catalog page %d with %d products", index, len(page.products))
        return page

    def iter_pages(self) -> Iterator[Page]:
        """Yield non-empty pages in order; the first empty page ends the sweep."""

        index = FIRST_PAGE
        while True:
            page = self.fetch_page(index)
            if page.is_empty:
                logger.info("Catalog sweep finished after %d pages", index - FIRST_PAGE)
                return
            yield page
            index += 1

    def fetch_all_pages(self) -> List[Page]:
        """Drain the whole catalog before returning."""

        return list(self.iter_pages())


def fetch_all_pages(
    base_endpoint: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> List[Page]:
    """Convenience wrapper around :class:`CatalogClient`."""
    return CatalogClient(base_endpoint, session=session, timeout=timeout).fetch_all_pages()
