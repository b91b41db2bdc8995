"""Payload builders shared by the catalog tests."""

from typing import Any, Dict, List
from unittest.mock import MagicMock


def variant_payload(
    title: str = "Default",
    price: Any = "10.00",
    requires_shipping: bool = True,
    taxable: bool = True,
    available: bool = True,
) -> Dict[str, Any]:
    return {
        "id": 1,
        "title": title,
        "requires_shipping": requires_shipping,
        "taxable": taxable,
        "available": available,
        "price": price,
        "sku": "",
    }


def product_payload(
    title: str, product_type: str, variants: List[Dict[str, Any]]
) -> Dict[str, Any]:
    return {
        "id": 1,
        "title": title,
        "product_type": product_type,
        "vendor": "Shopicruit",
        "variants": variants,
    }


def fake_response(payload: Any = None, status_code: int = 200, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    return response


def session_returning(*responses: MagicMock) -> MagicMock:
    session = MagicMock()
    session.get.side_effect = list(responses)
    return session
