from __future__ import annotations

import argparse
import logging
import os
from urllib.parse import quote, urljoin

import requests

from .models import OrderRequest, OrderResult, StockCheck

logger = logging.getLogger(__name__)

BASE_URL_ENV = "INVENTORY_BASE_URL"
DEFAULT_BASE_URL = "http://restapi:80/"

# Status codes whose body is an order failure payload rather than an HTTP error.
_ORDER_FAILURE_CODES = {400, 409}


class InventoryClient:
    """
    HTTP client for the inventory service.

    Responses are decoded into the same typed results the server produces,
    so callers never poke at raw JSON.

    Parameters
    ----------
    base_url : str
        Service root, e.g. "http://restapi:80/".

    timeout : float, default=5.0
        Per-request timeout in seconds.

    session : requests.Session | None
        Optional session to reuse connections or to stub out in tests.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return urljoin(self.base_url, path)

    def check_stock(self, product_id: str, quantity: int) -> StockCheck:
        url = self._url(f"api/inventory/check/{quote(product_id, safe='')}/{quantity}")
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return StockCheck.model_validate(resp.json())

    def create_order(self, product_id: str | None, quantity: int) -> OrderResult:
        """
        Place an order. Rejections (400, 409) come back as a failed result;
        any other error status raises requests.HTTPError.
        """
        order = OrderRequest(product_id=product_id, quantity=quantity)
        payload = order.model_dump(by_alias=True)
        resp = self.session.post(
            self._url("api/inventory/order"), json=payload, timeout=self.timeout
        )
        if resp.status_code in _ORDER_FAILURE_CODES:
            result = OrderResult.model_validate(resp.json())
            logger.info("Order rejected (%s): %s", resp.status_code, result.message)
            return result
        resp.raise_for_status()
        return OrderResult.model_validate(resp.json())


def main(argv: list[str] | None = None) -> int:
    """Check stock for a product, then order it, printing both answers."""
    parser = argparse.ArgumentParser(prog="inventory-client")
    parser.add_argument(
        "--base-url",
        default=os.environ.get(BASE_URL_ENV, DEFAULT_BASE_URL),
        help=f"service root (default: ${BASE_URL_ENV} or {DEFAULT_BASE_URL})",
    )
    parser.add_argument("--product", default="P001")
    parser.add_argument("--quantity", type=int, default=3)
    parser.add_argument("--timeout", type=float, default=5.0)
    args = parser.parse_args(argv)

    client = InventoryClient(args.base_url, timeout=args.timeout)

    check = client.check_stock(args.product, args.quantity)
    print(f"Check Stock: {check.model_dump(by_alias=True)}")

    result = client.create_order(args.product, args.quantity)
    print(f"Create Order: {result.model_dump(by_alias=True)}")

    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
