from __future__ import annotations

import json
import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .apps import get_ledger
from .exceptions import InventoryError, LockAcquireTimeout, ValidationError
from .models import BODY_NOT_OBJECT, OrderRequest, OrderResult

logger = logging.getLogger(__name__)


def _json(result: OrderResult, *, status: int = 200) -> JsonResponse:
    """
    Small helper to keep order responses consistent across outcomes.
    """
    return JsonResponse(result.model_dump(by_alias=True), status=status)


def _parse_body(request: HttpRequest) -> OrderRequest:
    # ValueError covers bad JSON, bad UTF-8 and over-long integer literals.
    try:
        payload = json.loads(request.body or b"null")
    except (ValueError, RecursionError) as e:
        raise ValidationError(BODY_NOT_OBJECT) from e

    if not isinstance(payload, dict):
        raise ValidationError(BODY_NOT_OBJECT)

    return OrderRequest.from_payload(payload)


@require_GET
def check_stock(request: HttpRequest, product_id: str, quantity: int) -> HttpResponse:
    """
    Advisory availability check. Unknown products answer available=false.
    """
    result = get_ledger().check_stock(product_id, quantity)
    return JsonResponse(result.model_dump(by_alias=True))


@csrf_exempt  # called by other services, not browsers
@require_POST
def create_order(request: HttpRequest) -> HttpResponse:
    """
    Place an order against the shared ledger.

    400 for malformed requests and insufficient stock, 409 when the product
    lock could not be taken in time. Nothing is changed on any failure.
    """
    try:
        order = _parse_body(request)
        result = get_ledger().create_order(order)
    except LockAcquireTimeout:
        logger.warning("Order rejected, inventory busy: %s", request.body[:200])
        busy = OrderResult(success=False, message=LockAcquireTimeout.default_message)
        return _json(busy, status=409)
    except InventoryError as e:
        logger.info("Order rejected (%s): %s", e.code, e.message)
        return _json(OrderResult.failure(e), status=400)

    return _json(result)
