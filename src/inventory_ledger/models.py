"""
Request and response contract of the inventory API.

The JSON shapes are camelCase (`productId`) on the wire and snake_case in
Python. Both the server views and the HTTP client go through these models, so
the two sides cannot drift apart.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InventoryError, ValidationError

ORDER_CREATED = "Order created."

# Messages for fields that fail validation, keyed by the field's wire name.
_FIELD_ERRORS = {
    "productId": "ProductId must be a string.",
    "quantity": "Quantity must be an integer.",
}
BODY_NOT_OBJECT = "Request body must be a JSON object."


class WireModel(BaseModel):
    """
    Base for the wire models.

    Property names bind case-insensitively (productId, ProductId, productid),
    and the snake_case field name is accepted as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        names = {}
        for name, field in cls.model_fields.items():
            wire = field.alias or name
            names[name.lower()] = wire
            names[wire.lower()] = wire
        return {
            names.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }


class OrderRequest(WireModel):
    """
    A single order for `quantity` units of `product_id`.

    Not stored anywhere; it only lives for the duration of a request.
    """

    product_id: StrictStr | None = Field(default=None, alias="productId")
    quantity: StrictInt = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "OrderRequest":
        """
        Build a request from a decoded JSON body.

        A missing quantity defaults to 0. Presence of the product id is not
        checked here; the ledger reports that as its first precondition.

        Raises
        ------
        ValidationError
            If the body is not an object, the product id is not a string or
            the quantity not an integer.
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            loc = e.errors()[0]["loc"]
            message = _FIELD_ERRORS.get(loc[0], BODY_NOT_OBJECT) if loc else BODY_NOT_OBJECT
            raise ValidationError(message) from e


class StockCheck(WireModel):
    """Answer to "does `product_id` have at least the asked quantity?"."""

    product_id: str = Field(alias="productId")
    available: bool


class OrderResult(WireModel):
    """Outcome of an order: a success flag and a caller-facing message."""

    success: bool
    message: str

    @classmethod
    def created(cls) -> "OrderResult":
        return cls(success=True, message=ORDER_CREATED)

    @classmethod
    def failure(cls, exc: InventoryError) -> "OrderResult":
        return cls(success=False, message=exc.message)
