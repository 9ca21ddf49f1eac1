from django.urls import path, register_converter

from . import views


class SignedIntConverter:
    """Like the built-in ``int`` converter, but also matches negative values."""

    regex = "-?[0-9]+"

    def to_python(self, value: str) -> int:
        return int(value)

    def to_url(self, value: int) -> str:
        return str(value)


register_converter(SignedIntConverter, "signed_int")

urlpatterns = [
    path(
        "api/inventory/check/<str:product_id>/<signed_int:quantity>",
        views.check_stock,
        name="check_stock",
    ),
    path("api/inventory/order", views.create_order, name="create_order"),
]
