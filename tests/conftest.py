import pytest

from inventory_ledger import Ledger

SEED = {"P001": 100, "P002": 50}


def pytest_configure() -> None:
    """Configure a minimal database-free Django setup once per test run."""
    from django.conf import settings

    if settings.configured:
        return

    settings.configure(
        SECRET_KEY="test",
        INSTALLED_APPS=["inventory_ledger"],
        ROOT_URLCONF="inventory_ledger.urls",
        ALLOWED_HOSTS=["testserver"],
        MIDDLEWARE=[],
        DATABASES={},
        INVENTORY_SEED_STOCK=dict(SEED),
        INVENTORY_LOCK_TIMEOUT=3.0,
        USE_TZ=True,
    )

    import django

    django.setup()


@pytest.fixture
def ledger() -> Ledger:
    return Ledger(SEED)
