import os

import pytest

# Tests build their own stores; keep the cached default one empty
os.environ.setdefault("SEED_DEMO_ORDERS", "false")
os.environ.setdefault("ENV_MODE", "development")

from fastapi.testclient import TestClient  # noqa: E402

from awesome_pizza.core.config import get_settings  # noqa: E402
from awesome_pizza.models import OrderDraft, OrderItem  # noqa: E402
from awesome_pizza.services.orders import (  # noqa: E402
    InMemoryOrderStore,
    demo_orders,
    get_order_store,
    reset_order_store,
)
from awesome_pizza.services.validation import OrderValidator  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_caches():
    get_settings.cache_clear()
    reset_order_store()
    yield
    get_settings.cache_clear()
    reset_order_store()


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def seeded_store(store) -> InMemoryOrderStore:
    store.seed(demo_orders())
    return store


@pytest.fixture
def validator() -> OrderValidator:
    return OrderValidator()


@pytest.fixture
def pizza_draft() -> OrderDraft:
    return OrderDraft(
        customer_name="Mike",
        contents=[OrderItem(item_name="Quattro Stagioni", quantity=3)],
    )


@pytest.fixture
def client(seeded_store):
    from awesome_pizza.main import app

    app.dependency_overrides[get_order_store] = lambda: seeded_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
