import pytest

from rest_framework.test import APIClient

from modules.dishes.repositories.memory_repository import dish_repository
from modules.orders.repositories.memory_repository import order_repository


@pytest.fixture(autouse=True)
def _empty_stores():
    """Every test starts with empty dish and order stores."""
    dish_repository.clear()
    order_repository.clear()
    yield
    dish_repository.clear()
    order_repository.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def dish_payload():
    return {
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and chickpeas",
        "image_url": "https://images.example.com/spaghetti.jpg",
        "price": 19,
    }


@pytest.fixture()
def order_payload():
    return {
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "pending",
        "dishes": [{"id": "1", "name": "Spaghetti", "price": 19, "quantity": 2}],
    }
