import pytest
from rest_framework.test import APIClient

from apps.users.services import bootstrap_identity


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_id(db):
    """A bootstrapped device identifier"""
    user_id, _ = bootstrap_identity()
    return user_id


@pytest.fixture
def make_item(api_client):
    def _make_item(user_id, name="Tomatoes", quantity_value=10, quantity_unit="kg",
                   buying_price=2, selling_price=5):
        response = api_client.post("/api/items", {
            "userId": user_id,
            "name": name,
            "quantity_value": quantity_value,
            "quantity_unit": quantity_unit,
            "buying_price": buying_price,
            "selling_price": selling_price,
        })
        assert response.status_code == 200, response.content
        return response.json()["item"]
    return _make_item
