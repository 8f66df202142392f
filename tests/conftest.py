from datetime import datetime, timedelta, timezone

import mongomock
import pytest
from fastapi.testclient import TestClient

from db.database import get_database
from main import app


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def db():
    return mongomock.MongoClient()["cocktails_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_database] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def clock(monkeypatch):
    """Deterministic timestamps: each call is one second after the previous one"""
    state = {"now": datetime(2024, 3, 16, 12, 0, 0, tzinfo=timezone.utc)}

    def tick():
        state["now"] += timedelta(seconds=1)
        return state["now"]

    monkeypatch.setattr("core.converters.utcnow", tick)
    return state


@pytest.fixture
def create_ingredient(client):
    def _create(**overrides):
        payload = {
            "name": "Lime",
            "description": "A sour fruit used in cocktails",
            "isAlcoholic": False,
            "image": "https://example.com/images/lime.jpg",
        }
        payload.update(overrides)
        response = client.post("/ingredients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_cocktail(client):
    def _create(**overrides):
        payload = {"name": "Margarita", "category": "Cocktail", "instructions": "Mix"}
        payload.update(overrides)
        response = client.post("/cocktails", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def link(client):
    def _link(cocktail, ingredient, quantity="1 oz"):
        response = client.post(
            "/cocktail-ingredients",
            json={"cocktailId": cocktail["id"], "ingredientId": ingredient["id"], "quantity": quantity},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _link


@pytest.fixture
def margarita(create_ingredient, create_cocktail, link):
    """Lime + Tequila linked to a Margarita"""
    lime = create_ingredient(name="Lime", isAlcoholic=False)
    tequila = create_ingredient(name="Tequila", isAlcoholic=True, description="Agave spirit")
    cocktail = create_cocktail(name="Margarita", category="Cocktail", instructions="Mix")
    link(cocktail, lime, "1 oz")
    link(cocktail, tequila, "2 oz")
    return {"cocktail": cocktail, "lime": lime, "tequila": tequila}
