"""
Tests for the /ingredients endpoints (routers.ingredients).
"""

import pytest

MISSING_ID = "60b7c7e3f4e8fa1b3c7a5392"

VALID = {
    "name": "Lime",
    "description": "A sour fruit used in cocktails",
    "isAlcoholic": False,
    "image": "https://example.com/images/lime.jpg",
}


def test_list_returns_all_and_empty_is_ok(client, create_ingredient):
    assert client.get("/ingredients").json() == []

    create_ingredient(name="Lime")
    create_ingredient(name="Tequila", isAlcoholic=True)

    response = client.get("/ingredients")
    assert response.status_code == 200
    assert {i["name"] for i in response.json()} == {"Lime", "Tequila"}


def test_create_returns_persisted_fields(client):
    response = client.post("/ingredients", json=VALID)

    assert response.status_code == 201
    body = response.json()
    assert {k: body[k] for k in VALID} == VALID
    assert body["createdAt"] and body["updatedAt"]


def test_create_accepts_false_is_alcoholic(client):
    response = client.post("/ingredients", json={**VALID, "isAlcoholic": False})
    assert response.status_code == 201
    assert response.json()["isAlcoholic"] is False


@pytest.mark.parametrize("missing", ["name", "description", "isAlcoholic", "image"])
def test_create_requires_all_four_fields(client, db, missing):
    payload = {k: v for k, v in VALID.items() if k != missing}
    response = client.post("/ingredients", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: name, description, isAlcoholic, image"
    assert db["ingredients"].count_documents({}) == 0


@pytest.mark.parametrize("value", ["true", 1, 0, "yes", None, []])
def test_create_rejects_non_boolean_is_alcoholic(client, db, value):
    response = client.post("/ingredients", json={**VALID, "isAlcoholic": value})

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: name, description, isAlcoholic, image"
    assert db["ingredients"].count_documents({}) == 0


def test_create_stores_numeric_name_as_text(client):
    response = client.post("/ingredients", json={**VALID, "name": 12})

    assert response.status_code == 201
    assert response.json()["name"] == "12"


def test_update_without_body_only_touches_updated_at(client, clock, create_ingredient):
    lime = create_ingredient()
    response = client.put(f"/ingredients/{lime['id']}")

    assert response.status_code == 200
    body = response.json()
    assert {k: body[k] for k in VALID} == {k: lime[k] for k in VALID}
    assert body["updatedAt"] > lime["updatedAt"]


def test_get_update_roundtrip(client, clock, create_ingredient):
    lime = create_ingredient()

    response = client.put(f"/ingredients/{lime['id']}", json={"isAlcoholic": True, "image": "https://x/lime.png"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["isAlcoholic"] is True
    assert updated["image"] == "https://x/lime.png"
    assert updated["name"] == lime["name"]
    assert updated["updatedAt"] > lime["updatedAt"]

    assert client.get(f"/ingredients/{lime['id']}").json() == updated


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_malformed_id_is_400(client, method):
    kwargs = {"json": {}} if method == "put" else {}
    response = getattr(client, method)("/ingredients/12345", **kwargs)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid ID format"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_absent_is_404(client, method):
    kwargs = {"json": {}} if method == "put" else {}
    response = getattr(client, method)(f"/ingredients/{MISSING_ID}", **kwargs)

    assert response.status_code == 404
    assert response.json()["detail"] == "Ingredient not found"


def test_delete_cascades_to_cocktail_ingredients(client, db, margarita):
    lime_id = margarita["lime"]["id"]

    response = client.delete(f"/ingredients/{lime_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Ingredient deleted successfully"}
    rows = list(db["cocktail_ingredients"].find())
    assert [str(r["ingredientId"]) for r in rows] == [margarita["tequila"]["id"]]
    assert client.get(f"/cocktail-ingredients?ingredientId={lime_id}").status_code == 404
