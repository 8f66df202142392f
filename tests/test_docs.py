"""
Tests for the API documentation routes (routers.docs).
"""

import json

from core.config import settings


def test_swagger_serves_generated_document(client):
    response = client.get("/swagger")

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "Cocktail API"
    assert {"/cocktails", "/cocktails/{cocktail_id}", "/ingredients", "/cocktail-ingredients"} <= set(document["paths"])
    assert "/swagger" not in document["paths"]
    assert "/docs" not in document["paths"]


def test_swagger_documents_list_filters(client):
    operation = client.get("/swagger").json()["paths"]["/cocktails"]["get"]
    params = {p["name"]: p for p in operation["parameters"]}

    assert set(params) == {"ingredient", "isAlcoholic", "sort"}
    assert {"200", "400", "404"} <= set(operation["responses"])


def test_swagger_serves_configured_file(client, tmp_path, monkeypatch):
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps({"openapi": "3.0.0", "info": {"title": "frozen"}}), encoding="utf-8")
    monkeypatch.setattr(settings, "swagger_file", str(path))

    response = client.get("/swagger")

    assert response.status_code == 200
    assert response.json()["info"]["title"] == "frozen"


def test_unreadable_swagger_file_is_500(client, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "swagger_file", str(tmp_path / "missing.json"))

    response = client.get("/swagger")

    assert response.status_code == 500
    assert response.json()["error"] == "Cannot read file swagger.json"


def test_docs_page_loads_swagger_ui(client):
    response = client.get("/docs")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "swagger-ui-bundle" in response.text
    assert "/swagger" in response.text
