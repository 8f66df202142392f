"""
Seed demo data (ingredients, cocktails and their links) into MongoDB.

This script can be run from either:
- backend/: `python scripts/seed_demo_data.py`
- repo root: `python backend/scripts/seed_demo_data.py`

Running it twice does not duplicate anything: documents are matched by name
(and join rows by cocktail + ingredient) before being inserted.
"""

import sys
from pathlib import Path

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from pymongo.database import Database

from core.converters import new_document
from db import cocktail, cocktail_ingredient, ingredient
from db.database import close_client, ensure_indexes, get_db


INGREDIENTS = [
    {
        "name": "Lime",
        "description": "A sour fruit used in cocktails",
        "isAlcoholic": False,
        "image": "https://example.com/images/lime.jpg",
    },
    {
        "name": "Tequila",
        "description": "Agave spirit from Jalisco",
        "isAlcoholic": True,
        "image": "https://example.com/images/tequila.jpg",
    },
    {
        "name": "Triple sec",
        "description": "Orange-flavoured liqueur",
        "isAlcoholic": True,
        "image": "https://example.com/images/triple-sec.jpg",
    },
    {
        "name": "Mint",
        "description": "Fresh mint leaves",
        "isAlcoholic": False,
        "image": "https://example.com/images/mint.jpg",
    },
    {
        "name": "Soda water",
        "description": "Carbonated water",
        "isAlcoholic": False,
        "image": "https://example.com/images/soda.jpg",
    },
    {
        "name": "White rum",
        "description": "Light-bodied cane spirit",
        "isAlcoholic": True,
        "image": "https://example.com/images/rum.jpg",
    },
]

COCKTAILS = [
    {
        "name": "Margarita",
        "category": "Cocktail",
        "instructions": "Shake with ice and serve with a salted rim.",
        "ingredients": [("Tequila", "2 oz"), ("Triple sec", "1 oz"), ("Lime", "1 oz")],
    },
    {
        "name": "Mojito",
        "category": "Cocktail",
        "instructions": "Muddle mint with lime, add rum and ice, top with soda.",
        "ingredients": [("White rum", "2 oz"), ("Lime", "1 oz"), ("Mint", "6 leaves"), ("Soda water", "top")],
    },
    {
        "name": "Virgin Mojito",
        "category": "Mocktail",
        "instructions": "Muddle mint with lime, add ice, top with soda.",
        "ingredients": [("Lime", "1 oz"), ("Mint", "6 leaves"), ("Soda water", "top")],
    },
]


def get_or_create(db: Database, collection: str, match: dict, fields: dict):
    existing = db[collection].find_one(match)
    if existing:
        return existing["_id"]
    return db[collection].insert_one(new_document(fields)).inserted_id


def seed(db: Database) -> None:
    ensure_indexes(db)

    ingredient_ids = {
        data["name"]: get_or_create(db, ingredient.COLLECTION, {"name": data["name"]}, data)
        for data in INGREDIENTS
    }

    for data in COCKTAILS:
        fields = {k: v for k, v in data.items() if k != "ingredients"}
        cocktail_id = get_or_create(db, cocktail.COLLECTION, {"name": data["name"]}, fields)

        for ingredient_name, quantity in data["ingredients"]:
            ingredient_id = ingredient_ids[ingredient_name]
            get_or_create(
                db,
                cocktail_ingredient.COLLECTION,
                {"cocktailId": cocktail_id, "ingredientId": ingredient_id},
                {"cocktailId": cocktail_id, "ingredientId": ingredient_id, "quantity": quantity},
            )


if __name__ == "__main__":
    try:
        seed(get_db())
    finally:
        close_client()
    print("[seed_demo_data] done.")
