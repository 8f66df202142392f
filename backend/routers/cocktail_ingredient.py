from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo import ReturnDocument
from pymongo.database import Database
from typing import Any, Dict, List, Optional

from core.converters import new_document, to_object_id, update_operation
from core.errors import bad_request, not_found, server_error
from db import cocktail as cocktail_doc
from db import cocktail_ingredient as cocktail_ingredient_doc
from db import ingredient as ingredient_doc
from db.database import get_database
from db.filters import cocktail_ingredient_query, parse_cocktail_ingredient_filters
from schemas.cocktail_ingredient import (
    CocktailIngredient,
    CocktailIngredientCreate,
    CocktailIngredientExpanded,
    CocktailIngredientUpdate,
)
from schemas.common import Message, is_filled


router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Cocktail ingredient not found"}}
INVALID_ID = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid ID format"}}


def expand_references(db: Database, rows: List[Dict[str, Any]]) -> List[Dict]:
    """Replace cocktailId/ingredientId on each row with the referenced documents"""
    cocktail_ids = list({row.get("cocktailId") for row in rows})
    ingredient_ids = list({row.get("ingredientId") for row in rows})
    cocktails = {
        c["_id"]: c for c in db[cocktail_doc.COLLECTION].find({"_id": {"$in": cocktail_ids}})
    }
    ingredients = {
        i["_id"]: i for i in db[ingredient_doc.COLLECTION].find({"_id": {"$in": ingredient_ids}})
    }
    return [
        cocktail_ingredient_doc.to_schema(
            row,
            cocktail=cocktails.get(row.get("cocktailId")),
            ingredient=ingredients.get(row.get("ingredientId")),
            expand=True,
        )
        for row in rows
    ]


@router.get(
    "",
    response_model=List[CocktailIngredientExpanded],
    summary="Get a list of cocktail ingredients",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid parameters"},
        status.HTTP_404_NOT_FOUND: {"description": "No cocktail ingredients found"},
    },
)
def get_cocktail_ingredients(
    cocktail_id: Optional[str] = Query(None, alias="cocktailId", description="Filter by cocktail ID"),
    ingredient_id: Optional[str] = Query(None, alias="ingredientId", description="Filter by ingredient ID"),
    db: Database = Depends(get_database),
):
    """Get cocktail-ingredient associations, optionally filtered by cocktailId or ingredientId.

    When both filters are given only ingredientId is applied.
    """
    try:
        filters = parse_cocktail_ingredient_filters(cocktail_id, ingredient_id)
        rows = list(db[cocktail_ingredient_doc.COLLECTION].find(cocktail_ingredient_query(filters)))

        if not rows:
            raise not_found("No cocktail ingredients found matching the filters")

        return expand_references(db, rows)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("fetching cocktail ingredients", e)


@router.post(
    "",
    response_model=CocktailIngredient,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new cocktail ingredient",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Missing required fields or invalid ID format"},
        status.HTTP_404_NOT_FOUND: {"description": "Cocktail or ingredient not found"},
    },
)
def create_cocktail_ingredient(association: CocktailIngredientCreate, db: Database = Depends(get_database)):
    """Link an existing cocktail to an existing ingredient with a quantity"""
    try:
        required = (association.cocktail_id, association.ingredient_id, association.quantity)
        if not all(is_filled(v) for v in required):
            raise bad_request("Missing required fields: cocktailId, ingredientId, quantity")

        cocktail_id = to_object_id(association.cocktail_id, "Invalid cocktail ID format")
        ingredient_id = to_object_id(association.ingredient_id, "Invalid ingredient ID format")

        # Verify both sides exist
        if not db[cocktail_doc.COLLECTION].find_one({"_id": cocktail_id}):
            raise not_found("Cocktail not found in database")
        if not db[ingredient_doc.COLLECTION].find_one({"_id": ingredient_id}):
            raise not_found("Ingredient not found in database")

        document = new_document({
            "cocktailId": cocktail_id,
            "ingredientId": ingredient_id,
            "quantity": association.quantity,
        })
        result = db[cocktail_ingredient_doc.COLLECTION].insert_one(document)
        document["_id"] = result.inserted_id
        return cocktail_ingredient_doc.to_schema(document)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("creating cocktail ingredient", e)


@router.get(
    "/{association_id}",
    response_model=CocktailIngredientExpanded,
    summary="Get a cocktail ingredient by ID",
    responses={**INVALID_ID, **NOT_FOUND},
)
def get_cocktail_ingredient(association_id: str, db: Database = Depends(get_database)):
    """Get a single cocktail-ingredient association with its cocktail and ingredient"""
    try:
        oid = to_object_id(association_id)
        row = db[cocktail_ingredient_doc.COLLECTION].find_one({"_id": oid})
        if not row:
            raise not_found("Cocktail ingredient not found")
        return expand_references(db, [row])[0]
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("fetching cocktail ingredient", e)


@router.put(
    "/{association_id}",
    response_model=CocktailIngredient,
    summary="Update a cocktail ingredient by ID",
    responses={**INVALID_ID, **NOT_FOUND},
)
def update_cocktail_ingredient(
    association_id: str,
    association: Optional[CocktailIngredientUpdate] = None,
    db: Database = Depends(get_database),
):
    """Update an existing cocktail-ingredient association"""
    try:
        oid = to_object_id(association_id)
        association = association or CocktailIngredientUpdate()

        fields: Dict[str, Any] = {}
        if association.cocktail_id is not None:
            fields["cocktailId"] = to_object_id(association.cocktail_id, "Invalid cocktail ID format")
        if association.ingredient_id is not None:
            fields["ingredientId"] = to_object_id(association.ingredient_id, "Invalid ingredient ID format")
        if association.quantity is not None:
            fields["quantity"] = association.quantity

        updated = db[cocktail_ingredient_doc.COLLECTION].find_one_and_update(
            {"_id": oid},
            update_operation(fields),
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise not_found("Cocktail ingredient not found")
        return cocktail_ingredient_doc.to_schema(updated)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("updating cocktail ingredient", e)


@router.delete(
    "/{association_id}",
    response_model=Message,
    summary="Delete a cocktail ingredient by ID",
    responses={**INVALID_ID, **NOT_FOUND},
)
def delete_cocktail_ingredient(association_id: str, db: Database = Depends(get_database)):
    """Delete a cocktail-ingredient association"""
    try:
        oid = to_object_id(association_id)
        if not db[cocktail_ingredient_doc.COLLECTION].find_one_and_delete({"_id": oid}):
            raise not_found("Cocktail ingredient not found")
        return {"message": "Cocktail ingredient deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("deleting cocktail ingredient", e)
