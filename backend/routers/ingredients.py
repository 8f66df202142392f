import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo import ReturnDocument
from pymongo.database import Database
from typing import List, Optional

from core.converters import new_document, to_object_id, update_operation
from core.errors import bad_request, not_found, server_error
from db import cocktail_ingredient as cocktail_ingredient_doc
from db import ingredient as ingredient_doc
from db.database import get_database
from schemas.common import Message, is_filled
from schemas.ingredient import Ingredient, IngredientCreate, IngredientUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Ingredient not found"}}
INVALID_ID = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid ID format"}}


@router.get("", response_model=List[Ingredient], summary="Get a list of ingredients")
def get_ingredients(db: Database = Depends(get_database)):
    """Get all ingredients"""
    try:
        ingredients = db[ingredient_doc.COLLECTION].find()
        return [ingredient_doc.to_schema(i) for i in ingredients]
    except Exception as e:
        raise server_error("fetching ingredients", e)


@router.post(
    "",
    response_model=Ingredient,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new ingredient",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Missing required fields"}},
)
def create_ingredient(ingredient: IngredientCreate, db: Database = Depends(get_database)):
    """Create a new ingredient.

    All four fields are required here even though a stored ingredient may lack
    a description or image.
    """
    try:
        if (
            not is_filled(ingredient.name)
            or not is_filled(ingredient.description)
            or not isinstance(ingredient.is_alcoholic, bool)
            or not is_filled(ingredient.image)
        ):
            raise bad_request("Missing required fields: name, description, isAlcoholic, image")

        document = new_document(ingredient.model_dump(by_alias=True))
        result = db[ingredient_doc.COLLECTION].insert_one(document)
        document["_id"] = result.inserted_id
        return ingredient_doc.to_schema(document)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("creating ingredient", e)


@router.get(
    "/{ingredient_id}",
    response_model=Ingredient,
    summary="Get an ingredient by ID",
    responses={**INVALID_ID, **NOT_FOUND},
)
def get_ingredient(ingredient_id: str, db: Database = Depends(get_database)):
    """Get an ingredient by ID"""
    try:
        oid = to_object_id(ingredient_id)
        ingredient = db[ingredient_doc.COLLECTION].find_one({"_id": oid})
        if not ingredient:
            raise not_found("Ingredient not found")
        return ingredient_doc.to_schema(ingredient)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("fetching ingredient", e)


@router.put(
    "/{ingredient_id}",
    response_model=Ingredient,
    summary="Update an ingredient by ID",
    responses={**INVALID_ID, **NOT_FOUND},
)
def update_ingredient(
    ingredient_id: str,
    ingredient: Optional[IngredientUpdate] = None,
    db: Database = Depends(get_database),
):
    """Update an existing ingredient"""
    try:
        oid = to_object_id(ingredient_id)
        fields = (ingredient or IngredientUpdate()).model_dump(by_alias=True, exclude_none=True)
        updated = db[ingredient_doc.COLLECTION].find_one_and_update(
            {"_id": oid},
            update_operation(fields),
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise not_found("Ingredient not found")
        return ingredient_doc.to_schema(updated)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("updating ingredient", e)


@router.delete(
    "/{ingredient_id}",
    response_model=Message,
    summary="Delete an ingredient by ID",
    responses={**INVALID_ID, **NOT_FOUND},
)
def delete_ingredient(ingredient_id: str, db: Database = Depends(get_database)):
    """Delete an ingredient, then the cocktail-ingredient rows that use it (not atomic)"""
    try:
        oid = to_object_id(ingredient_id)
        ingredient = db[ingredient_doc.COLLECTION].find_one_and_delete({"_id": oid})
        if not ingredient:
            raise not_found("Ingredient not found")

        removed = db[cocktail_ingredient_doc.COLLECTION].delete_many({"ingredientId": ingredient["_id"]})
        logger.info("Deleted ingredient %s and %d cocktail ingredients", oid, removed.deleted_count)

        return {"message": "Ingredient deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("deleting ingredient", e)
