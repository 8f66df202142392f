import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database
from typing import List, Optional

from core.converters import new_document, to_object_id, update_operation
from core.errors import bad_request, not_found, server_error
from db import cocktail as cocktail_doc
from db import cocktail_ingredient as cocktail_ingredient_doc
from db.database import get_database
from db.filters import cocktail_query, parse_cocktail_filters, parse_cocktail_sort
from schemas.cocktails import Cocktail, CocktailCreate, CocktailUpdate
from schemas.common import Message, is_filled

logger = logging.getLogger(__name__)

router = APIRouter()

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid parameters"}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Cocktail not found"}}


@router.get(
    "",
    response_model=List[Cocktail],
    summary="Get a list of cocktails",
    responses={**BAD_REQUEST, status.HTTP_404_NOT_FOUND: {"description": "No cocktails found"}},
)
def get_cocktails(
    ingredient: Optional[str] = Query(None, description="Filter by ingredient ID"),
    is_alcoholic: Optional[str] = Query(
        None,
        alias="isAlcoholic",
        description="Filter by alcoholic content",
        json_schema_extra={"enum": ["true", "false"]},
    ),
    sort: Optional[str] = Query(
        None,
        description="Sort results by specified field",
        json_schema_extra={"enum": list(cocktail_doc.SORT_FIELDS)},
    ),
    db: Database = Depends(get_database),
):
    """Get cocktails, optionally filtered by ingredient or alcoholic content and sorted"""
    try:
        filters = parse_cocktail_filters(ingredient, is_alcoholic)
        sort_field = parse_cocktail_sort(sort)

        cursor = db[cocktail_doc.COLLECTION].find(cocktail_query(db, filters))
        if sort_field:
            cursor = cursor.sort(sort_field, ASCENDING)
        cocktails = list(cursor)

        if not cocktails:
            raise not_found("No cocktails found matching the filters")

        return [cocktail_doc.to_schema(c) for c in cocktails]
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("fetching cocktails", e)


@router.post(
    "",
    response_model=Cocktail,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new cocktail",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Missing required fields"}},
)
def create_cocktail(cocktail: CocktailCreate, db: Database = Depends(get_database)):
    """Create a new cocktail"""
    try:
        if not all(is_filled(v) for v in (cocktail.name, cocktail.category, cocktail.instructions)):
            raise bad_request("Missing required fields: name, category, instructions")

        document = new_document(cocktail.model_dump(by_alias=True))
        result = db[cocktail_doc.COLLECTION].insert_one(document)
        document["_id"] = result.inserted_id
        return cocktail_doc.to_schema(document)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("creating cocktail", e)


@router.get(
    "/{cocktail_id}",
    response_model=Cocktail,
    summary="Get a cocktail by ID",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid ID format"}, **NOT_FOUND},
)
def get_cocktail(cocktail_id: str, db: Database = Depends(get_database)):
    """Get a single cocktail by ID"""
    try:
        oid = to_object_id(cocktail_id)
        cocktail = db[cocktail_doc.COLLECTION].find_one({"_id": oid})
        if not cocktail:
            raise not_found("Cocktail not found")
        return cocktail_doc.to_schema(cocktail)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("fetching cocktail", e)


@router.put(
    "/{cocktail_id}",
    response_model=Cocktail,
    summary="Update a cocktail by ID",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid ID format"}, **NOT_FOUND},
)
def update_cocktail(
    cocktail_id: str,
    cocktail: Optional[CocktailUpdate] = None,
    db: Database = Depends(get_database),
):
    """Update an existing cocktail; fields left out of the body keep their value"""
    try:
        oid = to_object_id(cocktail_id)
        fields = (cocktail or CocktailUpdate()).model_dump(by_alias=True, exclude_none=True)
        updated = db[cocktail_doc.COLLECTION].find_one_and_update(
            {"_id": oid},
            update_operation(fields),
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise not_found("Cocktail not found")
        return cocktail_doc.to_schema(updated)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("updating cocktail", e)


@router.delete(
    "/{cocktail_id}",
    response_model=Message,
    summary="Delete a cocktail by ID",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid ID format"}, **NOT_FOUND},
)
def delete_cocktail(cocktail_id: str, db: Database = Depends(get_database)):
    """Delete a cocktail and every cocktail-ingredient row that references it.

    The two deletes are not atomic: if the second one fails the cocktail stays
    deleted and its join rows are left dangling.
    """
    try:
        oid = to_object_id(cocktail_id)
        cocktail = db[cocktail_doc.COLLECTION].find_one_and_delete({"_id": oid})
        if not cocktail:
            raise not_found("Cocktail not found")

        removed = db[cocktail_ingredient_doc.COLLECTION].delete_many({"cocktailId": cocktail["_id"]})
        logger.info("Deleted cocktail %s and %d cocktail ingredients", oid, removed.deleted_count)

        return {"message": "Cocktail and its ingredients were deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("deleting cocktail", e)
