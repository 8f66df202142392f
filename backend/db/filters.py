"""
Typed list filters for the cocktail and cocktail-ingredient listings.

Each listing enumerates the query-string filters it supports as small frozen
dataclasses. `parse_*` validates raw query values into filters (400 on bad
input) and `*_query` turns a list of filters into a Mongo query.

Filters that constrain the same field do not intersect: the filter applied
last replaces the ones before it.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pymongo.database import Database

from core.converters import to_object_id
from core.errors import bad_request
from . import cocktail, cocktail_ingredient, ingredient


@dataclass(frozen=True)
class ByCocktail:
    cocktail_id: ObjectId


@dataclass(frozen=True)
class ByIngredient:
    ingredient_id: ObjectId


@dataclass(frozen=True)
class ByAlcoholic:
    is_alcoholic: bool


CocktailFilter = Union[ByIngredient, ByAlcoholic]
CocktailIngredientFilter = Union[ByCocktail, ByIngredient]


def parse_cocktail_filters(
    ingredient_id: Optional[str],
    is_alcoholic: Optional[str],
) -> List[CocktailFilter]:
    filters: List[CocktailFilter] = []
    if ingredient_id:
        filters.append(ByIngredient(to_object_id(ingredient_id, "Invalid ingredient ID format")))
    if is_alcoholic:
        # Anything other than the literal "true" selects non-alcoholic cocktails
        filters.append(ByAlcoholic(is_alcoholic == "true"))
    return filters


def parse_cocktail_sort(sort: Optional[str]) -> Optional[str]:
    """Map a public sort key to the document field to sort on"""
    if not sort:
        return None
    if sort not in cocktail.SORT_FIELDS:
        raise bad_request(
            "Invalid sort parameter. Valid options are: " + ", ".join(cocktail.SORT_FIELDS)
        )
    return cocktail.SORT_FIELDS[sort]


def alcoholic_cocktail_ids(db: Database) -> List[ObjectId]:
    """Ids of cocktails linked to at least one alcoholic ingredient"""
    alcoholic = db[ingredient.COLLECTION].distinct("_id", {"isAlcoholic": True})
    return db[cocktail_ingredient.COLLECTION].distinct(
        "cocktailId", {"ingredientId": {"$in": alcoholic}}
    )


def cocktail_query(db: Database, filters: List[CocktailFilter]) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    for f in filters:
        if isinstance(f, ByIngredient):
            cocktail_ids = db[cocktail_ingredient.COLLECTION].distinct(
                "cocktailId", {"ingredientId": f.ingredient_id}
            )
            query["_id"] = {"$in": cocktail_ids}
        elif isinstance(f, ByAlcoholic):
            cocktail_ids = alcoholic_cocktail_ids(db)
            query["_id"] = {"$in": cocktail_ids} if f.is_alcoholic else {"$nin": cocktail_ids}
    return query


def parse_cocktail_ingredient_filters(
    cocktail_id: Optional[str],
    ingredient_id: Optional[str],
) -> List[CocktailIngredientFilter]:
    filters: List[CocktailIngredientFilter] = []
    if cocktail_id:
        filters.append(ByCocktail(to_object_id(cocktail_id, "Invalid cocktail ID format")))
    if ingredient_id:
        filters.append(ByIngredient(to_object_id(ingredient_id, "Invalid ingredient ID format")))
    return filters


def cocktail_ingredient_query(filters: List[CocktailIngredientFilter]) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    for f in filters:
        if isinstance(f, ByCocktail):
            query = {"cocktailId": f.cocktail_id}
        elif isinstance(f, ByIngredient):
            query = {"ingredientId": f.ingredient_id}
    return query
