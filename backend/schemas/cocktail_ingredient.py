from datetime import datetime
from typing import Optional, Union

from pydantic import ConfigDict, Field

from .cocktails import Cocktail
from .common import CamelModel, LooseText, Text
from .ingredient import Ingredient


class CocktailIngredient(CamelModel):
    id: str
    cocktail_id: str = Field(description="The unique ID of the cocktail", examples=["60b7c7e3f4e8fa1b3c7a5391"])
    ingredient_id: str = Field(description="The unique ID of the ingredient", examples=["60b7c7e3f4e8fa1b3c7a5392"])
    quantity: str = Field(
        description='The quantity of the ingredient in the cocktail (e.g., "2 oz")',
        examples=["2 oz"],
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CocktailIngredientExpanded(CocktailIngredient):
    """Join row with both references replaced by the referenced documents"""
    cocktail_id: Optional[Union[Cocktail, str]] = None
    ingredient_id: Optional[Union[Ingredient, str]] = None


class CocktailIngredientCreate(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={"required": ["cocktailId", "ingredientId", "quantity"]}
    )

    cocktail_id: LooseText = None
    ingredient_id: LooseText = None
    quantity: LooseText = None


class CocktailIngredientUpdate(CamelModel):
    cocktail_id: Text = None
    ingredient_id: Text = None
    quantity: Text = None
