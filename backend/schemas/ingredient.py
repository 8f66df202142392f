from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field, StrictBool

from .common import CamelModel, LooseText, Text


class Ingredient(CamelModel):
    id: str = Field(examples=["60b7c7e3f4e8fa1b3c7a5392"])
    name: str = Field(description="The name of the ingredient", examples=["Lime"])
    description: Optional[str] = Field(
        default=None,
        description="A brief description of the ingredient",
        examples=["A sour fruit used in cocktails"],
    )
    is_alcoholic: bool = Field(description="Whether the ingredient contains alcohol", examples=[False])
    image: Optional[str] = Field(
        default=None,
        description="URL to an image of the ingredient",
        examples=["https://example.com/images/lime.jpg"],
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class IngredientCreate(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={"required": ["name", "description", "isAlcoholic", "image"]}
    )

    name: LooseText = None
    description: LooseText = None
    is_alcoholic: Optional[Any] = None
    image: LooseText = None


class IngredientUpdate(CamelModel):
    name: Text = None
    description: Text = None
    is_alcoholic: Optional[StrictBool] = None
    image: Text = None
