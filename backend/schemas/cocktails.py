from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, LooseText, Text


class Cocktail(CamelModel):
    id: str = Field(examples=["60b7c7e3f4e8fa1b3c7a5391"])
    name: str = Field(description="The name of the cocktail", examples=["Margarita"])
    category: str = Field(
        description="The category of the cocktail (e.g., Cocktail, Mocktail, etc.)",
        examples=["Cocktail"],
    )
    instructions: str = Field(
        description="Instructions on how to prepare the cocktail",
        examples=["Mix ingredients and serve with a salted rim."],
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Create/update fields are optional at the schema level; the routers decide
# which ones are required so missing fields are reported as a 400.
class CocktailCreate(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={"required": ["name", "category", "instructions"]}
    )

    name: LooseText = None
    category: LooseText = None
    instructions: LooseText = None


class CocktailUpdate(CamelModel):
    name: Text = None
    category: Text = None
    instructions: Text = None
