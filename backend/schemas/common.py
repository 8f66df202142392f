from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def cast_number_to_str(value: Any) -> Any:
    """Store numbers sent for text fields as their string form"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# Create payloads accept any JSON value and leave the required/type check to
# the routers, so every bad field is reported with the same message.
LooseText = Annotated[Optional[Any], BeforeValidator(cast_number_to_str)]
Text = Annotated[Optional[str], BeforeValidator(cast_number_to_str)]


def is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Message(BaseModel):
    message: str
