from typing import Any, Dict, Optional

from core.converters import document_to_dict

COLLECTION = "cocktail_ingredients"



def to_schema(
    document: Dict[str, Any],
    cocktail: Optional[Dict[str, Any]] = None,
    ingredient: Optional[Dict[str, Any]] = None,
    expand: bool = False,
) -> Dict[str, Any]:
    """Convert a join document to schema dictionary format.

    With ``expand`` the ``cocktailId``/``ingredientId`` references are replaced
    by the referenced documents, or ``None`` when they no longer exist.
    """
    data = document_to_dict(document)
    if expand:
        data["cocktailId"] = document_to_dict(cocktail) if cocktail else None
        data["ingredientId"] = document_to_dict(ingredient) if ingredient else None
    return data
