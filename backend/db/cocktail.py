from typing import Any, Dict

from core.converters import document_to_dict

COLLECTION = "cocktails"

# Public sort keys -> document fields
SORT_FIELDS = {
    "name": "name",
    "category": "category",
    "date": "createdAt",
}


def to_schema(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a cocktail document to schema dictionary format"""
    return document_to_dict(document)
