from typing import Any, Dict

from core.converters import document_to_dict

COLLECTION = "ingredients"


def to_schema(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert an ingredient document to schema dictionary format"""
    return document_to_dict(document)
