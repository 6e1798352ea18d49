"""
JSON codec for catalog entries.

Wire form of an entry:

    {"name": "Tom", "nicknames": ["T"], "picUrl": null, "colour": "Black"}
"""
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from catgql.core.common import describe_validation_error, transform
from catgql.core.errors import MalformedRequest
from .schema import CatalogEntry


def encode_entry(entry: CatalogEntry) -> Dict[str, Any]:
    return entry.model_dump(mode="json", by_alias=True)


def encode_entries(entries: Iterable[CatalogEntry]) -> List[Dict[str, Any]]:
    return [encode_entry(entry) for entry in entries]


def decode_entry(data: Any) -> CatalogEntry:
    """
    Decode the wire form of an entry.

    Raises:
        MalformedRequest: data is not an object or does not match the entry shape.
    """
    if not isinstance(data, dict):
        raise MalformedRequest(f"Expected a cat object, got {type(data).__name__}")
    try:
        return transform(CatalogEntry, data)
    except ValidationError as e:
        raise MalformedRequest(f"Invalid cat: {describe_validation_error(e)}") from e
