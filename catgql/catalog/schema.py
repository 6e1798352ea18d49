"""
Catalog data model.

A `CatalogEntry` is one cat. Entries are immutable values: two entries with
the same fields are equal, and the catalog may hold duplicates.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple
from pydantic import ConfigDict, Field, field_validator

from catgql.core.common import AppBaseModel


class Colour(str, Enum):
    # member names double as the GraphQL enum values, so they match the wire form
    Black = "Black"
    White = "White"
    Ginger = "Ginger"
    Grey = "Grey"
    Tabby = "Tabby"
    Calico = "Calico"


class CatalogEntry(AppBaseModel):
    """A single cat in the catalog."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., description="Cat name", examples=["Tom"])
    nicknames: Tuple[str, ...] = Field(..., description="Ordered nicknames, may be empty")
    pic_url: Optional[str] = Field(default=None, alias="picUrl", description="Picture URL")
    colour: Colour = Field(..., description="Coat colour")


class OperationRequest(AppBaseModel):
    """
    A decoded POST /graphql body.

    `arguments` holds the operation's raw argument values; handlers decode
    the parts they need.
    """
    operation_name: str = Field(..., alias="operationName")
    arguments: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('arguments', mode='before')
    @classmethod
    def null_arguments(cls, v):
        return {} if v is None else v


SAMPLE_ENTRIES = (
    CatalogEntry(
        name="Crookshanks",
        nicknames=["Crooks", "Lion"],
        pic_url="https://example.com/cats/crookshanks.jpg",
        colour=Colour.Ginger,
    ),
    CatalogEntry(
        name="Salem",
        nicknames=["Sal"],
        pic_url=None,
        colour=Colour.Black,
    ),
    CatalogEntry(
        name="Snowball",
        nicknames=[],
        pic_url="https://example.com/cats/snowball.jpg",
        colour=Colour.White,
    ),
)
