"""
Strawberry GraphQL schema for the cat catalog.

The same schema backs the standard GraphQL endpoint and is what
`SchemaRenderer` prints for GET /schema. Resolvers read the store from
`info.context["store"]`.

Example:
```
query {
  listCats { name nicknames picUrl colour }
}

mutation {
  addCat(cat: { name: "Tom", nicknames: [], colour: Black })
}
```
"""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from catgql.catalog.schema import CatalogEntry, Colour
from catgql.catalog.store import CatalogStore
from catgql.core.logger import setup_logger

logger = setup_logger(__name__, include_location=True)

ColourEnum = strawberry.enum(Colour, name="Colour", description="Coat colour")


@strawberry.type(name="Cat", description="A cat in the catalog")
class CatType:
    name: str
    nicknames: List[str]
    pic_url: Optional[str]
    colour: ColourEnum

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "CatType":
        return cls(
            name=entry.name,
            nicknames=list(entry.nicknames),
            pic_url=entry.pic_url,
            colour=entry.colour,
        )


@strawberry.input(name="CatInput", description="A cat to add to the catalog")
class CatInput:
    name: str
    nicknames: List[str]
    colour: ColourEnum
    pic_url: Optional[str] = None

    def to_entry(self) -> CatalogEntry:
        return CatalogEntry(
            name=self.name,
            nicknames=list(self.nicknames),
            pic_url=self.pic_url,
            colour=self.colour,
        )


def _store(info: Info) -> CatalogStore:
    return info.context["store"]


@strawberry.type
class Query:
    @strawberry.field(description="List every cat in insertion order")
    def list_cats(self, info: Info) -> List[CatType]:
        return [CatType.from_entry(entry) for entry in _store(info).list()]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Append a cat to the catalog")
    def add_cat(self, cat: CatInput, info: Info) -> bool:
        entry = cat.to_entry()
        _store(info).add(entry)
        logger.info(f"addCat: {entry.name}")
        return True


schema = strawberry.Schema(query=Query, mutation=Mutation)
