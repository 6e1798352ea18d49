from strawberry import Schema

from .gql import schema as catalog_schema


class SchemaRenderer:
    """Renders the catalog schema as GraphQL SDL text."""

    def __init__(self, schema: Schema = catalog_schema):
        self._text = schema.as_str()

    def render(self) -> str:
        return self._text
