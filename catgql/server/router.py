from typing import Callable, Dict, Optional, Tuple

from catgql.catalog.store import CatalogStore
from catgql.core.errors import RouteNotFound
from catgql.core.logger import setup_logger
from .executor import QueryExecutor
from .renderer import SchemaRenderer
from .schema import Request, Response

logger = setup_logger(__name__, include_location=True)

SCHEMA_PATH = "/schema"
GRAPHQL_PATH = "/graphql"


class RequestRouter:
    """
    Dispatches a `Request` by method and exact path:

    - GET /schema   -> SchemaRenderer.render()
    - POST /graphql -> QueryExecutor.execute(body)
    - anything else -> 404
    """

    def __init__(
        self,
        store: CatalogStore,
        renderer: Optional[SchemaRenderer] = None,
        executor: Optional[QueryExecutor] = None,
    ):
        self.renderer = renderer or SchemaRenderer()
        self.executor = executor or QueryExecutor(store)
        self._routes: Dict[Tuple[str, str], Callable[[Request], Response]] = {
            ("GET", SCHEMA_PATH): self._schema,
            ("POST", GRAPHQL_PATH): self._graphql,
        }

    def route(self, request: Request) -> Response:
        handler = self._routes.get((request.method.upper(), request.path))
        if handler is None:
            err = RouteNotFound(request.method, request.path)
            logger.debug(f"No route for {request.method} {request.path}", extra={"error": err.to_error_info().to_dict()})
            return Response.error(err.message, status_code=err.http_status)
        return handler(request)

    def _schema(self, request: Request) -> Response:
        return Response.plain_text(self.renderer.render())

    def _graphql(self, request: Request) -> Response:
        return self.executor.execute(request.body)
