from typing import Optional

from fastapi import FastAPI, Request as HTTPRequest
from fastapi import Response as HTTPResponse
from strawberry.fastapi import GraphQLRouter

from catgql import __version__
from catgql.catalog.store import CatalogStore
from catgql.core.config import Settings, get_settings
from catgql.core.logger import configure_logging, setup_logger
from .gql import schema as graphql_schema
from .middleware import catch_exceptions_middleware
from .renderer import SchemaRenderer
from .router import RequestRouter
from .schema import Request

logger = setup_logger(__name__, include_location=True)

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def get_context(request: HTTPRequest) -> dict:
    return {"store": request.app.state.store}


def create_app(store: Optional[CatalogStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(debug=settings.debug, use_json=settings.log_json)

    if store is None:
        store = CatalogStore.with_samples() if settings.seed_samples else CatalogStore()

    return _create_app(store, settings)


def _create_app(store: CatalogStore, settings: Settings) -> FastAPI:
    app = FastAPI(title=settings.app_name, version=__version__)
    renderer = SchemaRenderer()
    app.state.settings = settings
    app.state.store = store
    app.state.router = RequestRouter(store, renderer=renderer)

    app.middleware("http")(catch_exceptions_middleware)

    @app.get("/health", include_in_schema=False)
    async def health_check():
        return {"status": "healthy"}

    if settings.enable_graphql:
        graphql_router = GraphQLRouter(schema=graphql_schema, context_getter=get_context)
        app.include_router(graphql_router, prefix=settings.graphql_prefix)

    @app.api_route("/{path:path}", methods=ROUTED_METHODS, include_in_schema=False)
    async def dispatch(path: str, request: HTTPRequest):
        body = await request.body()
        response = app.state.router.route(
            Request(method=request.method, path=request.url.path, body=body or None)
        )
        return HTTPResponse(
            content=response.body,
            status_code=response.status_code,
            media_type=response.content_type,
        )

    logger.info(
        f"catgql app created: {len(store)} cats, graphql endpoint "
        f"{settings.graphql_prefix if settings.enable_graphql else 'disabled'}"
    )
    return app
