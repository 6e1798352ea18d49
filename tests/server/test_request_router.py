import pytest
from catgql.catalog import CatalogEntry, CatalogStore, Colour
from catgql.server.renderer import SchemaRenderer
from catgql.server.router import RequestRouter
from catgql.server.schema import JSON_CONTENT_TYPE, Request


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def router(store):
    return RequestRouter(store)


def test_get_schema_returns_renderer_text(router):
    response = router.route(Request(method="GET", path="/schema"))
    assert response.status_code == 200
    assert response.content_type.startswith("text/plain")
    assert response.body == SchemaRenderer().render()


def test_schema_does_not_depend_on_store(store, router):
    before = router.route(Request(method="GET", path="/schema")).body
    store.add(CatalogEntry(name="Tom", nicknames=[], colour=Colour.Black))
    after = router.route(Request(method="GET", path="/schema")).body
    assert before == after


def test_post_graphql_goes_to_executor(router):
    response = router.route(Request(method="POST", path="/graphql", body=b'{"operationName": "listCats"}'))
    assert response.status_code == 200
    assert response.payload() == {"data": {"listCats": []}}


def test_method_is_case_insensitive(router):
    assert router.route(Request(method="get", path="/schema")).status_code == 200


@pytest.mark.parametrize("method,path", [
    ("GET", "/unknown-path"),
    ("POST", "/schema"),
    ("GET", "/graphql"),
    ("PUT", "/graphql"),
    ("DELETE", "/schema"),
    ("GET", "/schema/"),
    ("POST", "/graphql/"),
    ("GET", "/"),
])
def test_everything_else_is_not_found(router, method, path):
    response = router.route(Request(method=method, path=path))
    assert response.status_code == 404
    assert response.content_type == JSON_CONTENT_TYPE
    assert response.payload() == {"error": "Not Found"}


def test_malformed_body_does_not_raise(store, router):
    response = router.route(Request(method="POST", path="/graphql", body=None))
    assert response.status_code == 400
    assert store.list() == []


@pytest.mark.parametrize("body", [
    '{"operationName": "listCats", "arguments": {"n": ' + "1" * 5000 + "}}",
    "[" * 200000,
])
def test_unparseable_bodies_stay_client_errors(store, router, body):
    response = router.route(Request(method="POST", path="/graphql", body=body))
    assert response.status_code == 400
    assert response.payload()["error"]
    assert store.list() == []
