import json

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from catgql import cli as catgql_cli
from catgql.catalog import CatalogStore, Colour
from catgql.core.config import Settings
from catgql.server.app import create_app
from catgql.server.renderer import SchemaRenderer

runner = CliRunner()


@pytest.fixture
def store(monkeypatch):
    store = CatalogStore()
    app = create_app(store=store, settings=Settings(seed_samples=False))
    monkeypatch.setattr(catgql_cli, "_client", lambda host, port: TestClient(app))
    return store


def test_schema_command():
    result = runner.invoke(catgql_cli.cli, ["schema"])
    assert result.exit_code == 0
    assert result.stdout.strip() == SchemaRenderer().render().strip()


def test_catalog_add_and_list(store):
    result = runner.invoke(
        catgql_cli.cli,
        ["catalog", "add", "Tom", "--colour", "black", "--nickname", "Tommy", "--nickname", "T"],
    )
    assert result.exit_code == 0, result.output
    assert "Added Tom" in result.stdout
    assert store.list()[0].colour == Colour.Black
    assert store.list()[0].nicknames == ("Tommy", "T")

    result = runner.invoke(catgql_cli.cli, ["catalog", "list"])
    assert result.exit_code == 0, result.output
    cats = json.loads(result.stdout)
    assert cats == [{"name": "Tom", "nicknames": ["Tommy", "T"], "picUrl": None, "colour": "Black"}]


def test_catalog_add_rejects_unknown_colour(store):
    result = runner.invoke(catgql_cli.cli, ["catalog", "add", "Tom", "--colour", "purple"])
    assert result.exit_code != 0
    assert store.list() == []


def test_server_errors_exit_non_zero(monkeypatch, store):
    def post_unknown(host, port, body):
        return original(host, port, {"operationName": "deleteCat"})

    original = catgql_cli._call_operation
    monkeypatch.setattr(catgql_cli, "_call_operation", post_unknown)
    result = runner.invoke(catgql_cli.cli, ["catalog", "list"])
    assert result.exit_code == 1
