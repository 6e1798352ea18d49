import json
from typing import List, Optional

import httpx
import typer
import uvicorn

from catgql.catalog.schema import Colour
from catgql.core.config import get_settings
from catgql.core.logger import setup_logger

logger = setup_logger(__name__, include_location=True)

cli = typer.Typer(no_args_is_help=True, help="catgql: GraphQL-over-HTTP cat catalog")

catalog_cli = typer.Typer(no_args_is_help=True, help="Call catalog operations on a running server")
cli.add_typer(catalog_cli, name="catalog")


def _client(host: str, port: int) -> httpx.Client:
    return httpx.Client(base_url=f"http://{host}:{port}", timeout=10.0)


def _call_operation(host: str, port: int, body: dict) -> dict:
    try:
        with _client(host, port) as client:
            resp = client.post("/graphql", json=body)
    except httpx.HTTPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if resp.status_code < 200 or resp.status_code >= 300:
        try:
            detail = resp.json().get("error", resp.text)
        except ValueError:
            detail = resp.text
        typer.echo(f"Server returned {resp.status_code}: {detail}", err=True)
        raise typer.Exit(code=1)
    return resp.json()


@cli.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default: CATGQL_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default: CATGQL_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """
    Start the catgql HTTP server.
    """
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    logger.info(f"Starting catgql server on {host}:{port}")
    uvicorn.run(
        "catgql.server:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if settings.debug else "info",
    )


@cli.command("schema")
def print_schema():
    """
    Print the catalog schema (GraphQL SDL).
    """
    from catgql.server.renderer import SchemaRenderer
    typer.echo(SchemaRenderer().render())


@catalog_cli.command("list")
def list_cats(
    host: str = typer.Option("localhost", "--host", help="catgql server host"),
    port: int = typer.Option(8088, "--port", "-p", help="catgql server port"),
):
    """
    List every cat in the catalog.

    Equivalent REST call:
      curl -X POST http://{host}:{port}/graphql -d '{"operationName": "listCats"}'
    """
    data = _call_operation(host, port, {"operationName": "listCats"})
    typer.echo(json.dumps(data["data"]["listCats"], indent=2, ensure_ascii=False))


@catalog_cli.command("add")
def add_cat(
    name: str = typer.Argument(..., help="Cat name"),
    colour: Colour = typer.Option(..., "--colour", "-c", case_sensitive=False, help="Coat colour"),
    nickname: List[str] = typer.Option([], "--nickname", "-n", help="Nickname, repeat for several"),
    pic_url: Optional[str] = typer.Option(None, "--pic-url", help="Picture URL"),
    host: str = typer.Option("localhost", "--host", help="catgql server host"),
    port: int = typer.Option(8088, "--port", "-p", help="catgql server port"),
):
    """
    Add a cat to the catalog.

    Example:
      catgql catalog add Tom --colour Black --nickname Tommy
    """
    cat = {"name": name, "nicknames": list(nickname), "picUrl": pic_url, "colour": colour.value}
    _call_operation(host, port, {"operationName": "addCat", "arguments": {"cat": cat}})
    typer.echo(f"Added {name}")


def main():
    cli()


if __name__ == "__main__":
    main()
