"""CLI entry point for swagger-hateoas."""

import click
from pydantic import TypeAdapter

from swagger_hateoas.document import SwaggerDocument
from swagger_hateoas.errors import HateoasError
from swagger_hateoas.links.paths import echo_to_swagger
from swagger_hateoas.parser.base import Link
from swagger_hateoas.parser.swagger import DEFAULT_TIMEOUT

LOCATION_ENVVAR = "SWAGGER_HATEOAS_DOC"

LINK_LIST = TypeAdapter(list[Link])


def _load(location: str, timeout: float) -> SwaggerDocument:
    """Load the Swagger document, turning load failures into CLI errors."""
    document = SwaggerDocument(location=location, timeout=timeout)
    try:
        document.load()
    except HateoasError as e:
        raise click.ClickException(str(e)) from e
    return document


location_option = click.option("-d", "--doc", "location", required=True, envvar=LOCATION_ENVVAR, help="Swagger document URL or file path.")
timeout_option = click.option("--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float, help="Timeout in seconds for URL loads.")
param_option = click.option("-p", "--param", "params", multiple=True, help="Path parameter value, in placeholder order. Repeatable.")


@click.group()
def main():
    """Swagger HATEOAS: navigation links from a Swagger path catalog."""
    pass


@main.command()
@location_option
@click.argument("request_path")
@param_option
@click.option("--strict", is_flag=True, help="Fail when parameter values do not match placeholders.")
@timeout_option
def links(location: str, request_path: str, params: tuple[str, ...], strict: bool, timeout: float):
    """Print links to the endpoints one segment below REQUEST_PATH."""
    document = _load(location, timeout)
    try:
        result = document.links(request_path, params, strict=strict)
    except HateoasError as e:
        raise click.ClickException(str(e)) from e

    click.echo(LINK_LIST.dump_json(result, indent=2).decode())


@main.command()
@location_option
@click.argument("request_path", default="/")
@param_option
@timeout_option
def root(location: str, request_path: str, params: tuple[str, ...], timeout: float):
    """Print the API info plus links for REQUEST_PATH (default: /)."""
    document = _load(location, timeout)
    click.echo(document.root(request_path, params).model_dump_json(indent=2))


@main.command()
@click.argument("path")
def translate(path: str):
    """Print PATH converted from router syntax (/users/:id) to Swagger syntax."""
    click.echo(echo_to_swagger(path))
