"""CLI entry point for json-server-swagger."""

import logging
from pathlib import Path

import click

from json_server_swagger.errors import SwaggerGenError
from json_server_swagger.generator.builder import build_document
from json_server_swagger.loader import load_dataset
from json_server_swagger.models import DEFAULT_HOST, GeneratorConfig
from json_server_swagger.validator import find_dangling_refs
from json_server_swagger.writer import write_document


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
def main():
    """json-server-swagger: describe a json-server dataset as a Swagger 2.0 API."""
    pass


@main.command()
@click.option("--host", default=DEFAULT_HOST, envvar="JSON_SERVER_SWAGGER_HOST", show_default=True, help="Host the API is served from.")
@click.option("-i", "--input", "input_path", default="db.json", show_default=True, type=click.Path(path_type=Path), help="Sample dataset served by json-server.")
@click.option("-o", "--output", default="swagger.json", show_default=True, type=click.Path(path_type=Path), help="Output file path for the Swagger document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format; 'auto' picks from the output suffix.")
@click.option("-v", "--verbose", is_flag=True, help="Log every inferred property.")
def generate(host: str, input_path: Path, output: Path, fmt: str, verbose: bool):
    """Generate a Swagger document from a json-server dataset."""
    _setup_logging(verbose)
    config = GeneratorConfig.for_output(output, fmt, host=host, input_path=input_path)

    click.echo(f"Reading {config.input_path}...")
    try:
        dataset = load_dataset(config.input_path)
        click.echo(f"Found {len(dataset)} collections: {', '.join(dataset) or '-'}")
        document = build_document(dataset, host=config.host)
    except SwaggerGenError as e:
        raise click.ClickException(e.to_message()) from e

    dangling = find_dangling_refs(document)
    if dangling:
        raise click.ClickException(f"Generated document has dangling references: {', '.join(dangling)}")

    write_document(document, config.output_path, fmt=config.output_format, indent=config.indent)
    click.echo(
        f"Swagger document with {len(document.paths)} paths and "
        f"{len(document.definitions)} definitions saved to {config.output_path}"
    )


@main.command()
@click.argument("swagger_path", type=click.Path(exists=True, path_type=Path))
def check(swagger_path: Path):
    """Report $refs in a Swagger document that point to missing definitions."""
    try:
        document = load_dataset(swagger_path)
    except SwaggerGenError as e:
        raise click.ClickException(e.to_message()) from e

    dangling = find_dangling_refs(document)
    if dangling:
        for ref in dangling:
            click.echo(f"  Dangling: {ref}")
        raise click.ClickException(f"{len(dangling)} dangling references in {swagger_path}")
    click.echo(f"All references in {swagger_path} resolve.")
