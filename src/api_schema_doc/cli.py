"""CLI entry point for api-schema-doc."""

import logging
from pathlib import Path

import click

from api_schema_doc import service
from api_schema_doc.config import Settings
from api_schema_doc.parser.catalog import Catalog
from api_schema_doc.parser.table import parse_table

logger = logging.getLogger("api_schema_doc")

table_option = click.option(
    "--table", "tables", multiple=True, type=click.Path(exists=True, path_type=Path),
    help="YAML/JSON operation table to register (repeatable).",
)
output_option = click.option(
    "-o", "--output", default=None, type=click.Path(path_type=Path),
    help="Write the result to this file instead of stdout.",
)


def _build_catalog(tables: tuple[Path, ...]) -> Catalog:
    """Register every module from the given tables; unknown namespaces are imported."""
    catalog = Catalog()
    for table in tables:
        for module in parse_table(table):
            catalog.register(module)
    return catalog


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Saved to {output}")


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def main(debug: bool):
    """API Schema Doc: JSON Schema, examples and API documents for annotated operations."""
    logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


@main.command()
@click.argument("namespace")
@click.argument("operation")
@table_option
@output_option
def schema(namespace: str, operation: str, tables: tuple[Path, ...], output: Path | None):
    """Generate the parameter JSON Schema of OPERATION in NAMESPACE."""
    _emit(service.schema_json(namespace, operation, _build_catalog(tables)), output)


@main.command()
@click.argument("namespace")
@click.argument("operation")
@table_option
@output_option
def example(namespace: str, operation: str, tables: tuple[Path, ...], output: Path | None):
    """Generate an example request payload for OPERATION in NAMESPACE."""
    _emit(service.example_json(namespace, operation, _build_catalog(tables)), output)


@main.command()
@click.argument("namespace")
@click.argument("operation")
@table_option
@output_option
def complete(namespace: str, operation: str, tables: tuple[Path, ...], output: Path | None):
    """Generate schema and example of OPERATION together."""
    _emit(service.complete_json(namespace, operation, _build_catalog(tables)), output)


@main.command()
@click.argument("namespace")
@table_option
@output_option
def doc(namespace: str, tables: tuple[Path, ...], output: Path | None):
    """Generate the API document of the module NAMESPACE."""
    _emit(service.api_doc_json(namespace, _build_catalog(tables), Settings.from_env()), output)


@main.command()
@output_option
def index(output: Path | None):
    """Print the API document index."""
    _emit(service.index_json(Settings.from_env()), output)


@main.command()
@click.argument("table_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory for the API documents.")
def table(table_path: Path, output: Path):
    """Generate one API document per module declared in TABLE_PATH."""
    click.echo(f"Parsing {table_path}...")
    modules = parse_table(table_path)
    click.echo(f"Found {len(modules)} modules.")

    catalog = Catalog(modules, discover=False)
    settings = Settings.from_env()
    output.mkdir(parents=True, exist_ok=True)
    for module in modules:
        file_path = output / f"{module.name}.json"
        file_path.write_text(service.api_doc_json(module.namespace, catalog, settings) + "\n", encoding="utf-8")
        click.echo(f"  Created {file_path}")

    click.echo(f"Generated {len(modules)} documents in {output}")
