"""CLI entry point for router-to-openapispec."""

import importlib
import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from router_to_openapispec.errors import OpenApiGenerationError
from router_to_openapispec.generate import (
    AppRouters,
    GenerateOpenApiDocumentOptions,
    generate_openapi_document,
)

# Accept both option spellings in config files: "baseUrl" and "base_url".
_FIELD_NAMES = {
    (field.alias or name): name
    for name, field in GenerateOpenApiDocumentOptions.model_fields.items()
}


def _load_target(target: str) -> AppRouters:
    """Resolve ``module:attribute`` into an AppRouters instance."""
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise click.BadParameter("expected 'module:attribute'", param_hint="TARGET")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import '{module_name}': {e}", param_hint="TARGET") from e
    try:
        obj = getattr(module, attr)
    except AttributeError:
        raise click.BadParameter(f"'{module_name}' has no attribute '{attr}'", param_hint="TARGET") from None

    if callable(obj) and not isinstance(obj, AppRouters):
        obj = obj()
    if not isinstance(obj, AppRouters):
        raise click.BadParameter(
            f"'{target}' is a {type(obj).__name__}, expected AppRouters", param_hint="TARGET"
        )
    return obj


def _load_options(config: Path | None, overrides: dict) -> GenerateOpenApiDocumentOptions:
    data = {}
    if config is not None:
        try:
            loaded = yaml.safe_load(config.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise click.BadParameter(f"invalid YAML: {e}", param_hint="--config") from e
        if not isinstance(loaded, dict):
            raise click.BadParameter("config file must contain a mapping", param_hint="--config")
        data = {_FIELD_NAMES.get(key, key): value for key, value in loaded.items()}
    data.update({key: value for key, value in overrides.items() if value not in (None, ())})

    try:
        return GenerateOpenApiDocumentOptions.model_validate(data)
    except ValidationError as e:
        raise click.UsageError(f"Invalid options:\n{e}") from e


def _dump(document: dict, fmt: str, output: Path) -> str:
    if fmt == "auto":
        fmt = "json" if output.suffix.lower() == ".json" else "yaml"
    if fmt == "json":
        return json.dumps(document, indent=2) + "\n"
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every processed route.")
def main(verbose: bool):
    """Router to OpenAPI: generate an OpenAPI 3.0 document from registered routes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("target")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--config", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML file with document options.")
@click.option("--title", default=None, help="Document title.")
@click.option("--version", "version", default=None, help="API version string.")
@click.option("--base-url", default=None, help="Server URL.")
@click.option("--description", default=None, help="Document description.")
@click.option("--docs-url", default=None, help="External documentation URL.")
@click.option("--tag", "tags", multiple=True, help="Tag name; may be repeated.")
@click.option("--path-starts-with", default=None, help="Only include routes under this path prefix.")
@click.option("--access", default=None, type=click.Choice(["public", "internal"]), help="Only include routes with this access level.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Output format.")
def generate(target: str, output: Path, config: Path | None, fmt: str, **overrides):
    """Generate an OpenAPI document from the routers named by TARGET (module:attribute)."""
    options = _load_options(config, overrides)
    app_routers = _load_target(target)

    click.echo(f"Generating OpenAPI document for {target}...")
    try:
        document = generate_openapi_document(app_routers, options)
    except OpenApiGenerationError as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_dump(document, fmt, output), encoding="utf-8")
    click.echo(f"Found {len(document['paths'])} paths.")
    click.echo(f"OpenAPI document saved to {output}")
