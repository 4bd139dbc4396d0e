"""CLI entry point for api-spec-scanner."""

from pathlib import Path

import click
from pydantic import ValidationError

from api_spec_scanner.config import ScanConfig
from api_spec_scanner.generator.json_output import render_json
from api_spec_scanner.generator.output import OutputWriteError
from api_spec_scanner.generator.spec import ApiSpecGenerator
from api_spec_scanner.registry.discover import RegistryNotFoundError, discover_registries


def _load_config(config_path: Path | None) -> ScanConfig:
    if config_path is None:
        return ScanConfig()
    try:
        return ScanConfig.from_yaml(config_path)
    except (ValueError, ValidationError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e


def _discover(target: str):
    try:
        return discover_registries(target)
    except RegistryNotFoundError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def main():
    """API Spec Scanner — describe the endpoints of a registered application."""
    pass


@main.command()
@click.argument("target")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Output path for the JSON document; HTML lands beside it.")
@click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path), default=None, help="YAML config file.")
@click.option("--name", default=None, help="Application name written into the document.")
@click.option("--include", "includes", multiple=True, help="Path pattern to include (repeatable; replaces the config file's patterns).")
@click.option("--exclude", "excludes", multiple=True, help="Path pattern to exclude (repeatable; replaces the config file's patterns).")
@click.option("--method", "methods", multiple=True, help="HTTP method to include (repeatable; replaces the config file's methods).")
@click.option("--exclude-method", "exclude_methods", multiple=True, help="HTTP method to exclude (repeatable; replaces the config file's methods).")
@click.option("--console", is_flag=True, help="Also print the JSON document.")
@click.option("--no-file", is_flag=True, help="Do not write output files.")
def scan(
    target: str,
    output: Path | None,
    config_path: Path | None,
    name: str | None,
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    methods: tuple[str, ...],
    exclude_methods: tuple[str, ...],
    console: bool,
    no_file: bool,
):
    """Scan TARGET ('module' or 'module:registry') and write the API specification."""
    config = _load_config(config_path)

    updates = {}
    if output is not None:
        updates["output_file_path"] = output
    if name:
        updates["application_name"] = name
    if includes:
        updates["include_path_patterns"] = set(includes)
    if excludes:
        updates["exclude_path_patterns"] = set(excludes)
    if methods:
        updates["include_http_methods"] = {m.upper() for m in methods}
    if exclude_methods:
        updates["exclude_http_methods"] = {m.upper() for m in exclude_methods}
    if console:
        updates["enable_console_output"] = True
    if no_file:
        updates["enable_file_output"] = False
    config = config.model_copy(update=updates)

    click.echo(f"Scanning {target}...")
    registry, advice = _discover(target)
    click.echo(f"Found {len(registry)} routes.")

    try:
        document = ApiSpecGenerator(config).generate_and_output(registry, advice)
    except OutputWriteError as e:
        detail = f"{e}: {e.__cause__}" if e.__cause__ is not None else str(e)
        raise click.ClickException(detail) from e

    click.echo(f"Documented {len(document.endpoints)} endpoints, {len(document.exception_handlers)} exception handlers.")
    if config.enable_file_output:
        click.echo(f"  Created {config.output_file_path}")
        click.echo(f"  Created {config.html_output_path}")


@main.command()
@click.argument("target")
@click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path), default=None, help="YAML config file.")
def show(target: str, config_path: Path | None):
    """Print the API specification of TARGET as JSON."""
    config = _load_config(config_path)
    registry, advice = _discover(target)
    document = ApiSpecGenerator(config).generate(registry, advice)
    click.echo(render_json(document))
