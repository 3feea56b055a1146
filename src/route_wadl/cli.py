"""CLI entry point for route-wadl."""

import importlib
import sys
from pathlib import Path
from typing import Any

import click

from route_wadl.config import TYPE_MAPPERS, WadlSettings, load_settings
from route_wadl.errors import ConfigError
from route_wadl.introspect.fastapi_routes import list_routes
from route_wadl.wadl.generator import generate as generate_wadl
from route_wadl.wadl.serializer import to_xml


def _import_object(import_path: str, app_dir: str = ".") -> Any:
    """Import ``module:attribute`` (attribute may be dotted)."""
    module_name, _, attr_path = import_path.partition(":")
    if not module_name or not attr_path:
        raise click.BadParameter(f"expected 'module:attribute', got {import_path!r}")

    if app_dir not in sys.path:
        sys.path.insert(0, app_dir)
    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.ClickException(f"Could not import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise click.ClickException(f"Attribute {attr_path!r} not found in module {module_name!r}") from e
    return obj


def _settings(config_path: Path | None, **overrides: Any) -> WadlSettings:
    try:
        settings = load_settings(config_path) if config_path else WadlSettings()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    exclude = overrides.pop("exclude", ())
    update = {key: value for key, value in overrides.items() if value is not None}
    update["exclude"] = [*settings.exclude, *exclude]
    return settings.model_copy(update=update)


@click.group()
def main():
    """route-wadl: describe a web application's routes as a WADL document."""
    pass


@main.command()
@click.argument("app_path")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file for the WADL document (default: stdout).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML settings file.")
@click.option("--title", default=None, help="Application title.")
@click.option("--base-url", default=None, help="Base URL of the resources.")
@click.option("--exclude", multiple=True, help="Handler module to leave out (repeatable).")
@click.option("--types", default=None, type=click.Choice(list(TYPE_MAPPERS)), help="Type system for params and representations.")
@click.option("--app-dir", default=".", help="Directory added to the import path.")
def generate(app_path: str, output: Path | None, config_path: Path | None, title: str | None,
             base_url: str | None, exclude: tuple[str, ...], types: str | None, app_dir: str):
    """Generate the WADL document of a FastAPI application given as module:attribute."""
    settings = _settings(config_path, title=title, base_url=base_url, exclude=exclude, types=types)

    click.echo(f"Loading {app_path}...", err=True)
    app = _import_object(app_path, app_dir)
    routes = list_routes(app)
    click.echo(f"Found {len(routes)} routes.", err=True)

    application = generate_wadl(
        routes,
        base_url=settings.base_url,
        title=settings.title,
        excluded_groups=set(settings.exclude),
        type_mapper=settings.type_mapper(),
    )
    xml = to_xml(application, pretty=settings.pretty)

    if output is None:
        click.echo(xml, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(xml, encoding="utf-8")
    click.echo(f"Described {len(application.resources)} resources in {output}", err=True)


@main.command()
@click.argument("type_path")
@click.option("--types", default="json", type=click.Choice(list(TYPE_MAPPERS)), help="Type system to resolve against.")
@click.option("--app-dir", default=".", help="Directory added to the import path.")
def resolve(type_path: str, types: str, app_dir: str):
    """Print the type tag a class given as module:qualname resolves to."""
    py_type = _import_object(type_path, app_dir)
    tag = TYPE_MAPPERS[types]().resolve(py_type)
    click.echo(tag.clark if tag is not None else "unresolved")
