"""Settings for WADL generation, loaded from a YAML file.

Example ``wadl.yaml``::

    title: Pet Store
    base_url: http://localhost:8000
    exclude:
      - app.internal
    types: xsd
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError

from route_wadl.errors import ConfigError
from route_wadl.types.base import TypeMapper
from route_wadl.types.json_types import JsonTypeMapper
from route_wadl.types.xsd_types import XsdTypeMapper

TYPE_MAPPERS: dict[str, type[TypeMapper]] = {
    "json": JsonTypeMapper,
    "xsd": XsdTypeMapper,
}


class WadlSettings(BaseModel):
    title: str = ""
    base_url: str = ""
    exclude: list[str] = []  # handler modules to leave out
    types: Literal["json", "xsd"] = "json"
    pretty: bool = True

    def type_mapper(self) -> TypeMapper:
        return TYPE_MAPPERS[self.types]()


def load_settings(file_path: Path) -> WadlSettings:
    """Read settings from a YAML file; an empty file yields the defaults."""
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read settings from {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {file_path} must be a mapping, got {type(data).__name__}")

    try:
        return WadlSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {file_path}: {e}") from e
