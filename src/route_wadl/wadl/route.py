"""Route records: the introspected metadata of one handler mapping.

Produced by the introspection layer (see ``route_wadl.introspect``) and
consumed by ``route_wadl.wadl.mapper``.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Marker the annotation layer uses for "no default value"; the private-use
# characters survive whitespace stripping and are removed separately.
NO_DEFAULT = "\n\t\t\n\t\t\n\ue000\ue001\ue002\n\t\t\t\t\n"


class NoBinding(BaseModel):
    """Parameter that is neither a path variable nor a query parameter."""

    kind: Literal["none"] = "none"


class PathBinding(BaseModel):
    kind: Literal["path"] = "path"
    name: str = ""


class QueryBinding(BaseModel):
    kind: Literal["query"] = "query"
    name: str = ""
    required: bool = True
    default: str = NO_DEFAULT


ParamBinding = Annotated[Union[NoBinding, PathBinding, QueryBinding], Field(discriminator="kind")]


class RouteRecord(BaseModel):
    """One path to handler mapping with its declared media types and parameters.

    ``param_bindings``, ``param_names`` and ``param_types`` are parallel, one
    entry per handler parameter. ``return_type`` of None means the handler
    returns nothing.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str
    methods: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    param_bindings: list[ParamBinding] = []
    param_names: list[str] = []
    param_types: list[Any] = []
    return_type: Any = None
    handler: Any = None
    group: Any = None

    @property
    def handler_name(self) -> str:
        name = getattr(self.handler, "__name__", None)
        if name:
            return name
        return str(self.handler) if self.handler is not None else ""
