"""Maps a single RouteRecord onto a WADL resource.

Path variables become ``template`` params and are always required; query
parameters become ``query`` params carrying their declared required flag and
default. As with Spring MVC, an explicit binding name takes precedence over
the handler's parameter name, falling back to ``"param"`` when neither is
known.
"""

import re

from route_wadl.errors import ParameterMetadataMismatch
from route_wadl.types.base import TypeMapper, TypeTag
from route_wadl.wadl.document import Method, Param, Representation, Request, Resource, Response
from route_wadl.wadl.route import PathBinding, QueryBinding, RouteRecord

FALLBACK_PARAM_NAME = "param"

_WHITESPACE = re.compile(r"\s+")
_DEFAULT_SENTINELS = ("\ue000", "\ue001", "\ue002")


def map_route(route: RouteRecord, type_mapper: TypeMapper) -> Resource:
    """Build the resource for ``route``, one method per declared verb."""
    resource = Resource(path=route.path)
    for verb in route.methods:
        resource.methods.append(_map_method(verb, route, type_mapper))
    return resource


def _map_method(verb: str, route: RouteRecord, type_mapper: TypeMapper) -> Method:
    name = route.handler_name
    return Method(
        name=verb.upper(),
        id=name,
        title=name,
        request=_map_request(route, type_mapper),
        responses=_map_responses(route, type_mapper),
    )


def _map_request(route: RouteRecord, type_mapper: TypeMapper) -> Request | None:
    params = map_params(route, type_mapper)

    # no params, no request
    if not params:
        return None

    return Request(
        params=params,
        representations=_map_representations(route.consumes),
    )


def _map_responses(route: RouteRecord, type_mapper: TypeMapper) -> list[Response]:
    if route.return_type is None or route.return_type is type(None):
        return []

    element = type_mapper.resolve(route.return_type) if route.produces else None
    return [Response(representations=_map_representations(route.produces, element))]


def _map_representations(media_types: list[str], element: TypeTag | None = None) -> list[Representation]:
    return [Representation(media_type=str(media_type), element=element) for media_type in media_types]


def map_params(route: RouteRecord, type_mapper: TypeMapper) -> list[Param]:
    """Map the path and query bindings of ``route`` to params, in slot order.

    Raises ParameterMetadataMismatch when the binding slots, discovered names
    and declared types do not line up.
    """
    slots = len(route.param_bindings)
    if slots != len(route.param_names):
        raise ParameterMetadataMismatch(slots, len(route.param_names), "names")
    if slots != len(route.param_types):
        raise ParameterMetadataMismatch(slots, len(route.param_types), "types")

    params = []
    for binding, discovered_name, declared_type in zip(
        route.param_bindings, route.param_names, route.param_types
    ):
        # unbound slots (request bodies, injected objects) are not described
        if isinstance(binding, PathBinding):
            params.append(
                Param(
                    name=param_name(binding.name, discovered_name),
                    type=type_mapper.resolve(declared_type),
                    style="template",
                    required=True,
                )
            )
        elif isinstance(binding, QueryBinding):
            default = clean_default(binding.default)
            params.append(
                Param(
                    name=param_name(binding.name, discovered_name),
                    type=type_mapper.resolve(declared_type),
                    style="query",
                    required=binding.required,
                    default=default or None,
                )
            )
    return params


def param_name(binding_name: str | None, discovered_name: str | None) -> str:
    if binding_name and binding_name.strip():
        return binding_name
    if discovered_name and discovered_name.strip():
        return discovered_name
    return FALLBACK_PARAM_NAME


def clean_default(value: str | None) -> str:
    """Remove all whitespace and the annotation layer's no-default sentinels."""
    if not value:
        return ""
    value = _WHITESPACE.sub("", value)
    for sentinel in _DEFAULT_SENTINELS:
        value = value.replace(sentinel, "")
    return value
