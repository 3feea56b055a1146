"""Route discovery for FastAPI applications.

Walks ``app.routes`` and turns each ``APIRoute`` into a RouteRecord. Parameter
bindings follow the classification FastAPI records on ``route.dependant``:
only its path and query fields are bound, everything else (bodies, uploads,
headers, injected objects, dependencies) is left unbound.
"""

import inspect
import logging
from typing import Annotated, Any, Callable, get_args, get_origin, get_type_hints

from fastapi.datastructures import DefaultPlaceholder
from fastapi.routing import APIRoute
from pydantic_core import PydanticUndefined, to_json, to_jsonable_python

from route_wadl.wadl.route import NoBinding, ParamBinding, PathBinding, QueryBinding, RouteRecord

logger = logging.getLogger(__name__)

IGNORED_METHODS = {"HEAD", "OPTIONS"}


def list_routes(app: Any) -> list[RouteRecord]:
    """Return a RouteRecord for every API route of ``app``, in routing order."""
    records = []
    for route in app.routes:
        if not isinstance(route, APIRoute):
            logger.debug("Skipping non-API route: %s", getattr(route, "path", route))
            continue
        records.append(route_record(route))
    return records


def route_record(route: APIRoute) -> RouteRecord:
    endpoint = route.endpoint
    hints = _type_hints(endpoint)
    path_fields = {f.name: f for f in route.dependant.path_params}
    query_fields = {f.name: f for f in route.dependant.query_params}

    bindings: list[ParamBinding] = []
    param_types: list[Any] = []
    for param in _signature_params(endpoint):
        declared = _declared_type(hints.get(param.name, param.annotation))
        if param.name in path_fields:
            bindings.append(PathBinding(name=_explicit_alias(path_fields[param.name])))
        elif param.name in query_fields:
            bindings.append(_query_binding(query_fields[param.name]))
        else:
            bindings.append(NoBinding())
        param_types.append(declared)

    return RouteRecord(
        path=route.path,
        methods=sorted(m for m in route.methods or () if m not in IGNORED_METHODS),
        consumes=_consumes(route),
        produces=_produces(route),
        param_bindings=bindings,
        param_names=discover_parameter_names(endpoint),
        param_types=param_types,
        return_type=_return_type(route, hints),
        handler=endpoint,
        group=getattr(endpoint, "__module__", None),
    )


def discover_parameter_names(handler: Callable) -> list[str]:
    """Names of the handler's parameters; empty when they cannot be inspected."""
    return [param.name for param in _signature_params(handler)]


def compute_base_url(request: Any) -> str:
    """scheme://host:port/root_path of the application serving ``request``."""
    url = request.url
    port = url.port or (443 if url.scheme in ("https", "wss") else 80)
    return format_base_url(url.scheme, url.hostname or "", port, request.scope.get("root_path", ""))


def format_base_url(scheme: str, host: str, port: int, root_path: str = "") -> str:
    return f"{scheme}://{host}:{port}{root_path}"


def _signature_params(handler: Callable) -> list[inspect.Parameter]:
    try:
        return list(inspect.signature(handler).parameters.values())
    except (TypeError, ValueError):
        logger.debug("No signature available for handler: %r", handler)
        return []


def _type_hints(handler: Callable) -> dict[str, Any]:
    try:
        return get_type_hints(handler, include_extras=True)
    except (NameError, TypeError):
        logger.debug("Could not evaluate type hints of handler: %r", handler)
        return {}


def _declared_type(annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty:
        return object
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[0]
    return annotation


def _explicit_alias(field: Any) -> str:
    return field.alias if field.alias != field.name else ""


def _query_binding(field: Any) -> QueryBinding:
    name = _explicit_alias(field)
    if field.required:
        return QueryBinding(name=name, required=True)
    if field.default is None or field.default is PydanticUndefined:
        return QueryBinding(name=name, required=False)
    return QueryBinding(name=name, required=False, default=wire_value(field.default))


def wire_value(value: Any) -> str:
    """Render a default the way a client would send it: ``red`` for an enum, ``false`` for a bool."""
    value = to_jsonable_python(value)
    if isinstance(value, str):
        return value
    return to_json(value).decode()


def _consumes(route: APIRoute) -> list[str]:
    if route.body_field is None:
        return []
    field_info = getattr(route.body_field, "field_info", None)
    return [getattr(field_info, "media_type", None) or "application/json"]


def _produces(route: APIRoute) -> list[str]:
    response_class = route.response_class
    if isinstance(response_class, DefaultPlaceholder):
        response_class = response_class.value
    media_type = getattr(response_class, "media_type", None)
    return [media_type] if media_type else []


def _return_type(route: APIRoute, hints: dict[str, Any]) -> Any:
    if route.response_model is not None:
        return route.response_model
    if "return" not in hints:
        return object
    declared = _declared_type(hints["return"])
    if declared is None or declared is type(None):
        return None
    return declared
