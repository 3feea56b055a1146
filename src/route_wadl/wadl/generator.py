"""Assembles a WADL application from an ordered collection of route records."""

import logging
from collections.abc import Collection, Iterable

from route_wadl.types.base import TypeMapper
from route_wadl.types.json_types import JsonTypeMapper
from route_wadl.wadl.document import Application
from route_wadl.wadl.mapper import map_route
from route_wadl.wadl.route import RouteRecord

logger = logging.getLogger(__name__)

DEFAULT_TYPE_MAPPER = JsonTypeMapper()


def generate(
    routes: Iterable[RouteRecord],
    base_url: str,
    title: str,
    excluded_groups: Collection = (),
    type_mapper: TypeMapper | None = None,
) -> Application:
    """Generate the WADL application describing ``routes``.

    Each route yields its own resource, in the order given; routes sharing a
    path are not merged. Routes whose group is in ``excluded_groups`` are
    left out.
    """
    type_mapper = type_mapper or DEFAULT_TYPE_MAPPER
    application = Application(title=title, base=base_url)

    for route in routes:
        if route.group in excluded_groups:
            logger.debug("Ignoring route %s of excluded group: %s", route.path, route.group)
            continue

        application.resources.append(map_route(route, type_mapper))

    return application
