"""FastAPI router serving the WADL description of the application it is mounted on."""

from collections.abc import Collection

from fastapi import APIRouter, Request
from fastapi.responses import Response

from route_wadl.introspect.fastapi_routes import compute_base_url, list_routes
from route_wadl.types.base import TypeMapper
from route_wadl.wadl.generator import generate
from route_wadl.wadl.serializer import to_xml

WADL_MEDIA_TYPE = "application/xml"


def wadl_router(
    title: str = "",
    excluded_groups: Collection = (),
    type_mapper: TypeMapper | None = None,
    path: str = "/application.wadl",
    pretty: bool = True,
) -> APIRouter:
    """Return a router with a single GET endpoint rendering the app's WADL.

    The endpoint describes every API route of ``request.app`` except its own.
    """
    router = APIRouter()
    excluded = {__name__, *excluded_groups}

    @router.get(path, response_class=Response, include_in_schema=False)
    def application_wadl(request: Request) -> Response:
        application = generate(
            list_routes(request.app),
            base_url=compute_base_url(request),
            title=title,
            excluded_groups=excluded,
            type_mapper=type_mapper,
        )
        return Response(content=to_xml(application, pretty=pretty), media_type=WADL_MEDIA_TYPE)

    return router
