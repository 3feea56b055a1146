"""WADL document model.

application -> resources -> resource -> method -> request/response -> representation
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from route_wadl.types.base import TypeTag


class Param(BaseModel):
    """A request parameter (path template or query)."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeTag | None = None
    style: Literal["template", "query"]
    required: bool = False
    default: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _template_is_required(cls, data: Any) -> Any:
        # path templates cannot be omitted
        if isinstance(data, dict) and data.get("style") == "template":
            data = {**data, "required": True}
        return data


class Representation(BaseModel):
    media_type: str
    element: TypeTag | None = None


class Request(BaseModel):
    params: list[Param]
    representations: list[Representation] = []


class Response(BaseModel):
    representations: list[Representation] = []


class Method(BaseModel):
    """One HTTP verb on a resource, named after its handler."""

    name: str  # GET / POST / PUT / DELETE / PATCH
    id: str
    title: str
    request: Request | None = None
    responses: list[Response] = []


class Resource(BaseModel):
    path: str
    methods: list[Method] = []


class Application(BaseModel):
    title: str
    base: str
    resources: list[Resource] = []
