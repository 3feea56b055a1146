from dataclasses import dataclass
from enum import Enum
from types import SimpleNamespace
from typing import Annotated

from fastapi import Body, FastAPI, Path, Query, Request, UploadFile
from pydantic import BaseModel

from route_wadl.introspect.fastapi_routes import (
    compute_base_url,
    discover_parameter_names,
    format_base_url,
    list_routes,
    wire_value,
)
from route_wadl.types.json_types import JsonTypeMapper
from route_wadl.types.xsd_types import XsdTypeMapper
from route_wadl.wadl.generator import generate
from route_wadl.wadl.route import NO_DEFAULT, NoBinding, PathBinding, QueryBinding


class User(BaseModel):
    name: str


@dataclass
class Item:
    title: str


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


app = FastAPI()


@app.get("/users/{user_id}")
def get_user(user_id: int, verbose: bool = False) -> list[User]:
    return []


@app.get("/search")
def search(
    q: Annotated[str, Query(alias="query")],
    limit: int = Query(10),
    tag: str | None = None,
) -> dict:
    return {}


@app.post("/users")
def create_user(user: User, request: Request, note: str = Body("")) -> User:
    return user


@app.get("/items/{item_id}")
def get_item(item_id: Annotated[int, Path(ge=1)]):
    return {}


@app.delete("/items/{item_id}")
def delete_item(item_id: int) -> None:
    return None


@app.post("/uploads")
def upload(file: UploadFile) -> None:
    return None


@app.post("/items")
def create_item(item: Item) -> None:
    return None


@app.get("/paint")
def paint(color: Color = Color.RED, verbose: bool = False, ratio: float = 0.5) -> None:
    return None


def _by_handler(name: str):
    return next(r for r in list_routes(app) if r.handler_name == name)


class TestListRoutes:
    def test_only_api_routes_in_order(self):
        routes = list_routes(app)
        assert [r.handler_name for r in routes] == [
            "get_user",
            "search",
            "create_user",
            "get_item",
            "delete_item",
            "upload",
            "create_item",
            "paint",
        ]

    def test_methods_and_group(self):
        route = _by_handler("get_user")
        assert route.path == "/users/{user_id}"
        assert route.methods == ["GET"]
        assert route.group == __name__
        assert route.handler is get_user

    def test_path_and_query_from_plain_params(self):
        route = _by_handler("get_user")
        assert route.param_bindings == [PathBinding(), QueryBinding(required=False, default="false")]
        assert route.param_names == ["user_id", "verbose"]
        assert route.param_types == [int, bool]
        assert route.return_type == list[User]

    def test_query_markers(self):
        route = _by_handler("search")
        assert route.param_bindings == [
            QueryBinding(name="query", required=True),
            QueryBinding(required=False, default="10"),
            QueryBinding(required=False, default=NO_DEFAULT),
        ]
        assert route.param_types[0] is str

    def test_body_and_injected_params_are_unbound(self):
        route = _by_handler("create_user")
        assert route.param_bindings == [NoBinding(), NoBinding(), NoBinding()]
        assert route.consumes == ["application/json"]
        assert route.produces == ["application/json"]

    def test_path_marker_in_annotated(self):
        route = _by_handler("get_item")
        assert route.param_bindings == [PathBinding()]
        assert route.param_types == [int]
        assert route.return_type is object
        assert route.consumes == []

    def test_upload_is_body(self):
        route = _by_handler("upload")
        assert route.param_bindings == [NoBinding()]
        assert route.consumes == ["multipart/form-data"]

    def test_dataclass_is_body(self):
        route = _by_handler("create_item")
        assert route.param_bindings == [NoBinding()]
        assert route.consumes == ["application/json"]

    def test_body_params_never_described(self):
        application = generate(list_routes(app), "http://localhost:8000", "Users")
        by_id = {m.id: m for r in application.resources for m in r.methods}
        assert by_id["upload"].request is None
        assert by_id["create_item"].request is None

    def test_defaults_are_wire_values(self):
        route = _by_handler("paint")
        assert route.param_bindings == [
            QueryBinding(required=False, default="red"),
            QueryBinding(required=False, default="false"),
            QueryBinding(required=False, default="0.5"),
        ]
        application = generate([route], "http://localhost:8000", "Paint", type_mapper=XsdTypeMapper())
        params = application.resources[0].methods[0].request.params
        assert [(p.name, p.type.local_name, p.default) for p in params] == [
            ("color", "string", "red"),
            ("verbose", "boolean", "false"),
            ("ratio", "double", "0.5"),
        ]

    def test_none_return_is_void(self):
        assert _by_handler("delete_item").return_type is None

    def test_generates_user_lookup(self):
        application = generate(list_routes(app), "http://localhost:8000", "Users", type_mapper=JsonTypeMapper())
        method = application.resources[0].methods[0]
        assert [(p.name, p.style, p.required, p.default, p.type.local_name) for p in method.request.params] == [
            ("user_id", "template", True, None, "number"),
            ("verbose", "query", False, "false", "boolean"),
        ]
        assert method.responses[0].representations[0].element.local_name == "array"

        delete = application.resources[4].methods[0]
        assert delete.name == "DELETE"
        assert delete.responses == []


class TestDiscoverParameterNames:
    def test_function(self):
        assert discover_parameter_names(get_user) == ["user_id", "verbose"]

    def test_unavailable_signature(self):
        assert discover_parameter_names(object()) == []


class TestBaseUrl:
    def test_format(self):
        assert format_base_url("http", "localhost", 8080, "/ctx") == "http://localhost:8080/ctx"

    def test_default_port_is_written(self):
        request = SimpleNamespace(
            url=SimpleNamespace(scheme="https", hostname="api.example.com", port=None),
            scope={"root_path": "/v1"},
        )
        assert compute_base_url(request) == "https://api.example.com:443/v1"

    def test_explicit_port(self):
        request = SimpleNamespace(
            url=SimpleNamespace(scheme="http", hostname="localhost", port=8000),
            scope={},
        )
        assert compute_base_url(request) == "http://localhost:8000"


class TestWireValue:
    def test_scalars(self):
        assert wire_value(True) == "true"
        assert wire_value(10) == "10"
        assert wire_value("plain") == "plain"

    def test_enum_uses_value(self):
        assert wire_value(Color.BLUE) == "blue"
