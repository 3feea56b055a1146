"""Type tags and the priority-ordered binding table used to resolve them.

A TypeMapper owns one binding table, built once when the mapper is created.
Resolution walks that table in declaration order and returns the tag of the
first binding whose source type is among the candidate's ancestors, so the
position of a binding is its priority.
"""

import inspect
import logging
import types
from abc import ABC, abstractmethod
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

WADL_NAMESPACE = "http://wadl.dev.java.net/2009/02"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"


class TypeTag(BaseModel):
    """A namespaced data type name, e.g. ``{WADL}number`` or ``{XSD}long``."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    local_name: str

    @property
    def clark(self) -> str:
        return f"{{{self.namespace}}}{self.local_name}"

    def __str__(self) -> str:
        return self.clark


class TypeBinding(BaseModel):
    """A single source type to tag association."""

    model_config = ConfigDict(frozen=True)

    source_type: type
    tag: TypeTag


class ArrayOf(BaseModel):
    """Declared array of ``element``; resolves exactly as its element does."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    element: Any


def erase(py_type: Any) -> Any:
    """Reduce a typing construct to the plain class it stands for.

    ``list[User]`` becomes ``list``, ``Annotated[int, ...]`` and
    ``Optional[int]`` become ``int``. Unions of several types return None.
    """
    origin = get_origin(py_type)
    if origin is Annotated:
        return erase(get_args(py_type)[0])
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(py_type) if a is not type(None)]
        if len(args) == 1:
            return erase(args[0])
        return None
    if origin is not None:
        return origin
    return py_type


def candidate_types(py_type: Any) -> tuple[type, ...]:
    """The type itself followed by all of its ancestors (its MRO).

    Only ABCs a class explicitly inherits from are included; virtual
    subclass registrations are not.
    """
    if not inspect.isclass(py_type):
        return ()
    return inspect.getmro(py_type)


class TypeMapper(ABC):
    """Maps Python types to type tags through an ordered binding table."""

    namespace = WADL_NAMESPACE

    def __init__(self):
        self._bindings: tuple[TypeBinding, ...] = tuple(self.create_bindings())

    @property
    def bindings(self) -> tuple[TypeBinding, ...]:
        return self._bindings

    @abstractmethod
    def create_bindings(self) -> list[TypeBinding]:
        """Return the bindings of this mapper, highest priority first."""

    def tag(self, local_name: str) -> TypeTag:
        return TypeTag(namespace=self.namespace, local_name=local_name)

    def add_binding(self, bindings: list[TypeBinding], source_type: type, local_name: str) -> None:
        binding = TypeBinding(source_type=source_type, tag=self.tag(local_name))
        bindings.append(binding)
        logger.debug("Added type binding - class: %s, tag: %s", source_type.__qualname__, binding.tag)

    def resolve(self, py_type: Any) -> TypeTag | None:
        """Return the tag for ``py_type``, or None if no binding matches."""
        if isinstance(py_type, ArrayOf):
            py_type = py_type.element
        py_type = erase(py_type)

        candidates = candidate_types(py_type)
        for binding in self._bindings:
            if binding.source_type in candidates:
                logger.debug("Mapped %r to type tag %s", py_type, binding.tag)
                return binding.tag

        logger.debug("Could not map %r to a type tag.", py_type)
        return None
