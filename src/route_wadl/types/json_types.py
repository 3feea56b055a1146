"""Type mapper based on the JSON data types (string, number, boolean, array, object)."""

import collections.abc
import ctypes
from decimal import Decimal
from fractions import Fraction

from .base import TypeBinding, TypeMapper


class JsonTypeMapper(TypeMapper):
    """Default mapper; tags live in the WADL namespace.

    ``bool`` is registered ahead of the numeric types because it subclasses
    ``int`` and would otherwise resolve to ``number``.
    """

    def create_bindings(self) -> list[TypeBinding]:
        bindings: list[TypeBinding] = []
        self.add_binding(bindings, str, "string")
        self.add_binding(bindings, bool, "boolean")
        for number_type in (
            int,
            float,
            Decimal,
            Fraction,
            ctypes.c_int,
            ctypes.c_long,
            ctypes.c_longlong,
            ctypes.c_short,
            ctypes.c_byte,
            ctypes.c_float,
            ctypes.c_double,
        ):
            self.add_binding(bindings, number_type, "number")
        for array_type in (list, tuple, set, frozenset, collections.abc.Sequence, collections.abc.Set):
            self.add_binding(bindings, array_type, "array")
        self.add_binding(bindings, dict, "object")
        self.add_binding(bindings, collections.abc.Mapping, "object")
        self.add_binding(bindings, object, "object")
        return bindings
