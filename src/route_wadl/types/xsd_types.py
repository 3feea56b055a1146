"""Type mapper based on XML Schema built-in data types.

Follows the JAXB default data type bindings, with Python's sized ctypes
scalars standing in for the fixed-width primitives. Tags use the XSD
namespace instead of the WADL one.
"""

import ctypes
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from .base import XSD_NAMESPACE, TypeBinding, TypeMapper


class XsdTypeMapper(TypeMapper):
    namespace = XSD_NAMESPACE

    def create_bindings(self) -> list[TypeBinding]:
        bindings: list[TypeBinding] = []
        self.add_binding(bindings, str, "string")
        self.add_binding(bindings, bool, "boolean")
        self.add_binding(bindings, int, "integer")
        self.add_binding(bindings, ctypes.c_int, "integer")
        self.add_binding(bindings, ctypes.c_long, "long")
        self.add_binding(bindings, ctypes.c_longlong, "long")
        self.add_binding(bindings, ctypes.c_short, "short")
        self.add_binding(bindings, Decimal, "decimal")
        self.add_binding(bindings, ctypes.c_float, "float")
        self.add_binding(bindings, float, "double")
        self.add_binding(bindings, ctypes.c_double, "double")
        self.add_binding(bindings, ctypes.c_byte, "byte")
        # datetime subclasses date
        self.add_binding(bindings, datetime, "dateTime")
        self.add_binding(bindings, date, "date")
        self.add_binding(bindings, time, "time")
        self.add_binding(bindings, timedelta, "duration")
        for any_type in (list, tuple, set, frozenset, dict, object):
            self.add_binding(bindings, any_type, "anyType")
        return bindings
