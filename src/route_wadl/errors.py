"""Errors raised while building WADL documents."""


class WadlError(Exception):
    """Base class for route-wadl errors."""


class ParameterMetadataMismatch(WadlError):
    """Handler parameter slots disagree with the discovered names or types.

    This means the introspection layer produced inconsistent metadata for a
    route; the route cannot be mapped.
    """

    def __init__(self, expected: int, actual: int, field: str):
        self.expected = expected
        self.actual = actual
        self.field = field  # names / types
        super().__init__(
            f"Annotations length '{expected}' does not match parameter {field} size: {actual}"
        )


class ConfigError(WadlError):
    """Settings file could not be read or validated."""
