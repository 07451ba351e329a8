"""Public plotgeom API contracts."""

from plotgeom.api.logging import GeometryLoggingConfig, JsonFormatter

__all__ = ["GeometryLoggingConfig", "JsonFormatter"]
