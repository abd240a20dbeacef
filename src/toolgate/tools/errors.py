"""Exception classes for ToolGate."""

from typing import Any, Optional


class ToolGateError(Exception):
    """Base exception for all ToolGate errors."""
    pass


class ToolConfigError(ToolGateError):
    """Raised when tool configuration cannot be loaded."""
    pass


class ToolValidationError(ToolGateError):
    """Base for per-tool validation failures."""

    def __init__(self, message: str, *, tool_name: Optional[str] = None):
        super().__init__(message)
        self.tool_name = tool_name


class ShapeMismatch(ToolValidationError):
    """Raised when a candidate does not match the accepted tool shape."""

    def __init__(
        self,
        message: str,
        *,
        tool_name: Optional[str] = None,
        errors: Optional[list[dict[str, Any]]] = None,
        data: Any = None,
    ):
        super().__init__(message, tool_name=tool_name)
        self.errors = errors or []
        self.data = data

    def __str__(self) -> str:
        base = super().__str__()
        if not self.errors:
            return base
        # loc paths are tuples, e.g. ('parameters', 'properties', 'q', 'type')
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) or "<root>" for e in self.errors)
        return f"{base} | fields={fields}"


class ParametersInvariantViolation(ToolValidationError):
    """Raised when `parameters` is not an object schema with properties."""
    pass


class NotARecord(ToolValidationError):
    """Raised when a tool entry is null or not a mapping."""
    pass


class UnexpectedFault(ToolValidationError):
    """Raised when matching fails for a reason other than the shape itself."""
    pass
