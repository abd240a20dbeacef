"""
ToolGate tools package.

Validation, registry and loading of tool definitions.
"""
from .base import clear_registry, get_all_tools, get_tool, register_tools
from .errors import (
    NotARecord,
    ParametersInvariantViolation,
    ShapeMismatch,
    ToolConfigError,
    ToolGateError,
    ToolValidationError,
    UnexpectedFault,
)
from .loader import load_tool_definitions, register_tools_file
from .schemas import (
    LegacyParameters,
    ParameterProperty,
    ParameterSchema,
    ParameterShape,
    ToolDefinition,
    ToolSchema,
)
from .validation import (
    Diagnostic,
    DiagnosticKind,
    ToolDefinitionValidator,
    parse_tool_definition,
    validate_and_filter_tools,
    validate_tool_definition,
)

__all__ = [
    "clear_registry",
    "get_all_tools",
    "get_tool",
    "register_tools",
    "NotARecord",
    "ParametersInvariantViolation",
    "ShapeMismatch",
    "ToolConfigError",
    "ToolGateError",
    "ToolValidationError",
    "UnexpectedFault",
    "load_tool_definitions",
    "register_tools_file",
    "LegacyParameters",
    "ParameterProperty",
    "ParameterSchema",
    "ParameterShape",
    "ToolDefinition",
    "ToolSchema",
    "Diagnostic",
    "DiagnosticKind",
    "ToolDefinitionValidator",
    "parse_tool_definition",
    "validate_and_filter_tools",
    "validate_tool_definition",
]
