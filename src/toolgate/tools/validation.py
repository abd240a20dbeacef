"""
Tool definition validation for ToolGate.

Checks candidate tool definitions against the accepted shapes and filters a
name -> definition mapping down to the entries that pass.

NOTE: validation never raises to its caller. Every rejection is reported to a
diagnostic sink (by default the `toolgate.tools.validation` logger) and turned
into a False / an omitted entry, so one bad tool never hides the good ones.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from .errors import (
    NotARecord,
    ParametersInvariantViolation,
    ShapeMismatch,
    ToolValidationError,
    UnexpectedFault,
)
from .schemas import ToolDefinition

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    SHAPE_MISMATCH = "shape_mismatch"
    PARAMETERS_INVARIANT = "parameters_invariant"
    NOT_A_RECORD = "not_a_record"
    UNEXPECTED_FAULT = "unexpected_fault"
    REJECTED = "rejected"


@dataclass
class Diagnostic:
    """One reported problem with one tool."""
    kind: DiagnosticKind
    tool_name: Optional[str]
    message: str
    errors: list[dict[str, Any]] = field(default_factory=list)
    data: Any = None
    error: Optional[BaseException] = None


DiagnosticSink = Callable[[Diagnostic], None]

_KINDS: dict[type, DiagnosticKind] = {
    ShapeMismatch: DiagnosticKind.SHAPE_MISMATCH,
    ParametersInvariantViolation: DiagnosticKind.PARAMETERS_INVARIANT,
    NotARecord: DiagnosticKind.NOT_A_RECORD,
    UnexpectedFault: DiagnosticKind.UNEXPECTED_FAULT,
}


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: write the diagnostic to the module logger."""
    extra_data: dict[str, Any] = {
        "diagnostic": diagnostic.kind.value,
        "tool_name": diagnostic.tool_name,
    }
    if diagnostic.errors:
        extra_data["errors"] = diagnostic.errors
    if diagnostic.data is not None:
        extra_data["invalid_data"] = diagnostic.data

    exc_info = None
    if diagnostic.error is not None:
        exc_info = (type(diagnostic.error), diagnostic.error, diagnostic.error.__traceback__)

    logger.error(diagnostic.message, extra={"extra_data": extra_data}, exc_info=exc_info)


def diagnostic_from_error(error: ToolValidationError, data: Any = None) -> Diagnostic:
    """Build the Diagnostic describing a validation error."""
    return Diagnostic(
        kind=_KINDS[type(error)],
        tool_name=error.tool_name,
        message=error.args[0] if error.args else str(error),
        errors=getattr(error, "errors", []),
        data=getattr(error, "data", data),
        error=error.__cause__ if isinstance(error, UnexpectedFault) else None,
    )


def _tool_name(candidate: Any) -> Optional[str]:
    if isinstance(candidate, Mapping):
        name = candidate.get("name")
    else:
        name = getattr(candidate, "name", None)
    return name if isinstance(name, str) else None


def check_parameters_invariant(parameters: Any, tool_name: Optional[str] = None) -> None:
    """
    Ensure a legacy `parameters` value is an object schema with properties.

    Raises:
        ParametersInvariantViolation: type is not "object" or properties is
            missing / not a mapping
    """
    param_type = parameters.get("type") if isinstance(parameters, Mapping) else None
    if param_type != "object":
        raise ParametersInvariantViolation(
            f"Invalid tool parameters type for tool: {tool_name}. Expected 'object', got '{param_type}'",
            tool_name=tool_name,
        )

    properties = parameters.get("properties")
    if properties is None or not isinstance(properties, Mapping):
        raise ParametersInvariantViolation(
            f"Invalid tool parameters properties for tool: {tool_name}",
            tool_name=tool_name,
        )


def parse_tool_definition(candidate: Any) -> ToolDefinition:
    """
    Match a candidate against the accepted tool shape.

    Args:
        candidate: Any value claiming to be a tool definition

    Returns:
        The parsed ToolDefinition

    Raises:
        ShapeMismatch: name/description missing or wrong type, or neither
            parameter shape matches
        ParametersInvariantViolation: `parameters` present but malformed
        UnexpectedFault: anything else went wrong while matching
    """
    tool_name = None
    try:
        tool_name = _tool_name(candidate)
        tool = ToolDefinition.model_validate(candidate)

        raw = candidate.model_dump(exclude_none=True) if isinstance(candidate, BaseModel) else candidate
        if raw.get("parameters") is not None:
            check_parameters_invariant(raw["parameters"], tool_name)

        return tool
    except ValidationError as e:
        raise ShapeMismatch(
            f"Tool validation failed for tool: {tool_name}",
            tool_name=tool_name,
            errors=e.errors(include_url=False),
            data=candidate,
        ) from e
    except ToolValidationError:
        raise
    except Exception as e:
        raise UnexpectedFault(
            f"Unexpected error validating tool: {tool_name}",
            tool_name=tool_name,
        ) from e


def validate_tool_definition(candidate: Any, sink: Optional[DiagnosticSink] = None) -> bool:
    """
    Check whether a candidate is an acceptable tool definition.

    Returns True or False; failures are reported to `sink` (the logger when
    not given), never raised. The candidate is not modified.
    """
    sink = sink or log_diagnostic
    try:
        parse_tool_definition(candidate)
    except ToolValidationError as e:
        sink(diagnostic_from_error(e))
        return False
    return True


def _as_record(name: str, tool: Any) -> dict[str, Any]:
    """Working copy of a tool entry, with the key as its name."""
    if not isinstance(tool, Mapping):
        raise NotARecord(f"Invalid tool definition: {name} is not an object", tool_name=name)
    try:
        return {**tool, "name": name}
    except Exception as e:
        raise UnexpectedFault(f"Unexpected error validating tool: {name}", tool_name=name) from e


def validate_and_filter_tools(
    tools: Mapping[str, Any],
    sink: Optional[DiagnosticSink] = None,
) -> dict[str, dict[str, Any]]:
    """
    Keep only the tools that pass validation.

    Each entry's key is authoritative: the returned definition always has
    `name` set to its key. Extra fields are carried through. Input order is
    preserved and the input mapping is left untouched.

    Args:
        tools: Mapping of tool name to raw definition
        sink: Where to report rejected tools (defaults to logging)

    Returns:
        New dict with the valid, name-corrected definitions
    """
    sink = sink or log_diagnostic
    valid_tools: dict[str, dict[str, Any]] = {}

    for name, tool in tools.items():
        try:
            tool_with_name = _as_record(name, tool)
        except ToolValidationError as e:
            sink(diagnostic_from_error(e, data=tool))
            continue

        if validate_tool_definition(tool_with_name, sink):
            valid_tools[name] = tool_with_name
        else:
            sink(Diagnostic(
                kind=DiagnosticKind.REJECTED,
                tool_name=name,
                message=f"Tool validation failed for: {name}",
            ))

    return valid_tools


class ToolDefinitionValidator:
    """Validator bound to one diagnostic sink."""

    def __init__(self, sink: Optional[DiagnosticSink] = None):
        self.sink = sink or log_diagnostic

    def validate(self, candidate: Any) -> bool:
        return validate_tool_definition(candidate, self.sink)

    def filter(self, tools: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
        return validate_and_filter_tools(tools, self.sink)
