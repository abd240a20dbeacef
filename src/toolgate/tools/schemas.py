"""
Tool schema definitions for ToolGate.

ToolDefinition: the accepted input shape (name, description, parameters).
ToolSchema: JSON-serializable format for MCP responses.

A definition describes its parameters in one of two shapes:
1. legacy `parameters`: a JSON Schema object whose type must be "object".
2. generalized `paramsSchema`: any JSON Schema node, open to extra keys.

Optional fields may be left out, but an explicit null is rejected.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictStr, field_validator

# Only real lists, not tuples or other sequences
StrictStrList = Annotated[list[StrictStr], Strict()]


class OmittableModel(BaseModel):
    """Base for shapes whose optional fields can be omitted but not null."""

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ParameterItems(BaseModel):
    """Element type of an array parameter."""
    type: StrictStr


class ParameterProperty(OmittableModel):
    """
    A single parameter description.
    Unknown keys (minimum, default, pattern, ...) are kept in model_extra.
    """
    model_config = ConfigDict(extra="allow")

    type: StrictStr
    description: Optional[StrictStr] = None
    items: Optional[ParameterItems] = None
    enum: Optional[StrictStrList] = None
    format: Optional[StrictStr] = None


class ParameterSchema(OmittableModel):
    """Generalized `paramsSchema` shape. Any type string is accepted."""
    model_config = ConfigDict(extra="allow")

    type: StrictStr
    description: Optional[StrictStr] = None
    properties: Optional[dict[str, ParameterProperty]] = None
    required: Optional[StrictStrList] = None
    additionalProperties: Optional[StrictBool] = None


class LegacyParameters(OmittableModel):
    """Legacy `parameters` shape. Always an object schema."""
    type: Literal["object"]
    properties: dict[str, ParameterProperty]
    required: Optional[StrictStrList] = None


# Either variant a definition may carry for its parameters
ParameterShape = Union[LegacyParameters, ParameterSchema]

EMPTY_INPUT_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}


class ToolSchema(BaseModel):
    """
    MCP-compliant tool format.
    Sent to agents via tools/list response.
    """
    name: str = Field(..., description="Unique tool identifier")
    description: str = Field(..., description="What the tool does")
    inputSchema: dict[str, Any] = Field(..., description="JSON Schema for parameters")


class ToolDefinition(OmittableModel):
    """
    Accepted tool definition.
    Extra top-level fields are allowed and carried along.
    """
    model_config = ConfigDict(extra="allow")

    name: StrictStr = Field(..., description="Unique tool identifier")
    description: StrictStr = Field(..., description="What the tool does")
    parameters: Optional[LegacyParameters] = Field(default=None, description="Legacy object schema")
    paramsSchema: Optional[ParameterSchema] = Field(default=None, description="Generalized JSON Schema")

    @property
    def parameter_shape(self) -> Optional[ParameterShape]:
        """Return the parameter variant this tool carries (legacy wins when both are set)."""
        if self.parameters is not None:
            return self.parameters
        return self.paramsSchema

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's inputs, whichever shape it was given in."""
        shape = self.parameter_shape
        if shape is None:
            return dict(EMPTY_INPUT_SCHEMA)
        return shape.model_dump(exclude_none=True)

    def to_schema(self) -> ToolSchema:
        """Convert to MCP-compliant format."""
        return ToolSchema(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )
