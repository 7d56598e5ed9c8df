from __future__ import annotations

"""Tool definitions and invocation outcomes shared by every adapter."""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, create_model, field_validator


ParamType = Literal["string", "integer", "number", "boolean", "object", "array"]

_PYTHON_TYPES: Dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "object": Dict[str, Any],
    "array": List[Any],
}


class ParameterSpec(BaseModel):
    """A single named parameter of a tool."""

    model_config = ConfigDict(frozen=True)

    type: ParamType = "string"
    description: str = ""
    required: bool = False


class ToolDefinition(BaseModel):
    """Static descriptor consumed by tool-calling frameworks."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    properties: Mapping[str, ParameterSpec] = Field(default_factory=dict)

    @field_validator("properties", mode="after")
    @classmethod
    def _freeze_properties(cls, value: Mapping[str, ParameterSpec]) -> Mapping[str, ParameterSpec]:
        return MappingProxyType(dict(value))

    @property
    def required(self) -> List[str]:
        return [name for name, spec in self.properties.items() if spec.required]

    @property
    def parameters(self) -> Dict[str, Any]:
        """JSON-schema object describing the accepted arguments."""
        return {
            "type": "object",
            "properties": {
                name: {"type": spec.type, "description": spec.description}
                for name, spec in self.properties.items()
            },
            "required": self.required,
        }

    def to_function_schema(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def to_input_schema(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.parameters,
        }

    def args_model(self) -> Type[BaseModel]:
        """Build a pydantic model validating arguments for this tool.

        Required parameters have no default; every other parameter defaults to
        ``None`` so that omitted arguments can be told apart from supplied ones.
        """
        fields: Dict[str, Tuple[Any, Any]] = {}
        for name, spec in self.properties.items():
            py_type = _PYTHON_TYPES[spec.type]
            if spec.required:
                fields[name] = (py_type, ...)
            else:
                fields[name] = (Optional[py_type], None)
        model_name = "".join(part.title() for part in self.name.split("_")) + "Args"
        return create_model(  # type: ignore[call-overload]
            model_name,
            __config__=ConfigDict(extra="ignore", coerce_numbers_to_str=True),
            **fields,
        )


class ErrorKind(str, Enum):
    REMOTE_REJECTION = "remote_rejection"
    TRANSPORT_FAILURE = "transport_failure"
    INVALID_RESPONSE = "invalid_response"
    INVALID_ARGUMENTS = "invalid_arguments"


class AdapterOutcome(BaseModel):
    """Result of one adapter invocation, before it is flattened for the caller."""

    ok: bool
    data: Any = None
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None
    detail: Any = None

    @classmethod
    def success(cls, data: Any, status_code: Optional[int] = None) -> "AdapterOutcome":
        return cls(ok=True, data=data, status_code=status_code)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        detail: Any = None,
        status_code: Optional[int] = None,
    ) -> "AdapterOutcome":
        return cls(ok=False, kind=kind, detail=detail, status_code=status_code)

    def to_result(self, error_message: str) -> Any:
        """Return the decoded payload, or a uniform ``{"error": ...}`` object."""
        if self.ok:
            return self.data
        return {"error": error_message}


__all__ = [
    "ParamType",
    "ParameterSpec",
    "ToolDefinition",
    "ErrorKind",
    "AdapterOutcome",
]
