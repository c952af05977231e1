# =============================================================================
# core/models.py  —  Data Models (tool descriptors, requests, envelopes)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through the
# adapter core:
#
#   ToolDescriptor / FieldDescriptor  →  what a tool accepts (the catalog)
#   InvocationRequest                 →  one incoming tool call
#   Envelope / TextBlock              →  what every call returns
#   *Args (pydantic)                  →  validated, typed arguments per tool
#
# Descriptors are frozen: the catalog is built once at import time and is
# shared read-only by every invocation.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


# -----------------------------------------------------------------------------
# FieldType — the primitive types a tool argument can have
# -----------------------------------------------------------------------------
class FieldType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    STRING_ARRAY = "array-of-string"

    def json_schema(self) -> dict[str, Any]:
        """JSON-schema fragment advertised in the tool's inputSchema."""
        if self is FieldType.STRING_ARRAY:
            return {"type": "array", "items": {"type": "string"}}
        return {"type": self.value}


@dataclass(frozen=True)
class FieldDescriptor:
    """One named argument of a tool."""

    name: str                          # Wire name, e.g. "formId"
    type: FieldType
    required: bool = False
    description: str = ""


@dataclass(frozen=True)
class ToolDescriptor:
    """Static description of one tool: name, human text, and input shape."""

    name: str
    description: str
    arguments_model: "type[ToolArguments]"
    fields: tuple[FieldDescriptor, ...] = ()

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate field name in tool '{self.name}': {names}")

        declared = {f.name: f.required for f in self.fields}
        modelled = {
            info.alias or attr: info.is_required()
            for attr, info in self.arguments_model.model_fields.items()
        }
        if declared != modelled:
            raise ValueError(
                f"Fields of tool '{self.name}' do not match {self.arguments_model.__name__}: "
                f"{declared} != {modelled}"
            )

    @property
    def required_fields(self) -> list[str]:
        return [f.name for f in self.fields if f.required]

    def input_schema(self) -> dict[str, Any]:
        properties = {}
        for f in self.fields:
            prop = f.type.json_schema()
            if f.description:
                prop["description"] = f.description
            properties[f.name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": self.required_fields,
        }

    def to_dict(self) -> dict[str, Any]:
        """The list-tools entry for this tool."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


# -----------------------------------------------------------------------------
# InvocationRequest — one call to one tool
# -----------------------------------------------------------------------------
@dataclass
class InvocationRequest:
    tool_name: str
    arguments: dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# Envelope — the uniform response for every invocation
# -----------------------------------------------------------------------------
# Every dispatch path produces exactly one Envelope.  Failures are envelopes
# with is_error=True, never exceptions that escape the dispatcher.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextBlock:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class Envelope:
    content: tuple[TextBlock, ...]
    is_error: bool = False

    @property
    def text(self) -> str:
        """All text blocks joined; convenient for logging and tests."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": b.type, "text": b.text} for b in self.content],
            "isError": self.is_error,
        }


# -----------------------------------------------------------------------------
# Per-tool argument models
# -----------------------------------------------------------------------------
# Handlers receive one of these, never the raw argument dict.  Fields use the
# wire names as aliases ("formId", "questionTitle") and strict types, so 1 is
# not a boolean and 42 is not a string.  Unknown keys are ignored.
# -----------------------------------------------------------------------------
class ToolArguments(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class CreateFormArgs(ToolArguments):
    title: StrictStr
    description: StrictStr = ""


class AddTextQuestionArgs(ToolArguments):
    form_id: StrictStr = Field(alias="formId")
    question_title: StrictStr = Field(alias="questionTitle")
    required: StrictBool = False


class AddMultipleChoiceQuestionArgs(ToolArguments):
    form_id: StrictStr = Field(alias="formId")
    question_title: StrictStr = Field(alias="questionTitle")
    options: list[StrictStr]
    required: StrictBool = False


class FormIdArgs(ToolArguments):
    """Arguments of the read-only tools (get_form, get_form_responses)."""

    form_id: StrictStr = Field(alias="formId")
