# =============================================================================
# core/validation.py  —  Argument Validator
# =============================================================================
#
# Checks a raw argument bag against a tool's arguments model (pydantic)
# before any upstream call is made.  The result is a value, not an exception:
#
#   Valid(arguments)                 → the tool's *Args model, safe for a handler
#   Invalid(kind, field_name, ...)   → the one problem reported to the caller
#
# RULES:
#   - None counts as absent; "" and [] do not.
#   - A missing required field is reported before any type problem, and the
#     first one in declaration order wins.
#   - Types are strict: bool is not a string, and 1/0 are not booleans.
#   - Undeclared keys are ignored.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from core.models import FieldType, ToolArguments, ToolDescriptor


class ProblemKind(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_TYPE = "invalid_type"


@dataclass(frozen=True)
class Valid:
    arguments: ToolArguments


@dataclass(frozen=True)
class Invalid:
    kind: ProblemKind
    field_name: str
    message: str


_EXPECTED = {
    FieldType.STRING: "a string",
    FieldType.BOOLEAN: "a boolean",
    FieldType.STRING_ARRAY: "an array of strings",
}


def _to_invalid(descriptor: ToolDescriptor, raw: dict[str, Any], exc: ValidationError) -> Invalid:
    order = {f.name: i for i, f in enumerate(descriptor.fields)}

    def rank(error: dict[str, Any]) -> tuple[bool, int]:
        field_name = str(error["loc"][0]) if error["loc"] else ""
        return error["type"] != "missing", order.get(field_name, -1)

    errors = sorted(exc.errors(), key=rank)
    first = errors[0]
    if not first["loc"]:
        return Invalid(ProblemKind.INVALID_TYPE, "", "arguments must be an object")

    name = str(first["loc"][0])
    if first["type"] == "missing":
        return Invalid(ProblemKind.MISSING_FIELD, name, f"missing required field '{name}'")

    field_type = next(f.type for f in descriptor.fields if f.name == name)
    return Invalid(
        kind=ProblemKind.INVALID_TYPE,
        field_name=name,
        message=f"field '{name}' must be {_EXPECTED[field_type]}, got {type(raw[name]).__name__}",
    )


def validate(descriptor: ToolDescriptor, arguments: dict[str, Any] | None) -> Valid | Invalid:
    """Validate ``arguments`` against ``descriptor.arguments_model``.

    Args:
        descriptor: The tool's declared input shape.
        arguments: The raw argument mapping from the request (may be None).

    Returns:
        Valid with the tool's arguments model, or Invalid describing the
        first missing required field or, failing that, the first type
        mismatch.
    """
    raw = arguments or {}
    if isinstance(raw, dict):
        raw = {k: v for k, v in raw.items() if v is not None}

    try:
        return Valid(arguments=descriptor.arguments_model.model_validate(raw))
    except ValidationError as exc:
        return _to_invalid(descriptor, raw, exc)
