# =============================================================================
# core/catalog.py  —  Tool Catalog (the five Google Forms tools)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every tool the server exposes: its name, the description an
#   MCP client shows to the model, the fields it accepts, and the arguments
#   model (core/models.py) those fields are parsed into.  The MCP list-tools
#   response and the argument validator both read from here.
#
# TOOLS:
#   create_form                   → create an empty form
#   add_text_question             → prepend a free-text question
#   add_multiple_choice_question  → prepend a single-select question
#   get_form                      → read the full form
#   get_form_responses            → read submitted responses
# =============================================================================

from core.models import (
    AddMultipleChoiceQuestionArgs,
    AddTextQuestionArgs,
    CreateFormArgs,
    FieldDescriptor,
    FieldType,
    FormIdArgs,
    ToolDescriptor,
)


# -----------------------------------------------------------------------------
# Shared field declarations
# -----------------------------------------------------------------------------
_FORM_ID = FieldDescriptor("formId", FieldType.STRING, required=True, description="Form ID")
_QUESTION_TITLE = FieldDescriptor(
    "questionTitle", FieldType.STRING, required=True, description="Question title"
)
_REQUIRED_FLAG = FieldDescriptor(
    "required",
    FieldType.BOOLEAN,
    description="Whether required (optional, default is false)",
)


_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="create_form",
        description="Create a new Google Form",
        arguments_model=CreateFormArgs,
        fields=(
            FieldDescriptor("title", FieldType.STRING, required=True, description="Form title"),
            FieldDescriptor(
                "description", FieldType.STRING, description="Form description (optional)"
            ),
        ),
    ),
    ToolDescriptor(
        name="add_text_question",
        description="Add a text question to the form",
        arguments_model=AddTextQuestionArgs,
        fields=(_FORM_ID, _QUESTION_TITLE, _REQUIRED_FLAG),
    ),
    ToolDescriptor(
        name="add_multiple_choice_question",
        description="Add a multiple choice question to the form",
        arguments_model=AddMultipleChoiceQuestionArgs,
        fields=(
            _FORM_ID,
            _QUESTION_TITLE,
            FieldDescriptor(
                "options", FieldType.STRING_ARRAY, required=True, description="Array of choices"
            ),
            _REQUIRED_FLAG,
        ),
    ),
    ToolDescriptor(
        name="get_form",
        description="Get form details",
        arguments_model=FormIdArgs,
        fields=(_FORM_ID,),
    ),
    ToolDescriptor(
        name="get_form_responses",
        description="Get form responses",
        arguments_model=FormIdArgs,
        fields=(_FORM_ID,),
    ),
)

_BY_NAME: dict[str, ToolDescriptor] = {tool.name: tool for tool in _TOOLS}


def list_tools() -> tuple[ToolDescriptor, ...]:
    """Return every tool descriptor, in a fixed order."""
    return _TOOLS


def get_descriptor(name: str) -> ToolDescriptor | None:
    """Look up a tool by name, or None if the catalog has no such tool."""
    return _BY_NAME.get(name)
