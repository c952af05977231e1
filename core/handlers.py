# =============================================================================
# core/handlers.py  —  Tool Handlers (one per tool)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Each handler takes the tool's typed arguments and a DocumentServiceClient,
#   makes exactly ONE client call, and maps the result to an Envelope.
#
# FAILURE POLICY:
#   Whatever the client raises (HTTP error, auth failure, timeout, a body
#   without the fields we need) is re-raised as UpstreamError carrying the
#   tool name, the operation label and the upstream message.  Nothing else
#   escapes a handler's client call.
#
# QUESTION PLACEMENT:
#   New questions are inserted at index 0, so a form built by repeated
#   add_* calls lists its questions newest-first.  Existing clients rely on
#   this order.
# =============================================================================

from typing import Any, Callable

from core.envelope import ok_json
from core.errors import UpstreamError
from core.forms_client import DocumentServiceClient, describe_upstream_error
from core.models import (
    AddMultipleChoiceQuestionArgs,
    AddTextQuestionArgs,
    CreateFormArgs,
    Envelope,
    FormIdArgs,
)

RESPONDER_URI_TEMPLATE = "https://docs.google.com/forms/d/{form_id}/viewform"
INSERT_INDEX = 0


def _call_upstream(
    tool_name: str, operation: str, call: Callable[..., Any], *args: Any
) -> dict[str, Any]:
    try:
        response = call(*args)
    except Exception as exc:
        raise UpstreamError(tool_name, operation, describe_upstream_error(exc)) from exc

    if not isinstance(response, dict):
        raise UpstreamError(
            tool_name, operation, f"unexpected response type {type(response).__name__}"
        )
    return response


def _create_item_request(question_title: str, question: dict[str, Any]) -> dict[str, Any]:
    return {
        "requests": [
            {
                "createItem": {
                    "item": {
                        "title": question_title,
                        "questionItem": {"question": question},
                    },
                    "location": {"index": INSERT_INDEX},
                }
            }
        ]
    }


# =============================================================================
# create_form
# =============================================================================
def create_form(args: CreateFormArgs, client: DocumentServiceClient) -> Envelope:
    """Create a form and report its id and responder link.

    documentTitle (the Drive file name) mirrors the form title.  The
    description is only sent when non-empty.
    """
    info: dict[str, Any] = {"title": args.title, "documentTitle": args.title}
    if args.description:
        info["description"] = args.description

    response = _call_upstream("create_form", "create form", client.create_form, {"info": info})

    form_id = response.get("formId")
    if not form_id:
        raise UpstreamError("create_form", "create form", "response did not include a formId")

    return ok_json({
        "formId": form_id,
        "title": args.title,
        "description": args.description,
        "responderUri": RESPONDER_URI_TEMPLATE.format(form_id=form_id),
    })


# =============================================================================
# add_text_question
# =============================================================================
def add_text_question(args: AddTextQuestionArgs, client: DocumentServiceClient) -> Envelope:
    body = _create_item_request(
        args.question_title,
        {"required": args.required, "textQuestion": {}},
    )
    _call_upstream(
        "add_text_question", "add text question", client.batch_update, args.form_id, body
    )
    return ok_json({
        "success": True,
        "message": "Text question added successfully",
        "questionTitle": args.question_title,
        "required": args.required,
    })


# =============================================================================
# add_multiple_choice_question
# =============================================================================
def add_multiple_choice_question(
    args: AddMultipleChoiceQuestionArgs, client: DocumentServiceClient
) -> Envelope:
    """Single-select ("RADIO") question; options are sent as given, in order."""
    body = _create_item_request(
        args.question_title,
        {
            "required": args.required,
            "choiceQuestion": {
                "type": "RADIO",
                "options": [{"value": option} for option in args.options],
            },
        },
    )
    _call_upstream(
        "add_multiple_choice_question",
        "add multiple choice question",
        client.batch_update,
        args.form_id,
        body,
    )
    return ok_json({
        "success": True,
        "message": "Multiple choice question added successfully",
        "questionTitle": args.question_title,
        "options": list(args.options),
        "required": args.required,
    })


# =============================================================================
# get_form / get_form_responses  —  pass-through reads
# =============================================================================
def get_form(args: FormIdArgs, client: DocumentServiceClient) -> Envelope:
    return ok_json(_call_upstream("get_form", "get form", client.get_form, args.form_id))


def get_form_responses(args: FormIdArgs, client: DocumentServiceClient) -> Envelope:
    return ok_json(
        _call_upstream(
            "get_form_responses", "get form responses", client.list_responses, args.form_id
        )
    )


# =============================================================================
# Registry
# =============================================================================
# The dispatcher passes each handler the arguments model that validation
# produced for the tool (ToolDescriptor.arguments_model).
# =============================================================================
ToolHandler = Callable[[Any, DocumentServiceClient], Envelope]

HANDLERS: dict[str, ToolHandler] = {
    "create_form": create_form,
    "add_text_question": add_text_question,
    "add_multiple_choice_question": add_multiple_choice_question,
    "get_form": get_form,
    "get_form_responses": get_form_responses,
}
