import json
import logging

import pytest

from core import handlers
from core.errors import UpstreamError
from core.models import (
    AddMultipleChoiceQuestionArgs,
    AddTextQuestionArgs,
    CreateFormArgs,
    FormIdArgs,
)
from tests.conftest import FakeFormsClient


def test_create_form_without_description(fake_client):
    env = handlers.create_form(CreateFormArgs(title="Survey"), fake_client)

    assert fake_client.calls == [
        ("create_form", ({"info": {"title": "Survey", "documentTitle": "Survey"}},))
    ]
    assert env.is_error is False
    assert json.loads(env.text) == {
        "formId": "abc123",
        "title": "Survey",
        "description": "",
        "responderUri": "https://docs.google.com/forms/d/abc123/viewform",
    }


def test_create_form_sends_description(fake_client):
    env = handlers.create_form(CreateFormArgs(title="Survey", description="Tell us"), fake_client)

    (method, (body,)), = fake_client.calls
    assert body["info"]["description"] == "Tell us"
    assert json.loads(env.text)["description"] == "Tell us"


def test_create_form_without_form_id_is_upstream_error():
    client = FakeFormsClient(responses={"create_form": {"info": {}}})
    with pytest.raises(UpstreamError) as exc_info:
        handlers.create_form(CreateFormArgs(title="Survey"), client)
    assert "formId" in exc_info.value.message


def test_add_text_question_request(fake_client):
    env = handlers.add_text_question(
        AddTextQuestionArgs(form_id="f1", question_title="Your name?"), fake_client
    )

    assert len(fake_client.calls) == 1
    method, (form_id, body) = fake_client.calls[0]
    assert method == "batch_update"
    assert form_id == "f1"
    assert body == {
        "requests": [
            {
                "createItem": {
                    "item": {
                        "title": "Your name?",
                        "questionItem": {"question": {"required": False, "textQuestion": {}}},
                    },
                    "location": {"index": 0},
                }
            }
        ]
    }
    assert json.loads(env.text) == {
        "success": True,
        "message": "Text question added successfully",
        "questionTitle": "Your name?",
        "required": False,
    }


def test_add_multiple_choice_question_request(fake_client):
    env = handlers.add_multiple_choice_question(
        AddMultipleChoiceQuestionArgs(form_id="f1", question_title="Pick one", options=["A", "B"]),
        fake_client,
    )

    assert len(fake_client.calls) == 1
    method, (form_id, body) = fake_client.calls[0]
    assert (method, form_id) == ("batch_update", "f1")
    (request,) = body["requests"]
    create_item = request["createItem"]
    assert create_item["location"] == {"index": 0}
    question = create_item["item"]["questionItem"]["question"]
    assert question["choiceQuestion"] == {
        "type": "RADIO",
        "options": [{"value": "A"}, {"value": "B"}],
    }
    assert json.loads(env.text)["options"] == ["A", "B"]


def test_multiple_choice_options_are_not_normalized(fake_client):
    handlers.add_multiple_choice_question(
        AddMultipleChoiceQuestionArgs(
            form_id="f1", question_title="Q", options=["A", "A", ""], required=True
        ),
        fake_client,
    )
    _, (_, body) = fake_client.calls[0]
    question = body["requests"][0]["createItem"]["item"]["questionItem"]["question"]
    assert question["required"] is True
    assert question["choiceQuestion"]["options"] == [{"value": "A"}, {"value": "A"}, {"value": ""}]


def test_reads_are_verbatim(fake_client):
    form = handlers.get_form(FormIdArgs(form_id="f1"), fake_client)
    responses = handlers.get_form_responses(FormIdArgs(form_id="f1"), fake_client)

    assert json.loads(form.text) == fake_client.responses["get_form"]
    assert json.loads(responses.text) == fake_client.responses["list_responses"]
    assert fake_client.calls == [("get_form", ("f1",)), ("list_responses", ("f1",))]


@pytest.mark.parametrize(
    "run,args,operation",
    [
        (handlers.create_form, CreateFormArgs(title="T"), "create form"),
        (handlers.add_text_question, AddTextQuestionArgs(form_id="f1", question_title="Q"), "add text question"),
        (
            handlers.add_multiple_choice_question,
            AddMultipleChoiceQuestionArgs(form_id="f1", question_title="Q", options=["A"]),
            "add multiple choice question",
        ),
        (handlers.get_form, FormIdArgs(form_id="f1"), "get form"),
        (handlers.get_form_responses, FormIdArgs(form_id="f1"), "get form responses"),
    ],
)
def test_client_failures_become_upstream_errors(run, args, operation):
    boom = ConnectionError("connection reset by peer")
    client = FakeFormsClient(
        errors={m: boom for m in ("create_form", "batch_update", "get_form", "list_responses")}
    )

    with pytest.raises(UpstreamError) as exc_info:
        run(args, client)

    err = exc_info.value
    assert err.operation == operation
    assert err.message == "connection reset by peer"
    assert str(err) == f"Failed to {operation}: connection reset by peer"
    assert err.__cause__ is boom


def test_non_dict_response_is_upstream_error():
    client = FakeFormsClient(responses={"get_form": "<html>oops</html>"})
    with pytest.raises(UpstreamError) as exc_info:
        handlers.get_form(FormIdArgs(form_id="f1"), client)
    assert "unexpected response type" in exc_info.value.message


def test_registry_covers_catalog():
    from core.catalog import list_tools

    assert set(handlers.HANDLERS) == {t.name for t in list_tools()}


def test_registry_runs_validated_arguments(fake_client):
    args = AddTextQuestionArgs.model_validate({"formId": "f9", "questionTitle": "Q", "required": True})
    env = handlers.HANDLERS["add_text_question"](args, fake_client)
    assert fake_client.calls[0][1][0] == "f9"
    assert json.loads(env.text)["required"] is True


def test_upstream_failure_is_raised_without_logging(caplog):
    client = FakeFormsClient(errors={"get_form": RuntimeError("Quota exceeded")})
    with caplog.at_level(logging.DEBUG), pytest.raises(UpstreamError):
        handlers.get_form(FormIdArgs(form_id="f1"), client)
    assert caplog.records == []
