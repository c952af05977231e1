"""
Shared fixtures: a recording stand-in for the Google Forms client.

FakeFormsClient never touches the network.  Each method appends
(method_name, args) to ``calls`` and returns the canned body configured
for it, or raises the configured exception.
"""

from typing import Any

import pytest

from core.dispatcher import Dispatcher


class FakeFormsClient:
    def __init__(self, responses: dict[str, Any] | None = None, errors: dict[str, Exception] | None = None):
        self.responses = responses or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        if method in self.errors:
            raise self.errors[method]
        return self.responses.get(method, {})

    def create_form(self, body):
        return self._record("create_form", body)

    def batch_update(self, form_id, body):
        return self._record("batch_update", form_id, body)

    def get_form(self, form_id):
        return self._record("get_form", form_id)

    def list_responses(self, form_id):
        return self._record("list_responses", form_id)


@pytest.fixture
def fake_client():
    return FakeFormsClient(
        responses={
            "create_form": {"formId": "abc123", "info": {"title": "Survey"}},
            "batch_update": {"replies": [{"createItem": {"itemId": "item1"}}]},
            "get_form": {"formId": "f1", "info": {"title": "Survey"}, "items": []},
            "list_responses": {"responses": [{"responseId": "r1", "answers": {}}]},
        }
    )


@pytest.fixture
def dispatcher(fake_client):
    return Dispatcher(fake_client)
