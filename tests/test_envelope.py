import json

from core import envelope


def test_ok_envelope():
    env = envelope.ok("hello")
    assert env.is_error is False
    assert env.to_dict() == {"content": [{"type": "text", "text": "hello"}], "isError": False}


def test_ok_json_is_indented():
    env = envelope.ok_json({"formId": "abc", "title": "Café"})
    assert env.text == '{\n  "formId": "abc",\n  "title": "Café"\n}'
    assert json.loads(env.text) == {"formId": "abc", "title": "Café"}


def test_error_envelope():
    env = envelope.error("Unknown tool: nope")
    assert env.is_error is True
    assert env.text == "Error: Unknown tool: nope"
