from unittest import mock

import pytest

from zerobase.translator import (
    HUMAN_TEMPLATE,
    INVALID_JSON,
    MODEL,
    SYSTEM_PROMPT,
    OllamaChat,
    build_messages,
    create_app,
)


class _FakeModel:
    def __init__(self, reply="hello", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake():
    return _FakeModel()


@pytest.fixture
def client(fake):
    return create_app(fake).test_client()


def test_build_messages_roles_and_content():
    messages = build_messages("English", "你好")
    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == SYSTEM_PROMPT
    assert messages[1]["content"] == "翻译这段文字到English：你好"


def test_build_messages_keeps_braces_in_text():
    messages = build_messages("French", "{x}")
    assert messages[1]["content"] == HUMAN_TEMPLATE.replace("{outputLang}", "French").replace("{text}", "{x}")


def test_translate_returns_model_reply(client, fake):
    resp = client.post("/api/v1/translate", json={"outputLang": "English", "text": "你好"})
    assert resp.status_code == 200
    assert resp.get_json() == {"response": "hello"}
    assert fake.calls == [build_messages("English", "你好")]


def test_translate_matches_keys_case_insensitively(client, fake):
    resp = client.post("/api/v1/translate", json={"OUTPUTLANG": "German", "Text": "abc"})
    assert resp.status_code == 200
    assert fake.calls == [build_messages("German", "abc")]


def test_translate_rejects_invalid_json(client, fake):
    resp = client.post("/api/v1/translate", data="not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": INVALID_JSON}
    assert fake.calls == []


def test_translate_rejects_non_string_field(client):
    resp = client.post("/api/v1/translate", json={"text": 5})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": INVALID_JSON}


def test_translate_reports_model_error():
    app = create_app(_FakeModel(error=RuntimeError("boom")))
    resp = app.test_client().post("/api/v1/translate", json={"text": "x"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "boom"}


def test_wrong_method_is_not_found(client):
    resp = client.get("/api/v1/translate")
    assert resp.status_code == 404


def test_ollama_generate_posts_chat_request():
    response = mock.MagicMock()
    response.json.return_value = {"message": {"role": "assistant", "content": "hi"}}
    with mock.patch("requests.post", return_value=response) as post:
        chat = OllamaChat(base_url="http://localhost:11434/")
        messages = build_messages("English", "你好")
        assert chat.generate(messages) == "hi"
    url = post.call_args.args[0]
    payload = post.call_args.kwargs["json"]
    assert url == "http://localhost:11434/api/chat"
    assert payload["model"] == MODEL
    assert payload["messages"] == messages
    assert payload["stream"] is False


def test_ollama_generate_rejects_malformed_reply():
    response = mock.MagicMock()
    response.json.return_value = {"unexpected": True}
    with mock.patch("requests.post", return_value=response):
        with pytest.raises(ValueError):
            OllamaChat().generate(build_messages("English", "x"))