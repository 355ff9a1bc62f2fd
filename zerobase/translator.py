"""Translation endpoint backed by a local Ollama chat model."""

import argparse
import json

import requests
from flask import Flask, jsonify, make_response, request

MODEL = "modelscope.cn/unsloth/DeepSeek-R1-Distill-Qwen-1.5B-GGUF"
DEFAULT_BASE_URL = "http://localhost:11434"
SYSTEM_PROMPT = "你是一个只能翻译文本的翻译引擎，不需要进行解释。"
HUMAN_TEMPLATE = "翻译这段文字到{outputLang}：{text}"
INVALID_JSON = "Invalid Json."
NOT_FOUND_BODY = "404 page not found"

_FIELD_KEYS = {"outputlang": "output_lang", "text": "text"}


class OllamaChat:
    """Minimal client for the Ollama chat API."""

    def __init__(self, model=MODEL, base_url=DEFAULT_BASE_URL, timeout=None):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def generate(self, messages):
        """Send ``messages`` to the model and return the reply text."""
        resp = requests.post(
            f"{self.base_url}/api/chat",
            json={"model": self.model, "messages": list(messages), "stream": False},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        try:
            return data["message"]["content"]
        except (KeyError, TypeError) as exc:
            raise ValueError("no content in model response") from exc


def build_messages(output_lang, text):
    """Return the system and user chat messages asking for a translation."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": HUMAN_TEMPLATE.format(outputLang=output_lang, text=text)},
    ]


class _BadRequest(ValueError):
    pass


def _parse_request(body):
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise _BadRequest(str(exc)) from exc
    fields = {"output_lang": "", "text": ""}
    if data is None:
        return fields
    if not isinstance(data, dict):
        raise _BadRequest("expected a JSON object")
    for key, value in data.items():
        name = _FIELD_KEYS.get(key.lower())
        if name is None or value is None:
            continue
        if not isinstance(value, str):
            raise _BadRequest(f"field {key!r} must be a string")
        fields[name] = value
    return fields


def _not_found(_error):
    response = make_response(NOT_FOUND_BODY, 404)
    response.mimetype = "text/plain"
    return response


def create_app(llm=None):
    """Build the translation application using ``llm`` (an Ollama client by default)."""
    model = llm if llm is not None else OllamaChat()
    app = Flask(__name__)
    app.json.ensure_ascii = False

    @app.post("/api/v1/translate")
    def translate():
        try:
            fields = _parse_request(request.get_data())
        except _BadRequest:
            return jsonify(error=INVALID_JSON), 400
        messages = build_messages(fields["output_lang"], fields["text"])
        try:
            reply = model.generate(messages)
        except Exception as exc:  # any model failure is reported to the client
            return jsonify(error=str(exc)), 500
        return jsonify(response=reply)

    app.register_error_handler(404, _not_found)
    app.register_error_handler(405, _not_found)
    return app


def main(argv=None):
    """Serve the translation API, by default on every interface at port 8088."""
    parser = argparse.ArgumentParser(description="Run the translation API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8088)
    parser.add_argument("--model", default=MODEL)
    parser.add_argument("--ollama-url", default=DEFAULT_BASE_URL)
    args = parser.parse_args(argv)
    app = create_app(OllamaChat(model=args.model, base_url=args.ollama_url))
    app.run(host=args.host, port=args.port)