"""Shared test helpers."""

import requests

from ccline.types.input import InputData


def make_input(model_name="claude-sonnet-4-5", current_dir="/tmp", transcript_path="",
               cost=None, context_window=None) -> InputData:
    return InputData(
        model_name=model_name,
        current_dir=current_dir,
        transcript_path=transcript_path,
        cost=cost,
        context_window=context_window,
    )


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise requests.JSONDecodeError("Expecting value", "", 0)
        return self._payload


class RecordingGet:
    """Replacement for requests.get that records calls and replays responses.

    ``responses`` maps URL to a FakeResponse or an exception instance.
    """

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls: list[dict] = []

    def __call__(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        result = self.responses.get(url)
        if result is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def urls(self) -> list[str]:
        return [c["url"] for c in self.calls]


def assistant_record(input_tokens=0, output_tokens=0, cache_read=0, cache_write=0) -> dict:
    return {
        "type": "assistant",
        "uuid": "msg-a",
        "message": {
            "role": "assistant",
            "content": "ok",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "cache_read_input_tokens": cache_read,
                "cache_creation_input_tokens": cache_write,
            },
        },
    }


def user_record(text: str = "hello") -> dict:
    return {"type": "user", "uuid": "msg-u", "message": {"role": "user", "content": text}}
