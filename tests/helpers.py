"""Helpers shared by the test modules."""

import json

import httpx


def make_transport(handler, calls=None):
    """Build an httpx.MockTransport, recording requests in ``calls`` if given."""

    def _handle(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return handler(request)

    return httpx.MockTransport(_handle)


def json_response(payload, status_code=200):
    """Build a JSON httpx.Response."""
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def response_text(response) -> str:
    """Return the single text item of a ToolResponse."""
    assert len(response.content) == 1
    assert response.content[0].type == "text"
    return response.text


def response_json(response):
    """Decode the JSON payload of a ToolResponse."""
    return json.loads(response_text(response))
