"""
Gateway behaviour against a fake completion client.
"""

import httpx
import openai
import pytest

from learning_platform.config import OPENAI_KEY_PLACEHOLDER
from learning_platform.services.ai_service import (
    SYSTEM_PROMPT, AIGateway, GatewayErrorKind, is_configured,
)

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


@pytest.mark.parametrize("key,expected", [
    ("", False),
    (None, False),
    (OPENAI_KEY_PLACEHOLDER, False),
    ("sk-anything", True),
    ("not-even-an-sk-key", True),
])
def test_is_configured_only_checks_presence(key, expected) -> None:
    assert is_configured(key) is expected


@pytest.mark.parametrize("key", ["", OPENAI_KEY_PLACEHOLDER])
async def test_missing_key_fails_without_calling_upstream(key, fake_openai) -> None:
    client = fake_openai()
    gateway = AIGateway(api_key=key, client=client)

    result = await gateway.generate("what is rain?")

    assert not result.ok
    assert result.error.kind is GatewayErrorKind.NOT_CONFIGURED
    assert client.completions.calls == []


async def test_success_returns_text_verbatim(fake_openai, make_completion) -> None:
    text = "  Rain comes from clouds! ☁️\n\nKeep asking questions!  "
    client = fake_openai(response=make_completion(text))
    gateway = AIGateway(api_key="sk-test", client=client, model="gpt-test", max_tokens=300, temperature=0.7)

    result = await gateway.generate("what is rain?")

    assert result.ok
    assert result.answer == text
    [call] = client.completions.calls
    assert call["model"] == "gpt-test"
    assert call["max_tokens"] == 300
    assert call["temperature"] == 0.7
    assert call["messages"] == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "what is rain?"},
    ]


@pytest.mark.parametrize("error", [
    openai.APIConnectionError(request=_REQUEST),
    openai.APITimeoutError(request=_REQUEST),
    openai.InternalServerError(
        "server exploded", response=httpx.Response(500, request=_REQUEST), body=None,
    ),
    openai.AuthenticationError(
        "bad key", response=httpx.Response(401, request=_REQUEST), body=None,
    ),
])
async def test_transport_errors_become_upstream_errors(error, fake_openai) -> None:
    gateway = AIGateway(api_key="sk-test", client=fake_openai(error=error))

    result = await gateway.generate("what is rain?")

    assert not result.ok
    assert result.error.kind is GatewayErrorKind.UPSTREAM
    assert result.error.detail


async def test_status_error_detail_includes_status(fake_openai) -> None:
    error = openai.InternalServerError(
        "server exploded", response=httpx.Response(503, request=_REQUEST), body=None,
    )
    gateway = AIGateway(api_key="sk-test", client=fake_openai(error=error))

    result = await gateway.generate("q")

    assert "503" in result.error.detail


@pytest.mark.parametrize("response", [
    object(),
    pytest.param("make-empty-choices", id="empty-choices"),
    pytest.param("make-none-content", id="none-content"),
])
async def test_malformed_body_becomes_upstream_error(response, fake_openai, make_completion) -> None:
    if response == "make-empty-choices":
        response = make_completion("x")
        response.choices = []
    elif response == "make-none-content":
        response = make_completion(None)
    gateway = AIGateway(api_key="sk-test", client=fake_openai(response=response))

    result = await gateway.generate("q")

    assert result.error.kind is GatewayErrorKind.UPSTREAM
    assert "malformed" in result.error.detail
