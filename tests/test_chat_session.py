# tests/test_chat_session.py
import asyncio
import json
import pytest
import respx
import httpx
from httpx import ASGITransport

from aidoctor.client.fallback import EMERGENCY_ADVICE, analyze_symptoms
from aidoctor.client.session import (
    EMPTY_REPLY,
    FALLBACK_NOTICE,
    GREETING,
    ChatSession,
    SessionState,
)

ENDPOINT = "http://gateway.test/functions/v1/ai-doctor"


def test_initial_state():
    s = ChatSession(ENDPOINT)
    assert s.state is SessionState.IDLE
    assert not s.pending
    assert [(m.role, m.content) for m in s.history] == [("assistant", GREETING)]


@pytest.mark.asyncio
@respx.mock
async def test_live_reply_appended():
    route = respx.post(ENDPOINT).mock(return_value=httpx.Response(200, json={"reply": "Drink water."}))
    notices = []
    s = ChatSession(ENDPOINT, notify=notices.append)

    reply = await s.send("  I have a headache  ")

    assert reply is not None and reply.content == "Drink water."
    assert [(m.role, m.content) for m in s.history][1:] == [
        ("user", "I have a headache"),
        ("assistant", "Drink water."),
    ]
    assert s.state is SessionState.IDLE
    assert notices == []
    # the whole history, greeting first, goes to the gateway as role/content only
    sent = json.loads(route.calls.last.request.content)
    assert sent["messages"] == [
        {"role": "assistant", "content": GREETING},
        {"role": "user", "content": "I have a headache"},
    ]


@pytest.mark.asyncio
@respx.mock
async def test_blank_reply_gets_apology():
    respx.post(ENDPOINT).mock(return_value=httpx.Response(200, json={"reply": ""}))
    s = ChatSession(ENDPOINT)
    reply = await s.send("hello")
    assert reply.content == EMPTY_REPLY


@pytest.mark.asyncio
@respx.mock
async def test_non_success_falls_back_once():
    respx.post(ENDPOINT).mock(return_value=httpx.Response(400, json={"error": "No provider configured."}))
    notices = []
    s = ChatSession(ENDPOINT, notify=notices.append)

    reply = await s.send("I have a fever and a cough")

    assert reply.content == analyze_symptoms("I have a fever and a cough")
    assert len(s.history) == 3
    assert [m.role for m in s.history] == ["assistant", "user", "assistant"]
    assert notices == [FALLBACK_NOTICE]
    assert s.state is SessionState.IDLE


@pytest.mark.asyncio
@respx.mock
async def test_network_error_falls_back():
    respx.post(ENDPOINT).mock(side_effect=httpx.ConnectError("offline"))
    notices = []
    s = ChatSession(ENDPOINT, notify=notices.append)
    reply = await s.send("chest pain when climbing stairs")
    assert reply.content == EMERGENCY_ADVICE
    assert len(notices) == 1


@pytest.mark.asyncio
async def test_blank_input_is_noop():
    s = ChatSession(ENDPOINT)
    assert await s.send("   ") is None
    assert await s.send("") is None
    assert len(s.history) == 1


@pytest.mark.asyncio
async def test_send_while_sending_is_ignored():
    started = asyncio.Event()
    release = asyncio.Event()
    calls = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        started.set()
        await release.wait()
        return httpx.Response(200, json={"reply": "done"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        s = ChatSession(ENDPOINT, client=client)
        first = asyncio.create_task(s.send("first question"))
        await started.wait()
        assert s.pending

        history_before = s.history
        assert await s.send("second question") is None
        assert s.history == history_before

        release.set()
        reply = await first

    assert reply.content == "done"
    assert len(calls) == 1
    assert [m.content for m in s.history][1:] == ["first question", "done"]
    assert not s.pending


@pytest.mark.asyncio
async def test_against_gateway_without_credentials(app):
    # no provider keys: the gateway answers 400 and the session falls back locally
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        notices = []
        s = ChatSession("http://test/functions/v1/ai-doctor", client=client, notify=notices.append)
        reply = await s.send("I feel off today")

    assert reply.content == analyze_symptoms("I feel off today")
    assert notices == [FALLBACK_NOTICE]


def test_message_ids_are_unique():
    s = ChatSession(ENDPOINT)
    ids = {m.id for m in s.history}
    assert len(ids) == len(s.history)
