from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple
from uuid import uuid4

import httpx

from aidoctor.client.fallback import analyze_symptoms
from aidoctor.core import config

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I'm your AI health assistant. Tell me your symptoms and goals, and I'll suggest "
    "next steps. This is not medical advice."
)
EMPTY_REPLY = "Sorry, I couldn't generate a response."
FALLBACK_NOTICE = "Falling back to local suggestions. Connect an API key for real LLM replies."


class SessionState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"


@dataclass(frozen=True)
class SessionMessage:
    role: str
    content: str
    id: str = field(default_factory=lambda: str(uuid4()))


def _log_notice(message: str) -> None:
    logger.warning(message)


class ChatSession:
    """
    Client side of one chat view.

    Two states: IDLE and SENDING. At most one exchange is in flight; a send()
    while SENDING is ignored (not queued, the running call is not cancelled).
    Every accepted send() appends one user message and then exactly one
    assistant message, either the gateway reply or the local fallback.

    `client` is an optional shared httpx.AsyncClient (tests inject a mocked
    transport through it); without one a short-lived client is opened per call.
    `notify` receives the non-blocking "using local suggestions" notice.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        notify: Callable[[str], None] | None = None,
        analyzer: Callable[[str], str] = analyze_symptoms,
    ) -> None:
        self._endpoint = endpoint or config.GATEWAY_URL
        self._client = client
        self._notify = notify or _log_notice
        self._analyzer = analyzer
        self._history: List[SessionMessage] = [SessionMessage(role="assistant", content=GREETING)]
        self._state = SessionState.IDLE

    @property
    def history(self) -> Tuple[SessionMessage, ...]:
        return tuple(self._history)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def pending(self) -> bool:
        return self._state is SessionState.SENDING

    async def send(self, text: str) -> Optional[SessionMessage]:
        """Submit one user turn. Returns the appended assistant message, or None if ignored."""
        text = (text or "").strip()
        if not text:
            return None
        if self.pending:
            logger.debug("send ignored: an exchange is already in flight")
            return None

        self._history.append(SessionMessage(role="user", content=text))
        self._state = SessionState.SENDING
        try:
            try:
                reply_text = await self._request_reply()
            except (httpx.HTTPError, ValueError) as e:
                logger.warning("gateway call failed, using local analyzer: %s", e)
                self._notify(FALLBACK_NOTICE)
                reply_text = self._analyzer(text)

            reply = SessionMessage(role="assistant", content=reply_text)
            self._history.append(reply)
            return reply
        finally:
            self._state = SessionState.IDLE

    def _payload(self) -> dict:
        return {"messages": [{"role": m.role, "content": m.content} for m in self._history]}

    async def _request_reply(self) -> str:
        if self._client is not None:
            r = await self._client.post(self._endpoint, json=self._payload())
        else:
            timeout = httpx.Timeout(config.GATEWAY_TIMEOUT_S, connect=10.0)
            async with httpx.AsyncClient(timeout=timeout) as client:
                r = await client.post(self._endpoint, json=self._payload())
        r.raise_for_status()
        data = r.json()
        reply = data.get("reply") if isinstance(data, dict) else None
        return reply if isinstance(reply, str) and reply else EMPTY_REPLY
