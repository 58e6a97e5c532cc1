from typing import Any, Dict, List, Sequence, Tuple

from aidoctor.agents.medical import load_system_prompt
from aidoctor.core import config
from aidoctor.providers.base import Headers, Payload, ProviderAdapter
from aidoctor.schemas.chat import ChatMessage


def _text_block(text: str) -> Dict[str, str]:
    return {"type": "text", "text": text}


class AnthropicAdapter(ProviderAdapter):
    """
    Anthropic messages API.
    - the system prompt travels in the top-level "system" field, not as a message
    - every message content is a list of content blocks; only text blocks are sent here
    - reply lives at content[0].text
    """

    name = "anthropic"

    def build_request(
        self,
        messages: Sequence[ChatMessage],
        *,
        model: str,
        credential: str,
    ) -> Tuple[Headers, Payload]:
        system_parts = [load_system_prompt()]
        wire: List[Dict[str, Any]] = []
        for m in messages:
            # the messages API has no system role
            if m.role == "system":
                system_parts.append(m.content)
                continue
            wire.append({"role": m.role, "content": [_text_block(m.content)]})

        headers = {
            "x-api-key": credential,
            "anthropic-version": config.ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }
        payload: Payload = {
            "model": model,
            "system": "\n\n".join(system_parts),
            "messages": wire,
            "temperature": config.TEMPERATURE,
            "max_tokens": config.MAX_TOKENS,
        }
        return headers, payload

    def extract_reply(self, data: Any) -> str:
        try:
            reply = data["content"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return ""
        return reply if isinstance(reply, str) else ""
