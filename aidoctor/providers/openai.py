from typing import Any, Dict, List, Sequence, Tuple

from aidoctor.agents.medical import load_system_prompt
from aidoctor.core import config
from aidoctor.providers.base import Headers, Payload, ProviderAdapter
from aidoctor.schemas.chat import ChatMessage


class ChatCompletionsAdapter(ProviderAdapter):
    """
    OpenAI-compatible chat-completions wire format.
    The system prompt goes first as a role="system" message; caller messages follow verbatim.
    Reply lives at choices[0].message.content.
    """

    def _sampling(self) -> Dict[str, Any]:
        return {
            "temperature": config.TEMPERATURE,
            "top_p": config.TOP_P,
            "max_tokens": config.MAX_TOKENS,
        }

    def build_request(
        self,
        messages: Sequence[ChatMessage],
        *,
        model: str,
        credential: str,
    ) -> Tuple[Headers, Payload]:
        wire: List[Dict[str, str]] = [{"role": "system", "content": load_system_prompt()}]
        wire.extend({"role": m.role, "content": m.content} for m in messages)
        headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }
        payload: Payload = {"model": model, "messages": wire}
        payload.update(self._sampling())
        return headers, payload

    def extract_reply(self, data: Any) -> str:
        try:
            reply = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return reply if isinstance(reply, str) else ""


class OpenAIAdapter(ChatCompletionsAdapter):
    name = "openai"

    def _sampling(self) -> Dict[str, Any]:
        opts = super()._sampling()
        # pin penalties to neutral
        opts["frequency_penalty"] = 0
        opts["presence_penalty"] = 0
        return opts
