# declares the provider contract every adapter implements (build_request / invoke / extract_reply)
# adding a provider means adding one subclass + registering it in factory.py

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence, Tuple

import httpx

from aidoctor.core import config
from aidoctor.core.config import ProviderConfig
from aidoctor.core.errors import ConfigurationError, UpstreamError
from aidoctor.schemas.chat import ChatMessage

logger = logging.getLogger(__name__)

Headers = Dict[str, str]
Payload = Dict[str, Any]


class ProviderAdapter(ABC):
    name: str

    @abstractmethod
    def build_request(
        self,
        messages: Sequence[ChatMessage],
        *,
        model: str,
        credential: str,
    ) -> Tuple[Headers, Payload]:
        """Translate the normalized conversation into this provider's headers and JSON body."""

    @abstractmethod
    def extract_reply(self, data: Any) -> str:
        """Pull the reply text out of a decoded response. Unexpected shapes yield ""."""

    async def invoke(
        self,
        cfg: ProviderConfig,
        messages: Sequence[ChatMessage],
        *,
        model: str | None = None,
    ) -> str:
        if not cfg.credential:
            raise ConfigurationError(f"{cfg.credential_env} not set")

        headers, payload = self.build_request(
            messages,
            model=model or cfg.default_model,
            credential=cfg.credential,
        )
        async with httpx.AsyncClient(timeout=config.UPSTREAM_TIMEOUT_S) as client:
            r = await client.post(cfg.endpoint, headers=headers, json=payload)

        if not r.is_success:
            logger.warning("%s returned %s", cfg.label, r.status_code)
            raise UpstreamError(cfg.label, r.text)
        return self.extract_reply(r.json())
