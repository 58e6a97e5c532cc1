# centralized configuration loader
# runs load_dotenv() to read .env
# provider credentials are NOT module constants: they are re-read on every gateway call

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _float_env(name: str, default: Optional[float]) -> Optional[float]:
    # a bad value falls back to the default instead of stopping the app at import
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Upstream endpoints
OPENAI_ENDPOINT = os.getenv("OPENAI_ENDPOINT", "https://api.openai.com/v1/chat/completions")
ANTHROPIC_ENDPOINT = os.getenv("ANTHROPIC_ENDPOINT", "https://api.anthropic.com/v1/messages")
PERPLEXITY_ENDPOINT = os.getenv("PERPLEXITY_ENDPOINT", "https://api.perplexity.ai/chat/completions")
ANTHROPIC_VERSION = os.getenv("ANTHROPIC_VERSION", "2023-06-01")

# Default models (a request's "model" field overrides these)
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1-2025-04-14")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
PERPLEXITY_MODEL = os.getenv("PERPLEXITY_MODEL", "llama-3.1-sonar-small-128k-online")

# Sampling is fixed for every provider
TEMPERATURE = 0.2
TOP_P = 0.9
MAX_TOKENS = 800

# unset means the gateway waits on the upstream for as long as it takes
UPSTREAM_TIMEOUT_S: Optional[float] = _float_env("UPSTREAM_TIMEOUT_S", None)

# Client side
GATEWAY_URL = os.getenv("GATEWAY_URL", "http://127.0.0.1:8000/functions/v1/ai-doctor")
GATEWAY_TIMEOUT_S: float = _float_env("GATEWAY_TIMEOUT_S", 60.0)

# sent on every gateway response, preflight included
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

# Selection priority when the caller does not name a provider. Order matters.
PROVIDER_PRIORITY = ("openai", "anthropic", "perplexity")


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    label: str
    credential_env: str
    endpoint: str
    default_model: str
    request_shape: str
    credential: Optional[str] = field(default=None, repr=False)

    @property
    def credential_present(self) -> bool:
        return bool(self.credential)


def _credential(env_name: str) -> Optional[str]:
    value = os.getenv(env_name)
    return value if value else None


def load_provider_configs() -> Dict[str, ProviderConfig]:
    """
    Build the provider table from the current environment.
    Returned in PROVIDER_PRIORITY order. Call once per request, never cache.
    """
    return {
        "openai": ProviderConfig(
            name="openai",
            label="OpenAI",
            credential_env="OPENAI_API_KEY",
            endpoint=OPENAI_ENDPOINT,
            default_model=OPENAI_MODEL,
            request_shape="chat-completions",
            credential=_credential("OPENAI_API_KEY"),
        ),
        "anthropic": ProviderConfig(
            name="anthropic",
            label="Anthropic",
            credential_env="ANTHROPIC_API_KEY",
            endpoint=ANTHROPIC_ENDPOINT,
            default_model=ANTHROPIC_MODEL,
            request_shape="messages",
            credential=_credential("ANTHROPIC_API_KEY"),
        ),
        "perplexity": ProviderConfig(
            name="perplexity",
            label="Perplexity",
            credential_env="PERPLEXITY_API_KEY",
            endpoint=PERPLEXITY_ENDPOINT,
            default_model=PERPLEXITY_MODEL,
            request_shape="chat-completions",
            credential=_credential("PERPLEXITY_API_KEY"),
        ),
    }
