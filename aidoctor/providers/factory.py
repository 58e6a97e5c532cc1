from typing import Dict, Mapping, Optional

from aidoctor.core import config
from aidoctor.core.config import ProviderConfig
from aidoctor.core.errors import ConfigurationError
from aidoctor.providers.anthropic import AnthropicAdapter
from aidoctor.providers.base import ProviderAdapter
from aidoctor.providers.openai import OpenAIAdapter
from aidoctor.providers.perplexity import PerplexityAdapter

_ADAPTERS: Dict[str, ProviderAdapter] = {
    "openai": OpenAIAdapter(),
    "anthropic": AnthropicAdapter(),
    "perplexity": PerplexityAdapter(),
}


def select_provider(requested: Optional[str], configs: Mapping[str, ProviderConfig]) -> ProviderConfig:
    """
    Pick the provider for one request.

    1. an explicitly requested provider wins, even without a credential
       (the adapter reports the missing key when invoked)
    2. otherwise the first of PROVIDER_PRIORITY (openai, anthropic, perplexity)
       whose credential is present. The order is the tie-break between
       several configured providers and callers rely on it.
    3. otherwise a ConfigurationError naming every credential
    """
    # names are already restricted to known providers by ChatRequest
    if requested:
        return configs[requested]

    for name in config.PROVIDER_PRIORITY:
        cfg = configs.get(name)
        if cfg is not None and cfg.credential_present:
            return cfg

    names = " or ".join(configs[n].credential_env for n in config.PROVIDER_PRIORITY if n in configs)
    raise ConfigurationError(
        f"No provider configured. Add {names} to the gateway environment and restart it."
    )


def get_adapter(name: str) -> ProviderAdapter:
    return _ADAPTERS[name]
