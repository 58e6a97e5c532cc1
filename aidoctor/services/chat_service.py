import logging

from aidoctor.core import config
from aidoctor.providers.factory import get_adapter, select_provider
from aidoctor.schemas.chat import ChatRequest

logger = logging.getLogger(__name__)


async def generate_reply(req: ChatRequest) -> str:
    # provider table is rebuilt per call: credentials may change between deployments
    configs = config.load_provider_configs()
    cfg = select_provider(req.provider, configs)
    adapter = get_adapter(cfg.name)

    logger.info(
        "routing %d message(s) to %s (model=%s, explicit=%s)",
        len(req.messages),
        cfg.name,
        req.model or cfg.default_model,
        req.provider is not None,
    )
    return await adapter.invoke(cfg, req.messages, model=req.model)
