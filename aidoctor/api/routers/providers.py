from fastapi import APIRouter, Response

from aidoctor.core import config
from aidoctor.core.config import CORS_HEADERS

router = APIRouter(tags=["providers"])

# enumerate providers in selection order; exposes presence only, never the keys
@router.get("/providers")
def list_providers(response: Response) -> dict:
    response.headers.update(CORS_HEADERS)
    configs = config.load_provider_configs()
    return {
        "priority": list(config.PROVIDER_PRIORITY),
        "providers": [
            {
                "name": cfg.name,
                "credential": cfg.credential_env,
                "configured": cfg.credential_present,
                "default_model": cfg.default_model,
            }
            for cfg in configs.values()
        ],
    }
