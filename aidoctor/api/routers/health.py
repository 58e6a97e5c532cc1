from fastapi import APIRouter, Response

from aidoctor.core.config import CORS_HEADERS

router = APIRouter(tags=["meta"])

# liveness only; does not touch any provider
@router.get("/health")
def health(response: Response) -> dict:
    response.headers.update(CORS_HEADERS)
    return {"status": "ok", "service": "ai-doctor"}
