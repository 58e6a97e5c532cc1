import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from aidoctor.core.config import CORS_HEADERS
from aidoctor.core.errors import GatewayError, InvalidRequestError, MethodNotAllowedError
from aidoctor.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from aidoctor.services.chat_service import generate_reply

router = APIRouter(tags=["gateway"])
logger = logging.getLogger(__name__)

GATEWAY_PATH = "/functions/v1/ai-doctor"


def _json(status_code: int, body: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)


async def _read_body(request: Request) -> Dict[str, Any]:
    # malformed JSON becomes {} so it fails validation instead of crashing
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else {}
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def parse_chat_request(body: Dict[str, Any]) -> ChatRequest:
    messages = body.get("messages")
    if not isinstance(messages, list) or not messages:
        raise InvalidRequestError("Missing messages array")

    try:
        return ChatRequest(
            messages=messages,
            provider=body.get("provider") or None,
            model=body.get("model") or None,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidRequestError(f"Invalid request: {problems}") from e


# registered for every method so the gateway answers 405 itself, with CORS headers
@router.api_route(GATEWAY_PATH, methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def ai_doctor(request: Request):
    if request.method == "OPTIONS":
        return PlainTextResponse("ok", headers=CORS_HEADERS)

    try:
        if request.method != "POST":
            raise MethodNotAllowedError("Method not allowed")

        req = parse_chat_request(await _read_body(request))
        reply = await generate_reply(req)
        return _json(200, ChatResponse(reply=reply).model_dump())
    except GatewayError as e:
        if e.status_code >= 500:
            logger.error("gateway error %s: %s", e.status_code, e)
        else:
            logger.warning("gateway rejected request %s: %s", e.status_code, e)
        return _json(e.status_code, ErrorResponse(error=str(e)).model_dump())
    except Exception as e:
        logger.exception("unexpected gateway failure: %s", e)
        return _json(500, ErrorResponse(error=str(e) or e.__class__.__name__).model_dump())


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # methods outside the route's list (TRACE, CONNECT, ...) are rejected by routing itself
    if exc.status_code == 405 and request.url.path == GATEWAY_PATH:
        logger.warning("gateway rejected request 405: %s", request.method)
        return _json(405, ErrorResponse(error="Method not allowed").model_dump())
    return await http_exception_handler(request, exc)
