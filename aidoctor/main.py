# aidoctor/main.py
import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from aidoctor.core import config
from aidoctor.api.routers.health import router as health_router
from aidoctor.api.routers.providers import router as providers_router
from aidoctor.api.routers.gateway import router as gateway_router, method_not_allowed_handler


def create_app() -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title="AI Doctor Gateway", version="0.1.0")

    # no CORSMiddleware: the gateway route answers preflights and sets the CORS headers itself
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(providers_router)
    app.include_router(gateway_router)

    return app


app = create_app()
