# tests/conftest.py
import os
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env before the app (and load_dotenv) is imported
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# IMPORTANT: import the app after envs are set
from aidoctor.main import app as gateway_app

CREDENTIAL_ENVS = ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "PERPLEXITY_API_KEY")


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch):
    # a developer .env must not leak provider keys into tests
    for name in CREDENTIAL_ENVS:
        monkeypatch.delenv(name, raising=False)


@pytest_asyncio.fixture
async def app():
    return gateway_app

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
