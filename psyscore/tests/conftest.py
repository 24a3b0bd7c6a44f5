# psyscore/tests/conftest.py
"""
Fixtures para pruebas del motor y end-to-end con FastAPI + pytest-asyncio.
El motor se construye una vez por sesión (registro inmutable).
"""
import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

# ---- entorno de prueba (debe setearse ANTES de importar psyscore.main) ----
os.environ.setdefault("STRICT_RANGES", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# ---- asegurar imports absolutos 'psyscore.*' ----
ROOT_DIR = Path(__file__).resolve().parents[2]   # raíz del repo
sys.path.insert(0, str(ROOT_DIR))

from psyscore.main import app  # noqa: E402
from psyscore.services.scoring import build_engine  # noqa: E402


@pytest.fixture(scope="session")
def engine():
    return build_engine()


@pytest.fixture(scope="session")
def registry(engine):
    return engine.registry


@pytest_asyncio.fixture
async def async_client():
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
