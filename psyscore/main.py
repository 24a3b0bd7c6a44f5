# psyscore/main.py
"""
App FastAPI: CORS, lifespan (construye el motor una vez), routers + middleware de trazas.
"""
import logging
import time

from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv(), override=False)

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .routes import instruments, scores
from .services.scoring import build_engine
from .telemetry.logging import setup_logging

setup_logging(settings.LOG_LEVEL)
http_logger = logging.getLogger("psyscore.http")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # registro inmutable, compartido por todas las peticiones
    app.state.engine = build_engine()
    http_logger.info(f"Motor listo con {len(app.state.engine.scorers)} instrumentos")
    yield
    app.state.engine = None

app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)

# ---------------- CORS ----------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- Middleware de trazas ----------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        http_logger.exception("%s %s falló tras %.1f ms", request.method, request.url.path,
                              (time.perf_counter() - start) * 1000)
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.1f}"
    http_logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path,
                     response.status_code, elapsed_ms)
    return response

# ---------------- Healthcheck ----------------
@app.get("/health", tags=["misc"])
async def health():
    return {"ok": True}

# ---------------- Routers ----------------
app.include_router(instruments.router, prefix="/instruments", tags=["instruments"])
app.include_router(scores.router,      prefix="/scores",      tags=["scores"])
