"""
Dependencias comunes para FastAPI:
- current_engine (motor construido en el lifespan)
- current_registry
"""
from fastapi import Request

from ..models.instrument import InstrumentRegistry
from ..services.scoring import ScoringEngine, default_engine


def current_engine(request: Request) -> ScoringEngine:
    engine = getattr(request.app.state, "engine", None)
    return engine if engine is not None else default_engine()


def current_registry(request: Request) -> InstrumentRegistry:
    return current_engine(request).registry
