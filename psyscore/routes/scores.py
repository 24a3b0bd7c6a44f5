from fastapi import APIRouter, Depends, HTTPException, status

from ..core.config import settings
from ..core.deps import current_engine
from ..models.score import ScoreRequest, ScoreResult, ScoreSetResponse
from ..services.crisis_resources import crisis_response
from ..services.risk_engine import find_out_of_range, follow_up_instruments
from ..services.scoring import ScoringEngine

router = APIRouter()


def _validate(payload: ScoreRequest, engine: ScoringEngine) -> None:
    if not settings.STRICT_RANGES:
        return
    problems = find_out_of_range(payload.answers, engine.registry)
    if problems:
        raise HTTPException(status_code=422, detail=problems)


@router.post(
    "",
    summary="Puntuar todos los instrumentos con respuestas",
    response_model=ScoreSetResponse,
    response_model_exclude_none=True,
)
async def score_all(payload: ScoreRequest, engine: ScoringEngine = Depends(current_engine)):
    _validate(payload, engine)
    scores = engine.score_all(payload.answers)
    crisis = crisis_response() if engine.crisis_flagged(payload.answers) else None
    return ScoreSetResponse(scores=scores, crisis=crisis, follow_up=follow_up_instruments(scores))


@router.post(
    "/{key}",
    summary="Puntuar un instrumento",
    response_model=ScoreResult,
    response_model_exclude_none=True,
)
async def score_one(key: str, payload: ScoreRequest, engine: ScoringEngine = Depends(current_engine)):
    if engine.scorer(key) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Instrumento no encontrado")
    _validate(payload, engine)
    return engine.score_one(key, payload.answers)
