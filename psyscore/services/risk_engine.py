"""
Motor de riesgo: reglas transversales sobre respuestas y resultados.
- Bandera de crisis: independiente de la severidad total del PHQ-9.
- Detección de respuestas fuera de rango (el motor no las rechaza).
- Instrumentos que ameritan seguimiento profesional.
"""
from typing import Iterable, Mapping

from ..models.instrument import InstrumentRegistry
from ..models.score import ScoreResult
from .primitives import as_answer
from .typing import Answers

CRISIS_ITEMS = ("phq9_09",)

FOLLOW_UP_SEVERITIES = frozenset({"moderate", "moderate_severe", "severe", "high", "positive"})


def is_crisis_flagged(answers: Answers, item_ids: Iterable[str] = CRISIS_ITEMS) -> bool:
    """
    True si cualquier reactivo de crisis se respondió con >= 1.
    Sin responder (o con un valor no numérico) no es crisis.
    """
    return any((as_answer(answers.get(item_id)) or 0) >= 1 for item_id in item_ids)


def find_out_of_range(answers: Answers, registry: InstrumentRegistry) -> list[dict]:
    """
    Problemas de rango en el orden de las respuestas:
    - reactivo desconocido (ningún instrumento lo define)
    - valor no numérico (se puntúa como sin responder)
    - valor fuera de [min, max] de la escala del instrumento
    """
    problems = []
    for item_id, value in answers.items():
        if registry.find_item(item_id) is None:
            problems.append({"item": item_id, "value": value, "error": "unknown_item"})
            continue
        if as_answer(value) is None:
            problems.append({"item": item_id, "value": value, "error": "invalid_value"})
            continue
        scale = registry.owner_of(item_id).scale
        if not scale.min <= value <= scale.max:
            problems.append({
                "item": item_id,
                "value": value,
                "error": "out_of_range",
                "min": scale.min,
                "max": scale.max,
            })
    return problems


def follow_up_instruments(scores: Mapping[str, ScoreResult]) -> list[str]:
    """Instrumentos con severidad moderada o mayor, o tamizaje positivo."""
    return [name for name, result in scores.items() if result.severity in FOLLOW_UP_SEVERITIES]
