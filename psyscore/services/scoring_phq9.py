"""
Puntuación PHQ-9.
- Suma 0-27; reactivo sin responder cuenta 0.
- Bandas: 0-4 mínima, 5-9 leve, 10-14 moderada, 15-19 moderada-severa, 20-27 severa.
- La bandera de crisis (reactivo 9 >= 1) es independiente del total.
"""
from ..models.score import ScoreResult
from .primitives import classify, total
from .risk_engine import is_crisis_flagged
from .scoring_base import InstrumentScorer
from .typing import Answers

CRISIS_NOTE = (
    " Note: Endorsement of suicidal ideation detected (item 9); "
    "crisis resources should be provided."
)


class PHQ9Scorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        raw = total(self.raw_or(answers, i) for i in d.items)
        max_score = len(d.items) * d.scale.max
        band = classify(raw, d.bands)

        note = CRISIS_NOTE if is_crisis_flagged(answers, d.crisis_item_ids) else ""
        return ScoreResult(
            instrument=d.name,
            raw_score=raw,
            max_score=max_score,
            severity=band.severity,
            interpretation=f"{band.label} (score: {raw}/{max_score}).{note}",
        )
