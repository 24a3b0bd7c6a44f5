"""
Puntuación PSS-10.
Suma 0-40 tras invertir 4, 5, 7 y 8 con la escala 0-4 (4 - valor).
Sin responder = 0, antes de invertir (un 4 invertido cuenta como 4).
"""
from ..models.score import ScoreResult
from .primitives import classify, total
from .scoring_base import InstrumentScorer
from .typing import Answers


class PSS10Scorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        raw = total(self.value_or(answers, i, 0) for i in d.items)
        max_score = len(d.items) * d.scale.max
        band = classify(raw, d.bands)
        return ScoreResult(
            instrument=d.name,
            raw_score=raw,
            max_score=max_score,
            severity=band.severity,
            interpretation=f"{band.label} (score: {raw}/{max_score}).",
        )
