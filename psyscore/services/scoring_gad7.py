"""
Puntuación GAD-7: suma 0-21 (sin responder = 0).
Bandas 0-4 / 5-9 / 10-14 / 15-21.
"""
from ..models.score import ScoreResult
from .primitives import classify, total
from .scoring_base import InstrumentScorer
from .typing import Answers


class GAD7Scorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        raw = total(self.raw_or(answers, i) for i in d.items)
        max_score = len(d.items) * d.scale.max
        band = classify(raw, d.bands)
        return ScoreResult(
            instrument=d.name,
            raw_score=raw,
            max_score=max_score,
            severity=band.severity,
            interpretation=f"{band.label} (score: {raw}/{max_score}).",
        )
