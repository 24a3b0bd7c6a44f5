"""
Puntuación ACE: cuenta de reactivos respondidos con >= 1 (sin responder = 0).
0 ninguna, 1-3 baja-moderada, >= 4 alta; además conteo por categoría.
"""
from ..models.score import FacetScore, ScoreResult
from .primitives import classify
from .scoring_base import InstrumentScorer
from .typing import Answers

DESCRIPTIONS = {
    "none": "No reported adverse childhood experiences",
    "moderate": "Some adverse childhood experiences reported",
    "high": "High ACE exposure, associated with significantly elevated health risks",
}


class ACEScorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition

        def endorsed(item) -> int:
            return 1 if self.raw_or(answers, item) >= 1 else 0

        count = sum(endorsed(i) for i in d.items)
        band = classify(count, d.bands)

        facets = {}
        for category in d.groups():
            items = d.items_in(category)
            facets[category] = FacetScore(
                score=sum(endorsed(i) for i in items),
                max_score=len(items),
                label=category,
            )

        return ScoreResult(
            instrument=d.name,
            raw_score=count,
            max_score=len(d.items),
            severity=band.severity,
            facets=facets,
            interpretation=(
                f"ACE score: {count}/{len(d.items)} ({band.label}). "
                f"{DESCRIPTIONS.get(band.severity, band.label)}."
            ),
        )
