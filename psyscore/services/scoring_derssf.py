"""
Puntuación DERS-SF.
- Suma por subescala (máx. 15); Awareness se invierte (6 - valor).
- Sin responder = mínimo de escala (1), antes de invertir: en Awareness
  eso cuenta como 5. Distinto de los demás instrumentos (0), se conserva así.
- Total 18-90: <= 36 baja, 37-54 moderada, >= 55 alta dificultad.
"""
from ..models.score import FacetScore, ScoreResult
from .primitives import classify, total
from .scoring_base import InstrumentScorer
from .typing import Answers


class DERSSFScorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        default = d.scale.min

        facets = {}
        grand = 0
        for subscale in d.groups():
            items = d.items_in(subscale)
            subtotal = total(self.value_or(answers, i, default) for i in items)
            facets[subscale] = FacetScore(
                score=subtotal,
                max_score=len(items) * d.scale.max,
                label=subscale,
            )
            grand += subtotal

        max_score = len(d.items) * d.scale.max
        band = classify(grand, d.bands)
        return ScoreResult(
            instrument=d.name,
            raw_score=grand,
            max_score=max_score,
            severity=band.severity,
            facets=facets,
            interpretation=(
                f"{band.label} (total: {grand}/{max_score}). "
                "Subscale scores indicate relative areas of strength and difficulty in emotion regulation."
            ),
        )
