"""
Puntuación ASRS v1.1.
- Parte A: cada reactivo "cumple" si alcanza su umbral (1-3: >=2, 4-6: >=3).
  Tamizaje positivo con 4 o más de 6.
- Parte B y total (0-72) se reportan pero no cambian el tamizaje.
- Sin responder = 0.
"""
from ..models.score import FacetScore, ScoreResult
from .primitives import total
from .scoring_base import InstrumentScorer
from .typing import Answers

DEFAULT_THRESHOLD = 2


class ASRSScorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        scale_max = d.scale.max
        part_a = d.items_in("A")
        part_b = d.items_in("B")

        met = sum(
            1 for i in part_a
            if self.raw_or(answers, i) >= (i.threshold if i.threshold is not None else DEFAULT_THRESHOLD)
        )
        required = int(d.cutoff or 4)
        positive = met >= required

        part_b_sum = total(self.raw_or(answers, i) for i in part_b)
        raw = total(self.raw_or(answers, i) for i in d.items)
        max_score = len(d.items) * scale_max

        facets = {
            "Part A Screen": FacetScore(
                score=met,
                max_score=len(part_a),
                label="Positive: further evaluation recommended" if positive else "Negative",
            ),
            "Part B Severity": FacetScore(
                score=part_b_sum,
                max_score=len(part_b) * scale_max,
                label="Symptom severity supplement",
            ),
        }
        for domain in d.domains():
            items = d.items_in_domain(domain)
            facets[domain] = FacetScore(
                score=total(self.raw_or(answers, i) for i in items),
                max_score=len(items) * scale_max,
                label=domain,
            )

        return ScoreResult(
            instrument=d.name,
            raw_score=raw,
            max_score=max_score,
            severity="positive" if positive else "negative",
            facets=facets,
            interpretation=(
                f"ADHD screening: {'Positive' if positive else 'Negative'} "
                f"({met}/{len(part_a)} Part A items above threshold; >={required} required). "
                f"Total symptom score: {raw}/{max_score}."
            ),
        )
