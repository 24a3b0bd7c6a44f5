"""
Puntuación PVQ-21 (Schwartz, 2003).
1. Media cruda por valor (solo reactivos respondidos).
2. Media personal (MRAT) de todos los reactivos respondidos.
3. Centrado = media del valor - MRAT; > 0.5 alta prioridad, < -0.5 menor prioridad.
Se reportan los 3 valores más altos (centrado > 0) y los 3 más bajos (< 0).
"""
from ..models.score import FacetScore, ScoreResult
from .primitives import mean, round_to
from .scoring_base import InstrumentScorer
from .typing import Answers

PRIORITY_BAND = 0.5


def priority_label(centered: float, band: float = PRIORITY_BAND) -> str:
    if centered > band:
        return "High priority"
    if centered < -band:
        return "Lower priority"
    return "Moderate priority"


class PVQScorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition

        raw_means = {}
        answered = {}
        all_values: list[float] = []
        for value in d.groups():
            values = self.answered_values(answers, d.items_in(value))
            raw_means[value] = mean(values)
            answered[value] = len(values)
            all_values.extend(values)
        grand_mean = mean(all_values)

        facets = {}
        centered = []
        for value, raw_mean in raw_means.items():
            c = round_to(raw_mean - grand_mean)
            centered.append((value, c))
            facets[value] = FacetScore(
                score=c,
                max_score=d.scale.max,
                label=priority_label(c),
                answered=answered[value],
            )

        ranked = sorted(centered, key=lambda v: v[1], reverse=True)
        top = [name for name, c in ranked if c > 0][:3]
        bottom = [name for name, c in ranked if c < 0][-3:]

        return ScoreResult(
            instrument=d.name,
            raw_score=round_to(grand_mean),
            max_score=d.scale.max,
            severity="none",
            facets=facets,
            interpretation=(
                "Values profile (centered scores; positive = relatively more important, "
                "negative = relatively less important). "
                f"Top values: {', '.join(top) if top else '(none above mean)'}. "
                f"Lower-priority values: {', '.join(bottom) if bottom else '(none below mean)'}."
            ),
        )
