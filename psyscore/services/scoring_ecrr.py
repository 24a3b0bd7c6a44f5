"""
Puntuación ECR-R.
- Media de Ansiedad y de Evitación (18 reactivos c/u), invirtiendo con 8 - valor.
- Solo promedian los reactivos respondidos.
- Estilo por corte 3.5 en ambas dimensiones:
  bajo/bajo Secure, alta ansiedad Anxious-Preoccupied,
  alta evitación Dismissive-Avoidant, ambas altas Fearful-Avoidant.
"""
from ..models.score import ScoreResult
from .primitives import round_to
from .scoring_base import InstrumentScorer
from .typing import Answers

ANXIETY = "Anxiety"
AVOIDANCE = "Avoidance"
DEFAULT_CUTOFF = 3.5

# (ansiedad alta, evitación alta) -> (estilo, severidad)
STYLES = {
    (False, False): ("Secure", "low"),
    (True, False): ("Anxious-Preoccupied", "moderate"),
    (False, True): ("Dismissive-Avoidant", "moderate"),
    (True, True): ("Fearful-Avoidant", "high"),
}


def attachment_style(anxiety: float, avoidance: float, cutoff: float = DEFAULT_CUTOFF) -> tuple[str, str]:
    return STYLES[(anxiety >= cutoff, avoidance >= cutoff)]


class ECRRScorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        cutoff = d.cutoff if d.cutoff is not None else DEFAULT_CUTOFF

        anxiety = self.mean_facet(answers, d.items_in(ANXIETY), ANXIETY)
        avoidance = self.mean_facet(answers, d.items_in(AVOIDANCE), AVOIDANCE)
        high_anx = anxiety.score >= cutoff
        high_avoid = avoidance.score >= cutoff
        style, severity = attachment_style(anxiety.score, avoidance.score, cutoff)

        facets = {
            ANXIETY: anxiety.model_copy(update={"label": "Elevated" if high_anx else "Low"}),
            AVOIDANCE: avoidance.model_copy(update={"label": "Elevated" if high_avoid else "Low"}),
        }
        scale_max = d.scale.max
        return ScoreResult(
            instrument=d.name,
            raw_score=round_to((anxiety.score + avoidance.score) / 2),
            max_score=scale_max,
            severity=severity,
            facets=facets,
            interpretation=(
                f"Attachment style: {style}. "
                f"Anxiety: {anxiety.score}/{scale_max} "
                f"({'above' if high_anx else 'below'} cutoff of {cutoff}). "
                f"Avoidance: {avoidance.score}/{scale_max} "
                f"({'above' if high_avoid else 'below'} cutoff of {cutoff})."
            ),
        )
