"""
Puntuación PC-PTSD-5: suma 0-5 (sin responder = 0), positivo con >= 3.
"""
from ..models.score import ScoreResult
from .primitives import total
from .scoring_base import InstrumentScorer
from .typing import Answers

HIGH_SPECIFICITY = 4


class PCPTSD5Scorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        raw = total(self.raw_or(answers, i) for i in d.items)
        cutoff = int(d.cutoff or 3)
        positive = raw >= cutoff

        text = (
            f"PTSD screening: {'Positive' if positive else 'Negative'} "
            f"({raw}/{len(d.items)} items endorsed; >={cutoff} required for positive screen)."
        )
        if positive:
            text += " Further evaluation for PTSD is recommended."
        if raw >= HIGH_SPECIFICITY:
            text += f" A score of {HIGH_SPECIFICITY} or higher has higher specificity for PTSD."

        return ScoreResult(
            instrument=d.name,
            raw_score=raw,
            max_score=len(d.items) * d.scale.max,
            severity="positive" if positive else "negative",
            interpretation=text,
        )
