"""
Puntuación AQ-10 (escala 0-3).
- "agree" (1, 7, 8, 10): 1 punto si la respuesta es <= 1.
- "disagree" (resto): 1 punto si la respuesta es >= 2.
- Sin responder = 0 ("Definitely agree"), así que suma en los reactivos "agree".
"""
from ..models.instrument import Item
from ..models.score import ScoreResult
from .scoring_base import InstrumentScorer
from .typing import Answers


def item_point(item: Item, response: float) -> int:
    if item.direction == "agree":
        return 1 if response <= 1 else 0
    return 1 if response >= 2 else 0


class AQ10Scorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        raw = sum(item_point(i, self.raw_or(answers, i)) for i in d.items)
        cutoff = int(d.cutoff or 6)
        positive = raw >= cutoff
        verdict = "Referral recommended" if positive else "Below referral threshold"
        return ScoreResult(
            instrument=d.name,
            raw_score=raw,
            max_score=len(d.items),
            severity="positive" if positive else "negative",
            interpretation=(
                f"Autism spectrum screening: {verdict} "
                f"(score: {raw}/{len(d.items)}; >={cutoff} indicates referral for diagnostic assessment)."
            ),
        )
