"""
Contrato común de los scorers.
Cada scorer recibe su definición de instrumento (inyectada) y convierte
un conjunto de respuestas en un ScoreResult. Sin estado, sin E/S.
"""
from ..models.instrument import InstrumentDefinition, Item
from ..models.score import FacetScore
from .primitives import as_answer, mean, reverse_score, round_to
from .typing import Answers


class InstrumentScorer:
    def __init__(self, definition: InstrumentDefinition) -> None:
        self.definition = definition

    @property
    def name(self) -> str:
        return self.definition.name

    def applies_to(self, answers: Answers) -> bool:
        """Hay al menos una respuesta con el prefijo del instrumento."""
        return any(self.definition.owns(k) for k in answers)

    def score(self, answers: Answers):
        raise NotImplementedError

    # ---- helpers compartidos ----
    def answer(self, answers: Answers, item: Item) -> float | None:
        """Respuesta numérica del reactivo, o None si falta o no es un número."""
        return as_answer(answers.get(item.id))

    def raw_or(self, answers: Answers, item: Item, default: float = 0) -> float:
        value = self.answer(answers, item)
        return default if value is None else value

    def scored(self, item: Item, raw: float) -> float:
        scale = self.definition.scale
        return reverse_score(raw, scale.min, scale.max) if item.reversed else raw

    def value_or(self, answers: Answers, item: Item, default: float) -> float:
        """Política 'valor por defecto': el reactivo sin responder vale `default` (antes de invertir)."""
        return self.scored(item, self.raw_or(answers, item, default))

    def answered_values(self, answers: Answers, items) -> list[float]:
        """Política 'excluir': solo los reactivos respondidos entran en la media."""
        values = (self.answer(answers, i) for i in items)
        return [self.scored(i, v) for i, v in zip(items, values) if v is not None]

    def mean_facet(self, answers: Answers, items, label: str) -> FacetScore:
        values = self.answered_values(answers, items)
        return FacetScore(
            score=round_to(mean(values)),
            max_score=self.definition.scale.max,
            label=label,
            answered=len(values),
        )
