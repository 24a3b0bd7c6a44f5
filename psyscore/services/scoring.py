"""
Orquestador de puntuación.
- Recorre la tabla de scorers (uno por instrumento, en orden de registro).
- Ejecuta un scorer solo si hay al menos una respuesta con su prefijo;
  si no, el instrumento se omite (no se inventa un resultado en cero).
- Devuelve un mapeo nombre visible -> ScoreResult, nuevo en cada llamada.
"""
import logging
from functools import lru_cache

from ..instruments.registry import build_registry
from ..models.instrument import InstrumentRegistry
from ..models.score import ScoreResult
from .risk_engine import find_out_of_range, is_crisis_flagged
from .scoring_ace import ACEScorer
from .scoring_aq10 import AQ10Scorer
from .scoring_asrs import ASRSScorer
from .scoring_base import InstrumentScorer
from .scoring_bfi2 import BFI2Scorer
from .scoring_derssf import DERSSFScorer
from .scoring_ecrr import ECRRScorer
from .scoring_gad7 import GAD7Scorer
from .scoring_pcptsd5 import PCPTSD5Scorer
from .scoring_phq9 import PHQ9Scorer
from .scoring_pss10 import PSS10Scorer
from .scoring_pvq import PVQScorer
from .typing import Answers

logger = logging.getLogger(__name__)

SCORER_CLASSES: dict[str, type[InstrumentScorer]] = {
    "bfi2": BFI2Scorer,
    "ecrr": ECRRScorer,
    "phq9": PHQ9Scorer,
    "gad7": GAD7Scorer,
    "asrs": ASRSScorer,
    "ace": ACEScorer,
    "pss10": PSS10Scorer,
    "pcptsd5": PCPTSD5Scorer,
    "aq10": AQ10Scorer,
    "derssf": DERSSFScorer,
    "pvq": PVQScorer,
}

ScoreSet = dict[str, ScoreResult]


class ScoringEngine:
    def __init__(
        self,
        registry: InstrumentRegistry,
        scorer_classes: dict[str, type[InstrumentScorer]] | None = None,
    ) -> None:
        self.registry = registry
        classes = scorer_classes if scorer_classes is not None else SCORER_CLASSES
        self.scorers: dict[str, InstrumentScorer] = {}
        for definition in registry.instruments:
            cls = classes.get(definition.key)
            if cls is None:
                logger.warning("Instrumento sin scorer registrado: %s", definition.key)
                continue
            self.scorers[definition.key] = cls(definition)

    def scorer(self, key: str) -> InstrumentScorer | None:
        return self.scorers.get(key)

    def score_all(self, answers: Answers) -> ScoreSet:
        for problem in find_out_of_range(answers, self.registry):
            logger.warning("Respuesta inválida %s=%s (%s)", problem["item"], problem["value"], problem["error"])

        results: ScoreSet = {}
        for scorer in self.scorers.values():
            if scorer.applies_to(answers):
                results[scorer.name] = scorer.score(answers)
        logger.debug("Instrumentos puntuados: %s", ", ".join(results) or "(ninguno)")
        return results

    def score_one(self, key: str, answers: Answers) -> ScoreResult | None:
        scorer = self.scorers.get(key)
        return scorer.score(answers) if scorer else None

    def crisis_flagged(self, answers: Answers) -> bool:
        crisis_ids = [item_id for d in self.registry.instruments for item_id in d.crisis_item_ids]
        return is_crisis_flagged(answers, crisis_ids)


def build_engine() -> ScoringEngine:
    return ScoringEngine(build_registry())


@lru_cache(maxsize=1)
def default_engine() -> ScoringEngine:
    """Motor compartido del proceso; el registro es de solo lectura."""
    return build_engine()


def compute_all_scores(answers: Answers, engine: ScoringEngine | None = None) -> ScoreSet:
    return (engine or default_engine()).score_all(answers)
