"""
Construcción del registro de instrumentos.
Se llama una vez por proceso (o por prueba) y el resultado se inyecta
en los scorers y en el orquestador.
"""
from ..models.instrument import InstrumentRegistry
from . import ace, aq10, asrs, bfi2, derssf, ecrr, gad7, pcptsd5, phq9, pss10, pvq

MODULES = (bfi2, ecrr, phq9, gad7, asrs, ace, pss10, pcptsd5, aq10, derssf, pvq)


def build_registry() -> InstrumentRegistry:
    return InstrumentRegistry(instruments=tuple(m.definition() for m in MODULES))
