"""
Respuesta de crisis para el reactivo 9 del PHQ-9.
- Mensaje breve, sin detalles de autolesión.
- Recursos de atención inmediata (EE. UU.); separado para internacionalizar.
"""
from typing import Final

from ..models.score import CrisisResource, CrisisResponse

MESSAGE: Final[str] = (
    "If you are having thoughts of hurting yourself, please reach out for help immediately."
)

RESOURCES: Final[tuple[tuple[str, str], ...]] = (
    ("988 Suicide & Crisis Lifeline", "Call or text 988"),
    ("Crisis Text Line", "Text HOME to 741741"),
    ("Emergency Services", "Call 911"),
)


def crisis_response() -> CrisisResponse:
    return CrisisResponse(
        flagged=True,
        message=MESSAGE,
        resources=[CrisisResource(name=n, contact=c) for n, c in RESOURCES],
    )
