"""
Tipos compartidos por los servicios de puntuación.
"""
from typing import Mapping

# id de reactivo -> respuesta cruda; el motor solo lee, nunca muta
Answers = Mapping[str, float]
