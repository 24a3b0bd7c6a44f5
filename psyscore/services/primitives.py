"""
Primitivas de puntuación: inversión, agregación, redondeo y percentiles.
Funciones puras, sin dependencias externas.
"""
import math
from typing import Iterable, Sequence

from ..models.instrument import SeverityBand

# Abramowitz & Stegun 7.1.26 (error máximo ~1.5e-7)
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def reverse_score(value: float, scale_min: float, scale_max: float) -> float:
    """
    Invierte un reactivo en cualquier escala Likert: min + max - valor.
    - 1-5: reverse_score(2, 1, 5) -> 4
    - 0-4: reverse_score(1, 0, 4) -> 3
    - 1-7: reverse_score(3, 1, 7) -> 5
    """
    return scale_min + scale_max - value


def as_answer(value) -> float | None:
    """Valor numérico de una respuesta; None, texto o booleano cuentan como sin responder."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def total(values: Iterable[float]) -> float:
    return sum(values, 0)


def mean(values: Sequence[float]) -> float:
    """Media aritmética; una lista vacía da 0 (el llamador debe distinguirlo)."""
    if not values:
        return 0
    return total(values) / len(values)


def round_to(value: float, decimals: int = 2) -> float:
    """Redondeo half-up (0.125 -> 0.13), no el redondeo bancario de round()."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def normal_cdf(z: float) -> float:
    """Aproximación de Φ(z) para la normal estándar."""
    sign = -1 if z < 0 else 1
    x = abs(z) / math.sqrt(2)
    t = 1.0 / (1.0 + _P * x)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    y = 1.0 - poly * math.exp(-(x * x))
    return 0.5 * (1.0 + sign * y)


def to_percentile(value: float, pop_mean: float, pop_sd: float) -> int:
    """Percentil poblacional de `value`, acotado a 1..99."""
    z = (value - pop_mean) / pop_sd
    pct = int(math.floor(100 * normal_cdf(z) + 0.5))
    return min(99, max(1, pct))


def percentile_label(pct: float) -> str:
    if pct <= 15:
        return "Low"
    if pct <= 30:
        return "Below Average"
    if pct <= 70:
        return "Average"
    if pct <= 85:
        return "Above Average"
    return "High"


def ordinal_suffix(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def classify(value: float, bands: Sequence[SeverityBand]) -> SeverityBand:
    """
    Banda de severidad que contiene `value`.
    Equivale a la cadena `<= high` de cada banda: los huecos entre bandas
    enteras y los valores fuera de tabla caen en la siguiente banda (o la última).
    """
    for band in bands:
        if value <= band.high:
            return band
    return bands[-1]
