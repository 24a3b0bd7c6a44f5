# psyscore/tests/test_primitives.py
import pytest

from psyscore.instruments import phq9
from psyscore.services.primitives import (
    as_answer,
    classify,
    mean,
    normal_cdf,
    ordinal_suffix,
    percentile_label,
    reverse_score,
    round_to,
    to_percentile,
    total,
)


@pytest.mark.parametrize("value,lo,hi,expected", [
    (2, 1, 5, 4),
    (1, 0, 4, 3),
    (3, 1, 7, 5),
    (5, 1, 6, 2),
])
def test_reverse_score(value, lo, hi, expected):
    assert reverse_score(value, lo, hi) == expected


def test_reverse_score_twice_is_identity():
    for v in range(1, 8):
        assert reverse_score(reverse_score(v, 1, 7), 1, 7) == v


def test_total_and_mean():
    assert total([]) == 0
    assert total([1, 2, 3]) == 6
    assert mean([1, 2]) == 1.5
    # lista vacía -> 0, no error
    assert mean([]) == 0


@pytest.mark.parametrize("value, expected", [
    (3, 3), (2.5, 2.5), (0, 0),
    (None, None), ("2", None), (True, None), (False, None),
])
def test_as_answer(value, expected):
    assert as_answer(value) == expected


def test_round_to_is_half_up():
    assert round_to(0.125) == 0.13
    assert round_to(2.5, 0) == 3.0
    assert round_to(3.14159) == 3.14
    assert round_to(-0.125) == -0.12


def test_normal_cdf_reference_values():
    assert normal_cdf(0) == pytest.approx(0.5, abs=1e-7)
    assert normal_cdf(1.96) == pytest.approx(0.9750021, abs=1e-6)
    assert normal_cdf(-1) == pytest.approx(0.1586553, abs=1e-6)


def test_normal_cdf_is_symmetric():
    for z in (0.3, 1.0, 2.2):
        assert normal_cdf(z) + normal_cdf(-z) == pytest.approx(1.0, abs=1e-9)


def test_to_percentile_and_clamp():
    assert to_percentile(3.25, 3.25, 0.73) == 50
    assert to_percentile(4.0, 3.0, 1.0) == 84
    assert to_percentile(5.0, 2.85, 0.78) == 99
    assert to_percentile(1.0, 3.25, 0.73) == 1


@pytest.mark.parametrize("pct,label", [
    (1, "Low"), (15, "Low"),
    (16, "Below Average"), (30, "Below Average"),
    (31, "Average"), (70, "Average"),
    (71, "Above Average"), (85, "Above Average"),
    (86, "High"), (99, "High"),
])
def test_percentile_label_boundaries(pct, label):
    assert percentile_label(pct) == label


@pytest.mark.parametrize("n,suffix", [
    (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
    (11, "th"), (12, "th"), (13, "th"),
    (21, "st"), (22, "nd"), (23, "rd"), (111, "th"),
])
def test_ordinal_suffix(n, suffix):
    assert ordinal_suffix(n) == suffix


def test_classify_uses_upper_bounds():
    bands = phq9.BANDS
    assert classify(0, bands).severity == "minimal"
    assert classify(4, bands).severity == "minimal"
    assert classify(5, bands).severity == "mild"
    assert classify(27, bands).severity == "severe"
    # fuera de tabla -> última banda
    assert classify(40, bands).severity == "severe"
