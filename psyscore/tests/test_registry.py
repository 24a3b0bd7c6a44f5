# psyscore/tests/test_registry.py
import re

import pytest
from pydantic import ValidationError

EXPECTED = [
    ("bfi2", "BFI-2", 60),
    ("ecrr", "ECR-R", 36),
    ("phq9", "PHQ-9", 9),
    ("gad7", "GAD-7", 7),
    ("asrs", "ASRS", 18),
    ("ace", "ACE", 10),
    ("pss10", "PSS-10", 10),
    ("pcptsd5", "PC-PTSD-5", 5),
    ("aq10", "AQ-10", 10),
    ("derssf", "DERS-SF", 18),
    ("pvq", "Schwartz PVQ", 21),
]


def test_registry_order_and_sizes(registry):
    assert registry.keys == tuple(k for k, _, _ in EXPECTED)
    for key, name, count in EXPECTED:
        d = registry.get(key)
        assert d.name == name
        assert len(d.items) == count


def test_item_ids_carry_prefix_and_sequence(registry):
    for d in registry.instruments:
        for n, item in enumerate(d.items, start=1):
            assert item.id == f"{d.prefix}_{n:02d}"
            assert re.fullmatch(r"[a-z0-9]+_\d{2}", item.id)


def test_only_phq9_item9_is_crisis(registry):
    crisis = [i for d in registry.instruments for i in d.crisis_item_ids]
    assert crisis == ["phq9_09"]


def test_bfi2_structure(registry):
    d = registry.get("bfi2")
    assert d.domains() == ["Extraversion", "Agreeableness", "Conscientiousness", "Neuroticism", "Openness"]
    for domain in d.domains():
        assert len(d.items_in_domain(domain)) == 12
    assert len(d.groups()) == 15
    assert all(len(d.items_in(f)) == 4 for f in d.groups())
    assert [i.reversed for i in d.items[:4]] == [False, True, False, True]
    assert sum(i.reversed for i in d.items) == 30
    assert d.norm_for("Neuroticism").mean == 2.85
    assert d.norm_for("Honesty") is None


def test_ecrr_dimensions_and_reversals(registry):
    d = registry.get("ecrr")
    assert len(d.items_in("Anxiety")) == 18
    assert len(d.items_in("Avoidance")) == 18
    reversed_ids = {i.id for i in d.items if i.reversed}
    assert reversed_ids == {f"ecrr_{n:02d}" for n in (9, 11, 20, 22, 26, 27, 28, 29, 30, 31, 33, 34, 35, 36)}


def test_pss10_reversals(registry):
    d = registry.get("pss10")
    assert [i.id for i in d.items if i.reversed] == ["pss10_04", "pss10_05", "pss10_07", "pss10_08"]


def test_derssf_only_awareness_reversed(registry):
    d = registry.get("derssf")
    assert d.groups() == ["Nonacceptance", "Goals", "Impulse", "Awareness", "Strategies", "Clarity"]
    assert all(len(d.items_in(s)) == 3 for s in d.groups())
    assert [i.id for i in d.items if i.reversed] == ["derssf_10", "derssf_11", "derssf_12"]


def test_pvq_values(registry):
    d = registry.get("pvq")
    assert len(d.groups()) == 10
    assert [i.id for i in d.items_in("Universalism")] == ["pvq_19", "pvq_20", "pvq_21"]
    assert all(len(d.items_in(v)) == 2 for v in d.groups()[:-1])


def test_cutoffs_only_on_screening_instruments(registry):
    cutoffs = {d.key: d.cutoff for d in registry.instruments if d.cutoff is not None}
    assert cutoffs == {"ecrr": 3.5, "asrs": 4, "pcptsd5": 3, "aq10": 6}


def test_asrs_part_a_thresholds(registry):
    d = registry.get("asrs")
    assert [i.threshold for i in d.items_in("A")] == [2, 2, 2, 3, 3, 3]
    assert len(d.items_in("B")) == 12


def test_aq10_directions(registry):
    d = registry.get("aq10")
    agree = [i.id for i in d.items if i.direction == "agree"]
    assert agree == ["aq10_01", "aq10_07", "aq10_08", "aq10_10"]
    assert (d.scale.min, d.scale.max) == (0, 3)


def test_lookups(registry):
    assert registry.by_name("PHQ-9").key == "phq9"
    assert registry.owner_of("pss10_04").key == "pss10"
    assert registry.find_item("gad7_03").id == "gad7_03"
    assert registry.get("nope") is None
    assert registry.owner_of("xyz_01") is None
    assert registry.find_item("phq9_99") is None
    # el prefijo exige el guion bajo
    assert registry.owner_of("ace1") is None


def test_definitions_are_frozen(registry):
    d = registry.get("phq9")
    with pytest.raises(ValidationError):
        d.name = "otro"
    with pytest.raises(ValidationError):
        d.items[0].reversed = True
