# psyscore/tests/test_scoring_profiles.py
"""
Perfiles por media: BFI-2 (percentiles), ECR-R (estilo de apego), PVQ (centrado).
"""
import pytest

from psyscore.services.scoring_ecrr import attachment_style
from psyscore.services.scoring_pvq import priority_label

BFI_DOMAINS = ["Extraversion", "Agreeableness", "Conscientiousness", "Neuroticism", "Openness"]


# ---------------- BFI-2 ----------------
def test_bfi2_neutral_profile(engine):
    result = engine.score_one("bfi2", {f"bfi2_{n:02d}": 3 for n in range(1, 61)})
    assert result.raw_score == 3.0
    assert result.max_score == 5
    assert result.severity == "none"
    assert result.percentile is None
    for domain in BFI_DOMAINS:
        assert result.facets[domain].score == 3.0
        assert result.facets[domain].answered == 12
    assert result.facets["Extraversion"].percentile == 37
    assert result.facets["Extraversion"].label == "Average (37th percentile)"
    assert result.facets["Neuroticism"].percentile == 58


def test_bfi2_facet_entries(engine):
    result = engine.score_one("bfi2", {f"bfi2_{n:02d}": 3 for n in range(1, 61)})
    assert len(result.facets) == 20
    sociability = result.facets["Extraversion: Sociability"]
    assert sociability.label == "Sociability"
    assert sociability.score == 3.0
    assert sociability.answered == 4
    assert sociability.percentile is None


def test_bfi2_percentiles_clamp(engine, registry):
    d = registry.get("bfi2")
    high = {i.id: 1 if i.reversed else 5 for i in d.items}
    low = {i.id: 5 if i.reversed else 1 for i in d.items}

    high_result = engine.score_one("bfi2", high)
    low_result = engine.score_one("bfi2", low)
    for domain in BFI_DOMAINS:
        assert high_result.facets[domain].score == 5.0
        assert low_result.facets[domain].score == 1.0
        assert low_result.facets[domain].percentile == 1
    assert high_result.facets["Neuroticism"].percentile == 99
    assert high_result.facets["Neuroticism"].label == "High (99th percentile)"


def test_bfi2_reversed_item_and_empty_groups(engine):
    result = engine.score_one("bfi2", {"bfi2_02": 1})
    assert result.raw_score == 5.0
    assert result.facets["Extraversion"].score == 5.0
    assert result.facets["Extraversion"].answered == 1
    assert result.facets["Extraversion: Sociability"].score == 5.0
    # grupos sin respuestas: 0 con answered=0, no un puntaje real
    assert result.facets["Extraversion: Assertiveness"].score == 0
    assert result.facets["Extraversion: Assertiveness"].answered == 0
    assert result.facets["Openness"].answered == 0


def test_bfi2_interpretation_lists_domains(engine):
    result = engine.score_one("bfi2", {f"bfi2_{n:02d}": 3 for n in range(1, 61)})
    lines = result.interpretation.split("\n")
    assert lines[0] == "Big Five personality profile (mean scores on 1-5 scale):"
    assert lines[1] == "Extraversion: 3.0/5 - Average (37th percentile)"
    assert len(lines) == 6


# ---------------- ECR-R ----------------
@pytest.mark.parametrize("anxiety,avoidance,style,severity", [
    (1.0, 1.0, "Secure", "low"),
    (3.5, 1.0, "Anxious-Preoccupied", "moderate"),
    (1.0, 3.5, "Dismissive-Avoidant", "moderate"),
    (3.5, 3.5, "Fearful-Avoidant", "high"),
    (3.49, 3.49, "Secure", "low"),
])
def test_attachment_style_quadrants(anxiety, avoidance, style, severity):
    assert attachment_style(anxiety, avoidance) == (style, severity)


def test_ecrr_anxious_preoccupied(engine, registry):
    d = registry.get("ecrr")
    answers = {}
    for item in d.items:
        if item.group == "Anxiety":
            answers[item.id] = 1 if item.reversed else 7
        else:
            answers[item.id] = 7 if item.reversed else 1
    result = engine.score_one("ecrr", answers)
    assert result.facets["Anxiety"].score == 7.0
    assert result.facets["Avoidance"].score == 1.0
    assert result.facets["Anxiety"].label == "Elevated"
    assert result.facets["Avoidance"].label == "Low"
    assert result.severity == "moderate"
    assert result.raw_score == 4.0
    assert result.max_score == 7
    assert result.interpretation.startswith("Attachment style: Anxious-Preoccupied.")


def test_ecrr_cutoff_is_inclusive(engine):
    result = engine.score_one("ecrr", {"ecrr_01": 3, "ecrr_02": 4})
    assert result.facets["Anxiety"].score == 3.5
    assert result.facets["Anxiety"].label == "Elevated"
    assert "Anxious-Preoccupied" in result.interpretation


@pytest.mark.parametrize("answers,style,severity", [
    ({"ecrr_01": 3, "ecrr_19": 3}, "Secure", "low"),
    ({"ecrr_01": 1, "ecrr_19": 5}, "Dismissive-Avoidant", "moderate"),
    ({"ecrr_01": 5, "ecrr_19": 5}, "Fearful-Avoidant", "high"),
])
def test_ecrr_styles(engine, answers, style, severity):
    result = engine.score_one("ecrr", answers)
    assert result.severity == severity
    assert f"Attachment style: {style}." in result.interpretation


def test_ecrr_reversal_and_empty_dimension(engine):
    result = engine.score_one("ecrr", {"ecrr_09": 2})
    assert result.facets["Anxiety"].score == 6.0
    assert result.facets["Avoidance"].score == 0
    assert result.facets["Avoidance"].answered == 0


# ---------------- PVQ ----------------
@pytest.mark.parametrize("centered,label", [
    (0.51, "High priority"),
    (0.5, "Moderate priority"),
    (0.0, "Moderate priority"),
    (-0.5, "Moderate priority"),
    (-0.51, "Lower priority"),
])
def test_priority_label(centered, label):
    assert priority_label(centered) == label


def test_pvq_centered_profile(engine):
    answers = {f"pvq_{n:02d}": 3 for n in range(1, 22)}
    answers.update({"pvq_01": 6, "pvq_02": 6})
    result = engine.score_one("pvq", answers)

    assert result.raw_score == 3.29
    assert result.max_score == 6
    assert result.severity == "none"
    assert result.facets["Self-Direction"].score == 2.71
    assert result.facets["Self-Direction"].label == "High priority"
    assert result.facets["Power"].score == -0.29
    assert result.facets["Power"].label == "Moderate priority"
    assert result.facets["Universalism"].answered == 3
    assert "Top values: Self-Direction." in result.interpretation
    assert "Lower-priority values: Tradition, Benevolence, Universalism." in result.interpretation


def test_pvq_flat_profile(engine):
    result = engine.score_one("pvq", {f"pvq_{n:02d}": 4 for n in range(1, 22)})
    assert all(f.score == 0 for f in result.facets.values())
    assert "(none above mean)" in result.interpretation
    assert "(none below mean)" in result.interpretation


def test_pvq_unanswered_value(engine):
    result = engine.score_one("pvq", {"pvq_01": 6, "pvq_03": 2})
    assert result.raw_score == 4.0
    assert result.facets["Self-Direction"].score == 2.0
    assert result.facets["Stimulation"].score == -2.0
    # sin respuestas: media 0 menos la media personal
    assert result.facets["Hedonism"].score == -4.0
    assert result.facets["Hedonism"].answered == 0
