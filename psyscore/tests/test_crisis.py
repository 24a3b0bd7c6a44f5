# psyscore/tests/test_crisis.py
from psyscore.services.crisis_resources import crisis_response
from psyscore.services.risk_engine import CRISIS_ITEMS, is_crisis_flagged


def test_crisis_items():
    assert CRISIS_ITEMS == ("phq9_09",)


def test_crisis_threshold():
    assert not is_crisis_flagged({})
    assert not is_crisis_flagged({"phq9_09": 0})
    assert is_crisis_flagged({"phq9_09": 1})
    assert is_crisis_flagged({"phq9_09": 3})


def test_crisis_with_custom_items():
    assert is_crisis_flagged({"x_01": 1}, ["x_01"])
    assert not is_crisis_flagged({"phq9_09": 3}, [])


def test_crisis_response_resources():
    resp = crisis_response()
    assert resp.flagged is True
    assert resp.message
    assert [r.contact for r in resp.resources] == [
        "Call or text 988",
        "Text HOME to 741741",
        "Call 911",
    ]
