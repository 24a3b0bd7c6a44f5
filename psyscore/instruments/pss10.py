"""
PSS-10 (Perceived Stress Scale), 10 reactivos, escala 0-4, total 0-40.
Los reactivos 4, 5, 7 y 8 se invierten (4 - valor).
"""
from ..models.instrument import InstrumentDefinition, Item, Scale, SeverityBand

PREFIX = "pss10"
REVERSED = {4, 5, 7, 8}

TEXTS = (
    "In the last month, how often have you been upset because of something that happened unexpectedly?",
    "In the last month, how often have you felt that you were unable to control the important things "
    "in your life?",
    "In the last month, how often have you felt nervous and stressed?",
    "In the last month, how often have you felt confident about your ability to handle your personal "
    "problems?",
    "In the last month, how often have you felt that things were going your way?",
    "In the last month, how often have you found that you could not cope with all the things that you "
    "had to do?",
    "In the last month, how often have you been able to control irritations in your life?",
    "In the last month, how often have you felt that you were on top of things?",
    "In the last month, how often have you been angered because of things that were outside of your "
    "control?",
    "In the last month, how often have you felt difficulties were piling up so high that you could not "
    "overcome them?",
)

BANDS = (
    SeverityBand(low=0, high=13, severity="low", label="Low perceived stress"),
    SeverityBand(low=14, high=26, severity="moderate", label="Moderate perceived stress"),
    SeverityBand(low=27, high=40, severity="high", label="High perceived stress"),
)

SCALE = Scale(min=0, max=4, labels=("Never", "Almost never", "Sometimes", "Fairly often", "Very often"))


def definition() -> InstrumentDefinition:
    items = tuple(
        Item(id=f"{PREFIX}_{n:02d}", text=text, reversed=n in REVERSED)
        for n, text in enumerate(TEXTS, start=1)
    )
    return InstrumentDefinition(
        key=PREFIX,
        name="PSS-10",
        full_name="Perceived Stress Scale",
        scale=SCALE,
        items=items,
        bands=BANDS,
        preamble="The questions in this scale ask you about your feelings and thoughts during the last "
                 "month. In each case, please indicate how often you felt or thought a certain way.",
        citation="Cohen S, Kamarck T, Mermelstein R. A global measure of perceived stress. Journal of "
                 "Health and Social Behavior. 1983;24(4):385-396.",
    )
