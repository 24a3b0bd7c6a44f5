"""
PHQ-9 (Patient Health Questionnaire-9), 9 reactivos, escala 0-3, total 0-27.
El reactivo 9 (ideación suicida) es reactivo de crisis.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale, SeverityBand

PREFIX = "phq9"
CRISIS_ITEM = 9

TEXTS = (
    "Little interest or pleasure in doing things.",
    "Feeling down, depressed, or hopeless.",
    "Trouble falling or staying asleep, or sleeping too much.",
    "Feeling tired or having little energy.",
    "Poor appetite or overeating.",
    "Feeling bad about yourself - or that you are a failure or have let yourself or your family down.",
    "Trouble concentrating on things, such as reading the newspaper or watching television.",
    "Moving or speaking so slowly that other people could have noticed. Or the opposite - being so "
    "fidgety or restless that you have been moving around a lot more than usual.",
    "Thoughts that you would be better off dead, or of hurting yourself in some way.",
)

BANDS = (
    SeverityBand(low=0, high=4, severity="minimal", label="Minimal depression"),
    SeverityBand(low=5, high=9, severity="mild", label="Mild depression"),
    SeverityBand(low=10, high=14, severity="moderate", label="Moderate depression"),
    SeverityBand(low=15, high=19, severity="moderate_severe", label="Moderately severe depression"),
    SeverityBand(low=20, high=27, severity="severe", label="Severe depression"),
)

SCALE = Scale(min=0, max=3, labels=(
    "Not at all",
    "Several days",
    "More than half the days",
    "Nearly every day",
))


def definition() -> InstrumentDefinition:
    items = tuple(
        Item(id=f"{PREFIX}_{n:02d}", text=text, crisis=n == CRISIS_ITEM)
        for n, text in enumerate(TEXTS, start=1)
    )
    return InstrumentDefinition(
        key=PREFIX,
        name="PHQ-9",
        full_name="Patient Health Questionnaire-9",
        scale=SCALE,
        items=items,
        bands=BANDS,
        preamble="Over the last 2 weeks, how often have you been bothered by any of the following problems?",
        citation="Kroenke K, Spitzer RL, Williams JB. The PHQ-9: validity of a brief depression "
                 "severity measure. J Gen Intern Med. 2001;16(9):606-613.",
    )
