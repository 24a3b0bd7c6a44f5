"""
GAD-7 (Generalized Anxiety Disorder-7), 7 reactivos, escala 0-3, total 0-21.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale, SeverityBand

PREFIX = "gad7"

TEXTS = (
    "Feeling nervous, anxious, or on edge.",
    "Not being able to stop or control worrying.",
    "Worrying too much about different things.",
    "Trouble relaxing.",
    "Being so restless that it is hard to sit still.",
    "Becoming easily annoyed or irritable.",
    "Feeling afraid, as if something awful might happen.",
)

BANDS = (
    SeverityBand(low=0, high=4, severity="minimal", label="Minimal anxiety"),
    SeverityBand(low=5, high=9, severity="mild", label="Mild anxiety"),
    SeverityBand(low=10, high=14, severity="moderate", label="Moderate anxiety"),
    SeverityBand(low=15, high=21, severity="severe", label="Severe anxiety"),
)

SCALE = Scale(min=0, max=3, labels=(
    "Not at all",
    "Several days",
    "More than half the days",
    "Nearly every day",
))


def definition() -> InstrumentDefinition:
    return InstrumentDefinition(
        key=PREFIX,
        name="GAD-7",
        full_name="Generalized Anxiety Disorder-7",
        scale=SCALE,
        items=tuple(Item(id=f"{PREFIX}_{n:02d}", text=t) for n, t in enumerate(TEXTS, start=1)),
        bands=BANDS,
        preamble="Over the last 2 weeks, how often have you been bothered by the following problems?",
        citation="Spitzer RL, Kroenke K, Williams JBW, Löwe B. A brief measure for assessing "
                 "generalized anxiety disorder. Arch Intern Med. 2006;166(10):1092-1097.",
    )
