"""
AQ-10 (Autism Spectrum Quotient, 10 reactivos), escala 0-3
(0 = Definitely agree ... 3 = Definitely disagree).
- Dirección "agree": 1 punto si la respuesta es <= 1.
- Dirección "disagree": 1 punto si la respuesta es >= 2.
Derivación recomendada con 6 o más.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale

PREFIX = "aq10"
CUTOFF = 6

ITEMS = (
    ("I often notice small sounds when others do not.", "agree"),
    ("I usually concentrate more on the whole picture, rather than the small details.", "disagree"),
    ("I find it easy to do more than one thing at once.", "disagree"),
    ("If there is an interruption, I can switch back to what I was doing very quickly.", "disagree"),
    ("I find it easy to read between the lines when someone is talking to me.", "disagree"),
    ("I know how to tell if someone listening to me is getting bored.", "disagree"),
    ("When I'm reading a story, I find it difficult to work out the characters' intentions.", "agree"),
    ("I like to collect information about categories of things (e.g., types of car, types of bird, "
     "types of train, types of plant, etc.).", "agree"),
    ("I find it easy to work out what someone is thinking or feeling just by looking at their face.",
     "disagree"),
    ("I find it difficult to work out people's intentions.", "agree"),
)

SCALE = Scale(min=0, max=3, labels=(
    "Definitely agree",
    "Slightly agree",
    "Slightly disagree",
    "Definitely disagree",
))


def definition() -> InstrumentDefinition:
    items = tuple(
        Item(id=f"{PREFIX}_{n:02d}", text=text, direction=direction)
        for n, (text, direction) in enumerate(ITEMS, start=1)
    )
    return InstrumentDefinition(
        key=PREFIX,
        name="AQ-10",
        full_name="Autism Spectrum Quotient (10-item)",
        scale=SCALE,
        items=items,
        cutoff=CUTOFF,
        preamble="Please read each statement and rate how strongly you agree or disagree.",
        citation="Allison C, Auyeung B, Baron-Cohen S. Toward brief \"Red Flags\" for autism screening. "
                 "Journal of the American Academy of Child & Adolescent Psychiatry. 2012;51(2):202-212.",
    )
