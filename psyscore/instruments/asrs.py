"""
ASRS v1.1 (Adult ADHD Self-Report Scale), 18 reactivos, escala 0-4.
- Parte A (1-6): tamizaje; cada reactivo tiene su propio umbral.
- Parte B (7-18): severidad complementaria.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale

PREFIX = "asrs"
POSITIVE_SCREEN = 4

INATTENTION = "Inattention"
HYPERACTIVITY = "Hyperactivity-Impulsivity"

# (texto, parte, dominio de síntomas, umbral Parte A)
ITEMS = (
    ("How often do you have trouble wrapping up the final details of a project, once the "
     "challenging parts have been done?", "A", INATTENTION, 2),
    ("How often do you have difficulty getting things in order when you have to do a task that "
     "requires organization?", "A", INATTENTION, 2),
    ("How often do you have problems remembering appointments or obligations?", "A", INATTENTION, 2),
    ("When you have a task that requires a lot of thought, how often do you avoid or delay getting "
     "started?", "A", INATTENTION, 3),
    ("How often do you fidget or squirm with your hands or feet when you have to sit down for a "
     "long time?", "A", HYPERACTIVITY, 3),
    ("How often do you feel overly active and compelled to do things, like you were driven by a "
     "motor?", "A", HYPERACTIVITY, 3),
    ("How often do you make careless mistakes when you have to work on a boring or difficult "
     "project?", "B", INATTENTION, None),
    ("How often do you have difficulty keeping your attention when you are doing boring or "
     "repetitive work?", "B", INATTENTION, None),
    ("How often do you have difficulty concentrating on what people say to you, even when they are "
     "speaking to you directly?", "B", INATTENTION, None),
    ("How often do you misplace or have difficulty finding things at home or at work?", "B",
     INATTENTION, None),
    ("How often are you distracted by activity or noise around you?", "B", INATTENTION, None),
    ("How often do you leave your seat in meetings or other situations in which you are expected to "
     "remain seated?", "B", HYPERACTIVITY, None),
    ("How often do you feel restless or fidgety?", "B", HYPERACTIVITY, None),
    ("How often do you have difficulty unwinding and relaxing when you have time to yourself?", "B",
     HYPERACTIVITY, None),
    ("How often do you find yourself talking too much when you are in social situations?", "B",
     HYPERACTIVITY, None),
    ("When you're in a conversation, how often do you find yourself finishing the sentences of the "
     "people you are talking to, before they can finish them themselves?", "B", HYPERACTIVITY, None),
    ("How often do you have difficulty waiting your turn in situations when turn taking is "
     "required?", "B", HYPERACTIVITY, None),
    ("How often do you interrupt others when they are busy?", "B", HYPERACTIVITY, None),
)

SCALE = Scale(min=0, max=4, labels=("Never", "Rarely", "Sometimes", "Often", "Very Often"))


def definition() -> InstrumentDefinition:
    items = tuple(
        Item(id=f"{PREFIX}_{n:02d}", text=text, group=part, domain=domain, threshold=threshold)
        for n, (text, part, domain, threshold) in enumerate(ITEMS, start=1)
    )
    return InstrumentDefinition(
        key=PREFIX,
        name="ASRS",
        full_name="Adult ADHD Self-Report Scale",
        scale=SCALE,
        items=items,
        cutoff=POSITIVE_SCREEN,
        preamble="Over the past 6 months, how often have you experienced the following?",
        citation="Kessler RC, et al. The World Health Organization Adult ADHD Self-Report Scale "
                 "(ASRS). Psychological Medicine. 2005;35(2):245-256.",
    )
