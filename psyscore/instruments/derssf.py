"""
DERS-SF (Difficulties in Emotion Regulation Scale, forma corta), 18 reactivos, escala 1-5.
6 subescalas de 3 reactivos; solo Awareness se invierte (redacción positiva).
Total 18-90, mayor = más dificultad.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale, SeverityBand

PREFIX = "derssf"
REVERSED_SUBSCALE = "Awareness"

SUBSCALES = (
    ("Nonacceptance", (
        "When I'm upset, I feel guilty for feeling that way.",
        "When I'm upset, I become embarrassed for feeling that way.",
        "When I'm upset, I feel like I am weak.",
    )),
    ("Goals", (
        "When I'm upset, I have difficulty getting work done.",
        "When I'm upset, I have difficulty focusing on other things.",
        "When I'm upset, I have difficulty concentrating.",
    )),
    ("Impulse", (
        "When I'm upset, I have difficulty controlling my behaviors.",
        "When I'm upset, I feel out of control.",
        "When I'm upset, I lose control over my behaviors.",
    )),
    ("Awareness", (
        "I pay attention to how I feel.",
        "I care about what I am feeling.",
        "When I'm upset, I acknowledge my emotions.",
    )),
    ("Strategies", (
        "When I'm upset, I believe that I will remain that way for a long time.",
        "When I'm upset, I believe that there is nothing I can do to make myself feel better.",
        "When I'm upset, I believe that wallowing in it is all I can do.",
    )),
    ("Clarity", (
        "I have difficulty making sense out of my feelings.",
        "I have no idea how I am feeling.",
        "I am confused about how I feel.",
    )),
)

BANDS = (
    SeverityBand(low=18, high=36, severity="low", label="Low difficulty with emotion regulation"),
    SeverityBand(low=37, high=54, severity="moderate", label="Moderate difficulty with emotion regulation"),
    SeverityBand(low=55, high=90, severity="high", label="High difficulty with emotion regulation"),
)

SCALE = Scale(min=1, max=5, labels=(
    "Almost never (0-10%)",
    "Sometimes (11-35%)",
    "About half the time (36-65%)",
    "Most of the time (66-90%)",
    "Almost always (91-100%)",
))


def definition() -> InstrumentDefinition:
    items = []
    for subscale, texts in SUBSCALES:
        for text in texts:
            items.append(Item(
                id=f"{PREFIX}_{len(items) + 1:02d}",
                text=text,
                reversed=subscale == REVERSED_SUBSCALE,
                group=subscale,
            ))
    return InstrumentDefinition(
        key=PREFIX,
        name="DERS-SF",
        full_name="Difficulties in Emotion Regulation Scale - Short Form",
        scale=SCALE,
        items=tuple(items),
        bands=BANDS,
        preamble="Please indicate how often the following statements apply to you.",
        citation="Kaufman EA, et al. The Difficulties in Emotion Regulation Scale Short Form (DERS-SF). "
                 "Journal of Psychopathology and Behavioral Assessment. 2016;38(3):443-455.",
    )
