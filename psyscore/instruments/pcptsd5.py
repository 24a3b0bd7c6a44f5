"""
PC-PTSD-5 (Primary Care PTSD Screen for DSM-5), 5 reactivos sí/no.
Tamizaje positivo con 3 o más; 4 o más tiene mayor especificidad.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale

PREFIX = "pcptsd5"
CUTOFF = 3
HIGH_SPECIFICITY = 4

ITEMS = (
    ("Had nightmares about the event(s) or thought about the event(s) when you did not want to?",
     "Re-experiencing"),
    ("Tried hard not to think about the event(s) or went out of your way to avoid situations that "
     "reminded you of the event(s)?", "Avoidance"),
    ("Been constantly on guard, watchful, or easily startled?", "Arousal"),
    ("Felt numb or detached from people, activities, or your surroundings?", "Numbing"),
    ("Felt guilty or unable to stop blaming yourself or others for the event(s) or any problems the "
     "event(s) may have caused?", "Negative Cognitions"),
)


def definition() -> InstrumentDefinition:
    items = tuple(
        Item(id=f"{PREFIX}_{n:02d}", text=text, group=cluster)
        for n, (text, cluster) in enumerate(ITEMS, start=1)
    )
    return InstrumentDefinition(
        key=PREFIX,
        name="PC-PTSD-5",
        full_name="Primary Care PTSD Screen for DSM-5",
        scale=Scale(min=0, max=1, labels=("No", "Yes")),
        items=items,
        cutoff=CUTOFF,
        preamble="Sometimes things happen to people that are unusually or especially frightening, "
                 "horrible, or traumatic. In the past month, have you...",
        citation="Prins A, et al. The Primary Care PTSD Screen for DSM-5 (PC-PTSD-5). Primary Care "
                 "Psychiatry. 2016.",
    )
