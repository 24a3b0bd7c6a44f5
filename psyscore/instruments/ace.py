"""
ACE (Adverse Childhood Experiences), 10 reactivos sí/no.
Categorías: Abuse (1-3), Neglect (4-5), Household Dysfunction (6-10).
"""
from ..models.instrument import InstrumentDefinition, Item, Scale, SeverityBand

PREFIX = "ace"

ITEMS = (
    ("Did a parent or other adult in the household often or very often swear at you, insult you, "
     "put you down, or humiliate you? Or act in a way that made you afraid that you might be "
     "physically hurt?", "Abuse"),
    ("Did a parent or other adult in the household often or very often push, grab, slap, or throw "
     "something at you? Or ever hit you so hard that you had marks or were injured?", "Abuse"),
    ("Did an adult or person at least 5 years older than you ever touch or fondle you or have you "
     "touch their body in a sexual way? Or attempt or actually have oral, anal, or vaginal "
     "intercourse with you?", "Abuse"),
    ("Did you often or very often feel that no one in your family loved you or thought you were "
     "important or special? Or your family didn't look out for each other, feel close to each "
     "other, or support each other?", "Neglect"),
    ("Did you often or very often feel that you didn't have enough to eat, had to wear dirty "
     "clothes, and had no one to protect you? Or your parents were too drunk or high to take care "
     "of you or take you to the doctor if you needed it?", "Neglect"),
    ("Were your parents ever separated or divorced?", "Household Dysfunction"),
    ("Was your mother or stepmother often or very often pushed, grabbed, slapped, or had something "
     "thrown at her? Or sometimes, often, or very often kicked, bitten, hit with a fist, or hit "
     "with something hard? Or ever repeatedly hit over at least a few minutes or threatened with a "
     "gun or knife?", "Household Dysfunction"),
    ("Did you live with anyone who was a problem drinker or alcoholic, or who used street drugs?",
     "Household Dysfunction"),
    ("Was a household member depressed or mentally ill, or did a household member attempt suicide?",
     "Household Dysfunction"),
    ("Did a household member go to prison?", "Household Dysfunction"),
)

BANDS = (
    SeverityBand(low=0, high=0, severity="none", label="None"),
    SeverityBand(low=1, high=3, severity="moderate", label="Low-Moderate"),
    SeverityBand(low=4, high=10, severity="high", label="High"),
)

CONTENT_WARNING = (
    "The following questions ask about difficult experiences that may have occurred during your "
    "childhood (before age 18). These questions cover topics including abuse, neglect, and "
    "household challenges. Please take your time and skip any question you are not comfortable "
    "answering. Your responses are confidential. If any of these questions bring up difficult "
    "feelings, we encourage you to reach out to a trusted person or mental health professional."
)


def definition() -> InstrumentDefinition:
    items = tuple(
        Item(id=f"{PREFIX}_{n:02d}", text=text, group=category)
        for n, (text, category) in enumerate(ITEMS, start=1)
    )
    return InstrumentDefinition(
        key=PREFIX,
        name="ACE",
        full_name="Adverse Childhood Experiences",
        scale=Scale(min=0, max=1, labels=("No", "Yes")),
        items=items,
        bands=BANDS,
        preamble="While you were growing up, during your first 18 years of life, did any of the "
                 "following apply to you?",
        citation="Felitti VJ, et al. Relationship of childhood abuse and household dysfunction to many "
                 "of the leading causes of death in adults. American Journal of Preventive Medicine. "
                 "1998;14(4):245-258.",
        content_warning=CONTENT_WARNING,
    )
