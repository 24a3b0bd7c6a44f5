"""
PVQ-21 (Schwartz Portrait Values Questionnaire), 21 reactivos, escala 1-6.
10 valores de 2-3 reactivos; se reportan centrados sobre la media personal.
"""
from ..models.instrument import InstrumentDefinition, Item, Scale

PREFIX = "pvq"

VALUES = (
    ("Self-Direction", (
        "Thinking up new ideas and being creative is important to this person. They like to do "
        "things in their own original way.",
        "It is important to this person to make their own decisions about what they do. They like "
        "to be free and not depend on others.",
    )),
    ("Stimulation", (
        "This person thinks it is important to do lots of different things in life. They always "
        "look for new things to try.",
        "This person likes surprises and is always looking for new things to do. They think it is "
        "important to do lots of different things in life.",
    )),
    ("Hedonism", (
        "Having a good time is important to this person. They like to \"spoil\" themselves.",
        "This person seeks every chance to have fun. It is important to them to do things that give "
        "them pleasure.",
    )),
    ("Achievement", (
        "It is important to this person to show their abilities. They want people to admire what "
        "they do.",
        "Being very successful is important to this person. They hope people will recognize their "
        "achievements.",
    )),
    ("Power", (
        "It is important to this person to be rich. They want to have a lot of money and expensive "
        "things.",
        "It is important to this person that people do what they say. They want to be in charge and "
        "tell others what to do.",
    )),
    ("Security", (
        "It is important to this person to live in secure surroundings. They avoid anything that "
        "might endanger their safety.",
        "It is important to this person that the government ensures their safety against all "
        "threats. They want the state to be strong so it can defend its citizens.",
    )),
    ("Conformity", (
        "This person believes that people should do what they are told. They think people should "
        "follow rules at all times, even when no one is watching.",
        "It is important to this person always to behave properly. They want to avoid doing "
        "anything people would say is wrong.",
    )),
    ("Tradition", (
        "Tradition is important to this person. They try to follow the customs handed down by their "
        "religion or family.",
        "It is important to this person to be humble and modest. They try not to draw attention to "
        "themselves.",
    )),
    ("Benevolence", (
        "It is important to this person to help the people around them. They want to care for the "
        "well-being of those they know.",
        "It is very important to this person to be loyal to their friends. They want to devote "
        "themselves to people close to them.",
    )),
    ("Universalism", (
        "This person strongly believes that people should care for nature. Looking after the "
        "environment is important to them.",
        "It is important to this person to listen to people who are different from them. Even when "
        "they disagree with someone, they still want to understand them.",
        "This person believes all the worlds people should live in harmony. Promoting peace among "
        "all groups in the world is important to them.",
    )),
)

SCALE = Scale(min=1, max=6, labels=(
    "Not like me at all",
    "Not like me",
    "A little like me",
    "Somewhat like me",
    "Like me",
    "Very much like me",
))


def definition() -> InstrumentDefinition:
    items = []
    for value, texts in VALUES:
        for text in texts:
            items.append(Item(id=f"{PREFIX}_{len(items) + 1:02d}", text=text, group=value))
    return InstrumentDefinition(
        key=PREFIX,
        name="Schwartz PVQ",
        full_name="Portrait Values Questionnaire",
        scale=SCALE,
        items=tuple(items),
        preamble="Here we briefly describe different people. Please read each description and think "
                 "about how much each person is or is not like you.",
        citation="Schwartz SH. A proposal for measuring value orientations across nations. "
                 "Questionnaire Package of the European Social Survey. 2003.",
    )
