"""
BFI-2 (Big Five Inventory-2), 60 reactivos, escala 1-5.
- 5 dominios x 3 facetas x 4 reactivos.
- Los reactivos pares están redactados en sentido inverso.
- Ítems del pool público IPIP; normas aproximadas de Soto & John (2017).
"""
from ..models.instrument import InstrumentDefinition, Item, Norm, Scale

PREFIX = "bfi2"

DOMAINS = (
    ("Extraversion", ("Sociability", "Assertiveness", "Energy Level")),
    ("Agreeableness", ("Compassion", "Respectfulness", "Trust")),
    ("Conscientiousness", ("Organization", "Productiveness", "Responsibility")),
    ("Neuroticism", ("Anxiety", "Depression", "Emotional Volatility")),
    ("Openness", ("Intellectual Curiosity", "Aesthetic Sensitivity", "Creative Imagination")),
)

NORMS = (
    ("Extraversion", Norm(mean=3.25, sd=0.73)),
    ("Agreeableness", Norm(mean=3.64, sd=0.62)),
    ("Conscientiousness", Norm(mean=3.45, sd=0.69)),
    ("Neuroticism", Norm(mean=2.85, sd=0.78)),
    ("Openness", Norm(mean=3.75, sd=0.65)),
)

TEXTS = (
    # Extraversion
    "I am the life of the party.",
    "I don't talk a lot.",
    "I talk to a lot of different people at parties.",
    "I keep in the background.",
    "I take charge of situations.",
    "I have little to say.",
    "I start conversations.",
    "I wait for others to lead the way.",
    "I am full of energy.",
    "I often feel tired and sluggish.",
    "I am enthusiastic about things.",
    "I have a low energy level.",
    # Agreeableness
    "I sympathize with others' feelings.",
    "I am not really interested in others.",
    "I feel others' emotions.",
    "I am not interested in other people's problems.",
    "I respect others' opinions and viewpoints.",
    "I insult people.",
    "I treat people with courtesy and respect.",
    "I can be rude and dismissive toward others.",
    "I trust what people say.",
    "I suspect hidden motives in others.",
    "I believe that people are basically well-intentioned.",
    "I distrust people.",
    # Conscientiousness
    "I like order and regularity.",
    "I leave my belongings around.",
    "I keep things tidy.",
    "I make a mess of things.",
    "I get chores done right away.",
    "I waste my time.",
    "I carry out my plans.",
    "I find it difficult to get down to work.",
    "I keep my promises.",
    "I shirk my duties.",
    "I am a reliable person.",
    "I do just enough work to get by.",
    # Neuroticism
    "I worry about things.",
    "I am relaxed most of the time.",
    "I get stressed out easily.",
    "I seldom feel anxious.",
    "I often feel sad.",
    "I feel comfortable with myself.",
    "I am filled with doubts about things.",
    "I feel satisfied with myself most of the time.",
    "I have frequent mood swings.",
    "I am not easily bothered by things.",
    "I get upset easily.",
    "I keep my emotions under control.",
    # Openness
    "I am curious about many different things.",
    "I have difficulty understanding abstract ideas.",
    "I enjoy thinking about complex problems.",
    "I avoid philosophical discussions.",
    "I see beauty in things that others might not notice.",
    "I am not interested in art or beauty.",
    "I believe in the importance of art.",
    "I do not enjoy going to art museums.",
    "I have a vivid imagination.",
    "I do not have a good imagination.",
    "I enjoy coming up with new ideas and solutions.",
    "I have few creative interests.",
)

SCALE = Scale(min=1, max=5, labels=(
    "Disagree strongly",
    "Disagree a little",
    "Neutral",
    "Agree a little",
    "Agree strongly",
))


def _items() -> tuple[Item, ...]:
    items = []
    n = 0
    for domain, facets in DOMAINS:
        for facet in facets:
            for _ in range(4):
                n += 1
                items.append(Item(
                    id=f"{PREFIX}_{n:02d}",
                    text=TEXTS[n - 1],
                    reversed=n % 2 == 0,
                    group=facet,
                    domain=domain,
                ))
    return tuple(items)


def definition() -> InstrumentDefinition:
    return InstrumentDefinition(
        key=PREFIX,
        name="BFI-2",
        full_name="Big Five Inventory-2",
        scale=SCALE,
        items=_items(),
        norms=NORMS,
        preamble="Here are a number of characteristics that may or may not apply to you. "
                 "Please indicate the extent to which you agree or disagree with each statement.",
        citation="Soto CJ, John OP. The next Big Five Inventory (BFI-2): Developing and assessing "
                 "a hierarchical model with 15 facets. Journal of Personality and Social Psychology. "
                 "2017;113(1):117-143.",
    )
