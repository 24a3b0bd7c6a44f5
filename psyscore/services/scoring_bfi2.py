"""
Puntuación BFI-2.
- Media por dominio (12 reactivos) y por faceta (4), invirtiendo pares (6 - valor).
- Solo promedian los reactivos respondidos; un grupo vacío da 0 con answered=0.
- Percentil de dominio contra normas poblacionales (media/DE), acotado 1-99.
- Sin severidad: es un perfil de rasgos, no de patología.
"""
from ..models.score import FacetScore, ScoreResult
from .primitives import mean, ordinal_suffix, percentile_label, round_to, to_percentile
from .scoring_base import InstrumentScorer
from .typing import Answers


class BFI2Scorer(InstrumentScorer):
    def score(self, answers: Answers) -> ScoreResult:
        d = self.definition
        scale_max = d.scale.max

        facets: dict[str, FacetScore] = {}
        lines = []
        all_values: list[float] = []

        for domain in d.domains():
            items = d.items_in_domain(domain)
            values = self.answered_values(answers, items)
            all_values.extend(values)
            domain_mean = round_to(mean(values))

            norm = d.norm_for(domain)
            pct = to_percentile(domain_mean, norm.mean, norm.sd) if norm else None
            label = f"{percentile_label(pct)} ({pct}{ordinal_suffix(pct)} percentile)" if pct else domain

            facets[domain] = FacetScore(
                score=domain_mean,
                max_score=scale_max,
                label=label,
                percentile=pct,
                answered=len(values),
            )
            lines.append(f"{domain}: {domain_mean}/{scale_max} - {label}")

            for facet in dict.fromkeys(i.group for i in items):
                facet_items = tuple(i for i in items if i.group == facet)
                facets[f"{domain}: {facet}"] = self.mean_facet(answers, facet_items, facet)

        return ScoreResult(
            instrument=d.name,
            raw_score=round_to(mean(all_values)),
            max_score=scale_max,
            severity="none",
            facets=facets,
            interpretation=(
                f"Big Five personality profile (mean scores on {d.scale.min}-{scale_max} scale):\n"
                + "\n".join(lines)
            ),
        )
