# psyscore/models/score.py
"""
Schemas de resultados de puntuación.
Serializan en camelCase (rawScore, maxScore) para los consumidores
(dashboard, prompt de reporte, exportación clínica).
"""
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Severity = Literal[
    "none", "minimal", "mild", "moderate", "moderate_severe",
    "severe", "high", "low", "positive", "negative",
]

Number = int | float


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class FacetScore(_CamelModel):
    score: Number
    max_score: Number
    label: str
    percentile: int | None = None
    # items answered behind a mean-based facet; 0 means the score is not a real low
    answered: int | None = None


class ScoreResult(_CamelModel):
    instrument: str
    raw_score: Number
    max_score: Number
    severity: Severity
    percentile: int | None = None
    facets: dict[str, FacetScore] | None = None
    interpretation: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ScoreRequest(BaseModel):
    # id de reactivo ("phq9_03") -> respuesta cruda
    answers: dict[str, int | float] = Field(default_factory=dict)


class CrisisResource(BaseModel):
    name: str
    contact: str


class CrisisResponse(BaseModel):
    flagged: bool
    message: str
    resources: list[CrisisResource]


class ScoreSetResponse(_CamelModel):
    scores: dict[str, ScoreResult]
    crisis: CrisisResponse | None = None
    follow_up: list[str] = Field(default_factory=list)
