# psyscore/models/instrument.py
"""
Definiciones de instrumentos (datos puros, inmutables).
- Se construyen una vez al arrancar y se comparten por referencia.
- Nunca se mutan: todos los modelos son frozen.
"""
from typing import Literal
from pydantic import BaseModel, ConfigDict

Direction = Literal["agree", "disagree"]


class Scale(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    labels: tuple[str, ...] = ()


class Item(BaseModel):
    """
    Un reactivo. `group` es la faceta/dimensión/subescala/categoría según el
    instrumento; `domain` solo lo usan BFI-2 (dominio) y ASRS (dominio de síntomas).
    """
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    reversed: bool = False
    group: str | None = None
    domain: str | None = None
    crisis: bool = False
    threshold: int | None = None
    direction: Direction | None = None


class SeverityBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    low: float
    high: float
    severity: str
    label: str


class Norm(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    sd: float


class InstrumentDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    full_name: str
    scale: Scale
    items: tuple[Item, ...]
    bands: tuple[SeverityBand, ...] = ()
    norms: tuple[tuple[str, Norm], ...] = ()
    cutoff: float | None = None
    preamble: str = ""
    citation: str = ""
    content_warning: str | None = None

    @property
    def prefix(self) -> str:
        return self.key

    @property
    def crisis_item_ids(self) -> tuple[str, ...]:
        return tuple(i.id for i in self.items if i.crisis)

    def groups(self) -> list[str]:
        """Grupos en orden de aparición."""
        seen: list[str] = []
        for item in self.items:
            if item.group is not None and item.group not in seen:
                seen.append(item.group)
        return seen

    def domains(self) -> list[str]:
        seen: list[str] = []
        for item in self.items:
            if item.domain is not None and item.domain not in seen:
                seen.append(item.domain)
        return seen

    def items_in(self, group: str) -> tuple[Item, ...]:
        return tuple(i for i in self.items if i.group == group)

    def items_in_domain(self, domain: str) -> tuple[Item, ...]:
        return tuple(i for i in self.items if i.domain == domain)

    def norm_for(self, name: str) -> Norm | None:
        for key, norm in self.norms:
            if key == name:
                return norm
        return None

    def owns(self, item_id: str) -> bool:
        return item_id.startswith(f"{self.prefix}_")


class InstrumentRegistry(BaseModel):
    """Tabla ordenada de instrumentos; búsqueda por clave, nombre o prefijo."""
    model_config = ConfigDict(frozen=True)

    instruments: tuple[InstrumentDefinition, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(d.key for d in self.instruments)

    def get(self, key: str) -> InstrumentDefinition | None:
        for definition in self.instruments:
            if definition.key == key:
                return definition
        return None

    def by_name(self, name: str) -> InstrumentDefinition | None:
        for definition in self.instruments:
            if definition.name == name:
                return definition
        return None

    def owner_of(self, item_id: str) -> InstrumentDefinition | None:
        for definition in self.instruments:
            if definition.owns(item_id):
                return definition
        return None

    def find_item(self, item_id: str) -> Item | None:
        definition = self.owner_of(item_id)
        if definition is None:
            return None
        for item in definition.items:
            if item.id == item_id:
                return item
        return None
