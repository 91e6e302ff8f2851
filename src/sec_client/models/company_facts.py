"""All XBRL facts a company has reported, by taxonomy and concept."""

from typing import NamedTuple

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from sec_client.models.base import EdgarModel
from sec_client.transforms.xbrl_company_facts.main import transform as facts_to_table


class FactValue(EdgarModel):
    """One reported value.

    ``val`` is usually a number but some dei concepts carry text or booleans,
    and a few facts have no value at all. The ``as_*`` accessors return None
    when the value is of another kind.
    """

    end: str
    val: StrictBool | StrictInt | StrictFloat | StrictStr | None = None
    accn: str
    fy: int | None = None
    fp: str | None = None
    form: str
    filed: str
    start: str | None = None
    frame: str | None = None

    def as_number(self) -> float | None:
        if isinstance(self.val, bool) or not isinstance(self.val, (int, float)):
            return None
        return float(self.val)

    def as_integer(self) -> int | None:
        if isinstance(self.val, bool) or not isinstance(self.val, int):
            return None
        return self.val

    def as_text(self) -> str | None:
        return self.val if isinstance(self.val, str) else None

    def as_boolean(self) -> bool | None:
        return self.val if isinstance(self.val, bool) else None


class Fact(EdgarModel):
    label: str | None = None
    description: str | None = None
    units: dict[str, list[FactValue]] = Field(default_factory=dict)


class FactRecord(NamedTuple):
    taxonomy: str
    tag: str
    unit: str
    value: FactValue


class CompanyFacts(EdgarModel):
    cik: int
    entity_name: str = Field(alias="entityName")
    facts: dict[str, dict[str, Fact]] = Field(default_factory=dict)

    def taxonomies(self) -> list[str]:
        return list(self.facts)

    def tags_for_taxonomy(self, taxonomy: str) -> list[str]:
        return list(self.facts.get(taxonomy, {}))

    def get_fact(self, taxonomy: str, tag: str) -> Fact | None:
        return self.facts.get(taxonomy, {}).get(tag)

    def records(self):
        """Yield every value as a ``FactRecord``."""
        for taxonomy, tags in self.facts.items():
            for tag, fact in tags.items():
                for unit, values in fact.units.items():
                    for value in values:
                        yield FactRecord(taxonomy, tag, unit, value)

    def facts_for_fiscal_period(self, fiscal_year: int, fiscal_period: str) -> list[FactRecord]:
        return [r for r in self.records() if r.value.fy == fiscal_year and r.value.fp == fiscal_period]

    def facts_for_form(self, form: str) -> list[FactRecord]:
        return [r for r in self.records() if r.value.form == form]

    def most_recent_value(self, taxonomy: str, tag: str, unit: str) -> FactValue | None:
        fact = self.get_fact(taxonomy, tag)
        if fact is None or not fact.units.get(unit):
            return None
        return max(fact.units[unit], key=lambda v: v.end)

    def cik_padded(self) -> str:
        return str(self.cik).zfill(10)

    def to_table(self):
        return facts_to_table(self)
