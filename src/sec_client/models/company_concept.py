from pydantic import Field

from sec_client.models.base import EdgarModel


class ConceptValue(EdgarModel):
    end: str
    val: float
    accn: str
    fy: int | None = None
    fp: str | None = None
    form: str
    filed: str
    frame: str | None = None
    start: str | None = None


class CompanyConcept(EdgarModel):
    """Every disclosure of one XBRL concept by one company, grouped by unit."""

    # The API sends the CIK as a number, but some mirrors send a string.
    cik: int
    entity_name: str = Field(alias="entityName")
    taxonomy: str
    tag: str
    label: str | None = None
    description: str | None = None
    units: dict[str, list[ConceptValue]] = Field(default_factory=dict)

    def values_for_unit(self, unit: str) -> list[ConceptValue]:
        return list(self.units.get(unit, []))

    def most_recent_value(self, unit: str) -> ConceptValue | None:
        """The value with the latest period end date for ``unit``."""
        values = self.units.get(unit)
        if not values:
            return None
        return max(values, key=lambda v: v.end)

    def available_units(self) -> list[str]:
        return list(self.units)

    def values_for_fiscal_period(self, fiscal_year: int, fiscal_period: str) -> list[tuple[str, ConceptValue]]:
        """(unit, value) pairs reported for e.g. ``(2023, "Q1")`` or ``(2023, "FY")``."""
        return [
            (unit, value)
            for unit, values in self.units.items()
            for value in values
            if value.fy == fiscal_year and value.fp == fiscal_period
        ]

    def cik_padded(self) -> str:
        return str(self.cik).zfill(10)
