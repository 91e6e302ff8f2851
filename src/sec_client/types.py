"""Request parameter types: taxonomy, unit of measure and frame period."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

_PERIOD_RE = re.compile(r"^CY(\d+)(?:Q(\d+)(I)?)?$")


@dataclass
class ApiResponse(Generic[T]):
    """HTTP status plus the parsed body of a JSON endpoint."""

    status: int
    data: T


class Taxonomy(str, Enum):
    US_GAAP = "us-gaap"
    IFRS_FULL = "ifrs-full"
    DEI = "dei"
    SRT = "srt"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "Taxonomy":
        """Case-insensitive lookup by the URL form, e.g. ``"us-gaap"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown taxonomy {value!r}, expected one of: {names}") from None


@dataclass(frozen=True)
class Unit:
    """A unit of measure as used in frame URLs: ``USD`` or ``USD-per-shares``."""

    numerator: str
    denominator: str | None = None

    def __post_init__(self):
        if not self.numerator:
            raise ValueError("Unit must not be empty")
        if self.denominator == "":
            raise ValueError("Compound unit needs a denominator")

    @classmethod
    def simple(cls, name: str) -> "Unit":
        return cls(name)

    @classmethod
    def compound(cls, numerator: str, denominator: str) -> "Unit":
        return cls(numerator, denominator)

    @classmethod
    def parse(cls, text) -> "Unit":
        if isinstance(text, cls):
            return text
        numerator, sep, denominator = str(text).partition("-per-")
        if sep:
            return cls(numerator, denominator)
        return cls(numerator)

    @property
    def is_compound(self) -> bool:
        return self.denominator is not None

    def __str__(self) -> str:
        if self.denominator is None:
            return self.numerator
        return f"{self.numerator}-per-{self.denominator}"


class PeriodKind(Enum):
    ANNUAL = "annual"
    QUARTERLY = "quarterly"
    INSTANTANEOUS = "instantaneous"


@dataclass(frozen=True)
class Period:
    """A calendar frame period.

    ``CY2019`` is a calendar year, ``CY2019Q1`` the duration of a quarter and
    ``CY2019Q1I`` the instant at the end of that quarter (balance-sheet items).
    """

    kind: PeriodKind
    year: int
    quarter: int | None = None

    def __post_init__(self):
        if self.year < 0:
            raise ValueError(f"Invalid year: {self.year}")
        if self.kind is PeriodKind.ANNUAL:
            if self.quarter is not None:
                raise ValueError("Annual periods have no quarter")
        elif self.quarter is None or not 1 <= self.quarter <= 4:
            raise ValueError(f"Quarter must be between 1 and 4, got {self.quarter}")

    @classmethod
    def annual(cls, year: int) -> "Period":
        return cls(PeriodKind.ANNUAL, year)

    @classmethod
    def quarterly(cls, year: int, quarter: int) -> "Period":
        return cls(PeriodKind.QUARTERLY, year, quarter)

    @classmethod
    def instantaneous(cls, year: int, quarter: int) -> "Period":
        return cls(PeriodKind.INSTANTANEOUS, year, quarter)

    @classmethod
    def parse(cls, text) -> "Period":
        if isinstance(text, cls):
            return text
        match = _PERIOD_RE.match(str(text))
        if not match:
            raise ValueError(f"Invalid period {text!r}, expected CY####, CY####Q# or CY####Q#I")

        year, quarter, instant = match.groups()
        if quarter is None:
            return cls.annual(int(year))
        if instant:
            return cls.instantaneous(int(year), int(quarter))
        return cls.quarterly(int(year), int(quarter))

    def __str__(self) -> str:
        if self.kind is PeriodKind.ANNUAL:
            return f"CY{self.year}"
        if self.kind is PeriodKind.QUARTERLY:
            return f"CY{self.year}Q{self.quarter}"
        return f"CY{self.year}Q{self.quarter}I"
