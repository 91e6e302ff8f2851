"""Cross-company frames: one concept, one unit, one calendar period."""

import logging
import statistics
from dataclasses import dataclass

from pydantic import Field

from sec_client.models.base import EdgarModel
from sec_client.transforms.xbrl_frames.main import transform as frames_to_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameStatistics:
    count: int
    mean: float
    median: float
    min: float
    max: float
    std_dev: float


class FrameValue(EdgarModel):
    accn: str
    cik: int
    entity_name: str = Field(alias="entityName")
    loc: str | None = None
    start: str | None = None
    end: str
    val: float
    fy: int | None = None
    fp: str | None = None
    form: str | None = None
    filed: str | None = None


class XbrlFrames(EdgarModel):
    """The latest value each company filed for the frame period.

    ``ccp`` is the calendar period (``CY2019Q1I``), ``uom`` the unit and
    ``pts`` the number of data points.
    """

    taxonomy: str
    tag: str
    ccp: str | None = None
    uom: str = ""
    label: str = ""
    description: str = ""
    pts: int | None = None
    data: list[FrameValue] = Field(default_factory=list)

    def values_for_company(self, cik) -> list[FrameValue]:
        """Values reported by one company; ``cik`` may be padded (``"0000320193"``)."""
        try:
            cik_number = int(str(cik).strip())
        except ValueError as e:
            logger.error(f"Failed to parse CIK '{cik}': {e}")
            return []
        return [v for v in self.data if v.cik == cik_number]

    def top_companies(self, n: int, ascending: bool = False) -> list[FrameValue]:
        return sorted(self.data, key=lambda v: v.val, reverse=not ascending)[:n]

    def statistics(self) -> FrameStatistics:
        """Count, mean, median, min, max and sample standard deviation of ``val``.

        All zeros for an empty frame; the deviation is 0 for a single value.
        """
        values = [v.val for v in self.data]
        if not values:
            return FrameStatistics(0, 0.0, 0.0, 0.0, 0.0, 0.0)

        return FrameStatistics(
            count=len(values),
            mean=statistics.fmean(values),
            median=statistics.median(values),
            min=min(values),
            max=max(values),
            std_dev=statistics.stdev(values) if len(values) > 1 else 0.0,
        )

    def to_table(self):
        return frames_to_table(self)
