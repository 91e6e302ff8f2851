"""``company_tickers_mf.json``: mutual fund series and share classes."""

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from sec_client.models.base import EdgarModel
from sec_client.models.company_tickers import check_row, row_cik, row_text
from sec_client.transforms.mutual_fund_tickers.main import transform as funds_to_table


@dataclass(frozen=True)
class MutualFundTickerEntry:
    cik: int
    series_id: str
    class_id: str
    symbol: str


class CompanyTickersMf(EdgarModel):
    fields: list[str] = Field(default_factory=list)
    data: list[list[Any]] = Field(default_factory=list)

    def entries(self) -> list[MutualFundTickerEntry]:
        entries = []
        for i, row in enumerate(self.data):
            check_row(row, i)
            entries.append(MutualFundTickerEntry(
                cik=row_cik(row, i),
                series_id=row_text(row, 1, i, "series ID"),
                class_id=row_text(row, 2, i, "class ID"),
                symbol=row_text(row, 3, i, "symbol"),
            ))
        return entries

    def to_table(self):
        return funds_to_table(self.entries())
