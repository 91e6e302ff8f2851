"""``company_tickers_exchange.json``: one row per listed ticker."""

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from sec_client.errors import RowShapeError
from sec_client.models.base import EdgarModel
from sec_client.transforms.company_tickers.main import transform as tickers_to_table

ROW_WIDTH = 4


def check_row(row, index):
    if len(row) != ROW_WIDTH:
        raise RowShapeError(f"Row {index} has {len(row)} columns, expected {ROW_WIDTH}")


def row_cik(row, index) -> int:
    cik = row[0]
    if isinstance(cik, bool) or not isinstance(cik, int) or cik < 0:
        raise RowShapeError(f"Row {index} has invalid CIK {cik!r}")
    return cik


def row_text(row, column, index, label) -> str:
    value = row[column]
    if not isinstance(value, str):
        raise RowShapeError(f"Row {index} has invalid {label} {value!r}")
    return value


@dataclass(frozen=True)
class CompanyTickerEntry:
    cik: int
    name: str
    ticker: str
    exchange: str


class CompanyTickers(EdgarModel):
    """Column names in ``fields`` (``cik, name, ticker, exchange``), rows in ``data``."""

    fields: list[str] = Field(default_factory=list)
    data: list[list[Any]] = Field(default_factory=list)

    def entries(self) -> list[CompanyTickerEntry]:
        """Typed rows; raises ``RowShapeError`` on the first malformed row.

        A missing exchange (``null``) becomes an empty string.
        """
        entries = []
        for i, row in enumerate(self.data):
            check_row(row, i)
            exchange = row[3] if isinstance(row[3], str) else ""
            entries.append(CompanyTickerEntry(
                cik=row_cik(row, i),
                name=row_text(row, 1, i, "name"),
                ticker=row_text(row, 2, i, "ticker"),
                exchange=exchange,
            ))
        return entries

    def to_table(self):
        return tickers_to_table(self.entries())
