"""Transform the SEC exchange ticker list."""

import pyarrow as pa
from .test import test

DATASET_ID = "edgar_company_tickers"

SCHEMA = pa.schema([
    pa.field("cik", pa.string(), nullable=False),
    pa.field("name", pa.string(), nullable=False),
    pa.field("ticker", pa.string(), nullable=False),
    pa.field("exchange", pa.string()),
], metadata={
    "dataset_id": DATASET_ID,
    "title": "SEC Company Tickers",
    "description": "Exchange-listed tickers with their company CIK and name.",
})


def transform(entries) -> pa.Table:
    """Build the tickers table from ``CompanyTickerEntry`` rows."""
    records = [
        {
            "cik": str(entry.cik).zfill(10),
            "name": entry.name,
            "ticker": entry.ticker,
            # Empty exchange means the SEC has none on file
            "exchange": entry.exchange or None,
        }
        for entry in entries
    ]

    table = pa.Table.from_pylist(records, schema=SCHEMA)

    test(table)

    return table
