"""Transform the SEC mutual fund ticker list."""

import pyarrow as pa
from .test import test

DATASET_ID = "edgar_mutual_fund_tickers"

SCHEMA = pa.schema([
    pa.field("cik", pa.string(), nullable=False),
    pa.field("series_id", pa.string(), nullable=False),
    pa.field("class_id", pa.string(), nullable=False),
    pa.field("symbol", pa.string(), nullable=False),
], metadata={
    "dataset_id": DATASET_ID,
    "title": "SEC Mutual Fund Tickers",
    "description": "Mutual fund share-class symbols with their series and class identifiers.",
})


def transform(entries) -> pa.Table:
    records = [
        {
            "cik": str(entry.cik).zfill(10),
            "series_id": entry.series_id,
            "class_id": entry.class_id,
            "symbol": entry.symbol,
        }
        for entry in entries
    ]

    table = pa.Table.from_pylist(records, schema=SCHEMA)

    test(table)

    return table
