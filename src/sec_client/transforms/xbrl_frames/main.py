"""Transform an XBRL frame into one row per reporting company."""

import pyarrow as pa
from .test import test

DATASET_ID = "edgar_xbrl_frames"

SCHEMA = pa.schema([
    pa.field("cik", pa.string(), nullable=False),
    pa.field("entity_name", pa.string(), nullable=False),
    pa.field("location", pa.string()),
    pa.field("start_date", pa.string()),
    pa.field("end_date", pa.string(), nullable=False),
    pa.field("value", pa.float64(), nullable=False),
    pa.field("accession", pa.string(), nullable=False),
], metadata={
    "dataset_id": DATASET_ID,
    "title": "SEC EDGAR XBRL Frames",
    "description": "One concept's value across all reporting companies for a calendar period.",
})


def transform(frames) -> pa.Table:
    records = [
        {
            "cik": str(value.cik).zfill(10),
            "entity_name": value.entity_name,
            "location": value.loc,
            "start_date": value.start,
            "end_date": value.end,
            "value": value.val,
            "accession": value.accn,
        }
        for value in frames.data
    ]

    # Frame identity travels in the schema metadata
    schema = SCHEMA.with_metadata({
        **SCHEMA.metadata,
        b"taxonomy": frames.taxonomy.encode(),
        b"tag": frames.tag.encode(),
        b"unit": frames.uom.encode(),
        b"period": (frames.ccp or "").encode(),
    })
    table = pa.Table.from_pylist(records, schema=schema)

    test(table)

    return table
