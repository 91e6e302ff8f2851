"""Transform SEC EDGAR filings from submissions data."""

import pyarrow as pa
from .test import test

DATASET_ID = "edgar_filings"

SCHEMA = pa.schema([
    pa.field("cik", pa.string(), nullable=False),
    pa.field("company_name", pa.string(), nullable=False),
    pa.field("form_type", pa.string(), nullable=False),
    pa.field("filing_date", pa.string(), nullable=False),
    pa.field("accession_number", pa.string(), nullable=False),
    pa.field("file_number", pa.string()),
    pa.field("report_date", pa.string()),
    pa.field("is_xbrl", pa.bool_(), nullable=False),
    pa.field("is_inline_xbrl", pa.bool_(), nullable=False),
    pa.field("primary_document", pa.string()),
], metadata={
    "dataset_id": DATASET_ID,
    "title": "SEC EDGAR Filings",
    "description": "Filing dates, form types and accession numbers from a company's submission history.",
})


def transform(history, filings=None) -> pa.Table:
    """Build the filings table for one company.

    ``filings`` defaults to the recent filings of ``history``; pass the
    result of ``all_filings`` to include older pages.
    """
    cik = str(history.cik).zfill(10)
    if filings is None:
        filings = history.recent_filings()

    records = [
        {
            "cik": cik,
            "company_name": history.name,
            "form_type": filing.form,
            "filing_date": filing.filing_date,
            "accession_number": filing.accession_number,
            "file_number": filing.file_number or None,
            "report_date": filing.report_date or None,
            "is_xbrl": filing.is_xbrl,
            "is_inline_xbrl": filing.is_inline_xbrl,
            "primary_document": filing.primary_document or None,
        }
        for filing in filings
    ]

    table = pa.Table.from_pylist(records, schema=SCHEMA)

    test(table)

    return table
