import logging

import pyarrow as pa

from sec_client.transforms.validation import assert_cik_format, assert_valid_date, validate

logger = logging.getLogger(__name__)


def test(table: pa.Table) -> None:
    """Validate SEC EDGAR filings output."""
    validate(table, {
        "columns": {
            "cik": "string",
            "company_name": "string",
            "form_type": "string",
            "filing_date": "string",
            "accession_number": "string",
            "file_number": "string",
            "report_date": "string",
            "is_xbrl": "bool",
            "is_inline_xbrl": "bool",
            "primary_document": "string",
        },
        "not_null": ["cik", "company_name", "form_type", "filing_date", "accession_number"],
    })

    # Filing dates should be valid
    assert_valid_date(table, "filing_date")
    assert_valid_date(table, "report_date")

    assert_cik_format(table)

    logger.debug(f"Validated {len(table):,} filings")
