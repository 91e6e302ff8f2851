import logging

import pyarrow as pa

from sec_client.transforms.validation import assert_cik_format, assert_valid_date, validate

logger = logging.getLogger(__name__)


def test(table: pa.Table) -> None:
    """Validate SEC XBRL company facts output."""
    validate(table, {
        "columns": {
            "cik": "string",
            "entity_name": "string",
            "taxonomy": "string",
            "concept": "string",
            "label": "string",
            "unit": "string",
            "value": "string",
            "end_date": "string",
            "fiscal_year": "int",
            "fiscal_period": "string",
            "form": "string",
            "filed": "string",
            "accession": "string",
        },
        "not_null": ["cik", "entity_name", "taxonomy", "concept", "unit", "end_date", "form", "filed", "accession"],
    })

    # End dates and filed dates should be valid
    assert_valid_date(table, "end_date")
    assert_valid_date(table, "filed")

    assert_cik_format(table)

    logger.debug(f"Validated {len(table):,} XBRL facts")
