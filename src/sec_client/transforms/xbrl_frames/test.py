import logging

import pyarrow as pa

from sec_client.errors import ParseError
from sec_client.transforms.validation import assert_cik_format, assert_valid_date, validate

logger = logging.getLogger(__name__)


def test(table: pa.Table) -> None:
    """Validate SEC XBRL frame output."""
    validate(table, {
        "columns": {
            "cik": "string",
            "entity_name": "string",
            "location": "string",
            "start_date": "string",
            "end_date": "string",
            "value": "float",
            "accession": "string",
        },
        "not_null": ["cik", "entity_name", "end_date", "value", "accession"],
    })

    assert_valid_date(table, "start_date")
    assert_valid_date(table, "end_date")

    # A frame holds at most one value per company
    ciks = table.column("cik").to_pylist()
    if len(ciks) != len(set(ciks)):
        raise ParseError("CIKs should be unique within a frame")

    assert_cik_format(table)

    logger.debug(f"Validated {len(table):,} frame values")
