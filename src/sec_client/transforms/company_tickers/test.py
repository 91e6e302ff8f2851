import logging

import pyarrow as pa

from sec_client.transforms.validation import assert_cik_format, validate

logger = logging.getLogger(__name__)


def test(table: pa.Table) -> None:
    """Validate SEC company tickers output."""
    validate(table, {
        "columns": {
            "cik": "string",
            "name": "string",
            "ticker": "string",
            "exchange": "string",
        },
        "not_null": ["cik", "name", "ticker"],
    })

    assert_cik_format(table)

    logger.debug(f"Validated {len(table):,} tickers")
