import logging

import pyarrow as pa

from sec_client.errors import ParseError
from sec_client.transforms.validation import assert_cik_format, validate

logger = logging.getLogger(__name__)


def test(table: pa.Table) -> None:
    """Validate SEC mutual fund tickers output."""
    validate(table, {
        "columns": {
            "cik": "string",
            "series_id": "string",
            "class_id": "string",
            "symbol": "string",
        },
        "not_null": ["cik", "series_id", "class_id", "symbol"],
    })

    assert_cik_format(table)

    # Series IDs look like S000012345, class IDs like C000033669
    for column, prefix in (("series_id", "S"), ("class_id", "C")):
        bad = [v for v in table.column(column).to_pylist() if not v.startswith(prefix)]
        if bad:
            raise ParseError(f"Column {column!r} has unexpected identifiers: {bad[:5]}")

    logger.debug(f"Validated {len(table):,} fund share classes")
