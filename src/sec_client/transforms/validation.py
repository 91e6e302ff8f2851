"""Table checks shared by the dataset validators."""

from datetime import date

import pyarrow as pa

from sec_client.errors import ParseError

TYPE_CHECKS = {
    "string": pa.types.is_string,
    "bool": pa.types.is_boolean,
    "int": pa.types.is_integer,
    "float": pa.types.is_floating,
    "list": pa.types.is_list,
}


def validate(table: pa.Table, rules: dict) -> None:
    """Check column types, non-null columns and row count.

    ``rules`` holds ``columns`` (name to kind, see ``TYPE_CHECKS``),
    ``not_null`` and ``min_rows``.
    """
    for column, kind in rules.get("columns", {}).items():
        if column not in table.column_names:
            raise ParseError(f"Missing column {column!r}")
        actual = table.schema.field(column).type
        if not TYPE_CHECKS[kind](actual):
            raise ParseError(f"Column {column!r} should be {kind}, got {actual}")

    for column in rules.get("not_null", []):
        nulls = table.column(column).null_count
        if nulls:
            raise ParseError(f"Column {column!r} has {nulls} null values")

    min_rows = rules.get("min_rows", 0)
    if len(table) < min_rows:
        raise ParseError(f"Expected at least {min_rows:,} rows, got {len(table):,}")


def assert_valid_date(table: pa.Table, column: str) -> None:
    for value in table.column(column).to_pylist():
        if value is None:
            continue
        try:
            date.fromisoformat(value)
        except ValueError:
            raise ParseError(f"Column {column!r} has invalid date {value!r}") from None


def assert_cik_format(table: pa.Table, column: str = "cik") -> None:
    # CIKs should be 10-digit zero-padded
    for cik in table.column(column).to_pylist():
        if cik is None or len(cik) != 10 or not cik.isdigit():
            raise ParseError(f"Column {column!r} has malformed CIK {cik!r}")
