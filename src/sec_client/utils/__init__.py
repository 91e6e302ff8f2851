"""CIK formatting and bulk-archive helpers for SEC EDGAR."""

from sec_client.utils.cik import format_cik, is_valid_cik
from sec_client.utils.download import (
    extract_archive_bytes,
    extract_zip,
    extract_zip_from_memory,
    write_temp_file,
)

__all__ = [
    "format_cik",
    "is_valid_cik",
    "extract_archive_bytes",
    "extract_zip",
    "extract_zip_from_memory",
    "write_temp_file",
]
