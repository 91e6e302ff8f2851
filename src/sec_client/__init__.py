"""Typed async client for the SEC EDGAR REST API."""

import logging

from sec_client.client import EdgarClient
from sec_client.config import ClientConfig, get_user_agent
from sec_client.errors import (
    ApiError,
    EdgarError,
    EdgarIOError,
    InvalidCikError,
    NetworkError,
    ParseError,
    RateLimitExceeded,
    RequestError,
    RowShapeError,
    ZipError,
)
from sec_client.rate_limit import RateGovernor
from sec_client.transport import AsyncHttpTransport, HttpResponse, ThreadedHttpTransport, Transport
from sec_client.types import ApiResponse, Period, PeriodKind, Taxonomy, Unit
from sec_client.utils.cik import format_cik

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EdgarClient",
    "ClientConfig",
    "get_user_agent",
    "ApiError",
    "EdgarError",
    "EdgarIOError",
    "InvalidCikError",
    "NetworkError",
    "ParseError",
    "RateLimitExceeded",
    "RequestError",
    "RowShapeError",
    "ZipError",
    "RateGovernor",
    "AsyncHttpTransport",
    "HttpResponse",
    "ThreadedHttpTransport",
    "Transport",
    "ApiResponse",
    "Period",
    "PeriodKind",
    "Taxonomy",
    "Unit",
    "format_cik",
]
