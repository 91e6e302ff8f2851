"""Async client for the SEC EDGAR API.

Every endpoint method builds its URL, waits on the client's rate governor,
sends one GET through the transport and returns a typed model. Failures
raise an ``EdgarError``; nothing is retried.

    async with EdgarClient("Example Corp admin@example.com") as client:
        facts = await client.get_company_facts("320193")
        latest = facts.data.most_recent_value("us-gaap", "Assets", "USD")
"""

import asyncio
import logging
from pathlib import Path

from sec_client import endpoints
from sec_client.config import ClientConfig
from sec_client.models import (
    CompanyConcept,
    CompanyFacts,
    CompanyTickers,
    CompanyTickersMf,
    Recent,
    SubmissionHistory,
    XbrlFrames,
)
from sec_client.rate_limit import RateGovernor
from sec_client.responses import check_response, parse_model
from sec_client.transport import make_transport
from sec_client.types import ApiResponse
from sec_client.utils import download

logger = logging.getLogger(__name__)

JSON_ACCEPT = "application/json"
ZIP_ACCEPT = "application/zip"


class EdgarClient:
    def __init__(self, config: ClientConfig | str | None = None, *, transport=None, governor: RateGovernor | None = None):
        if config is None:
            config = ClientConfig.from_env()
        elif isinstance(config, str):
            config = ClientConfig(user_agent=config)

        self.config = config
        self.transport = transport or make_transport(config)
        self._owns_governor = governor is None
        self.governor = governor or RateGovernor(config.rate_limit, config.rate_period)

    def _headers(self, accept):
        return {
            "User-Agent": self.config.user_agent,
            "Accept": accept,
            "Accept-Encoding": "gzip, deflate",
        }

    async def _request(self, url: str, accept: str = JSON_ACCEPT):
        target = self.config.build_url(url)
        await self.governor.acquire()

        logger.debug(f"GET {target}")
        response = await self.transport.send(target, self._headers(accept))
        logger.debug(f"GET {target} -> {response.status} ({len(response.body):,} bytes)")
        return response

    async def _get(self, url: str, model) -> ApiResponse:
        response = await self._request(url)
        body = check_response(response, url)
        return ApiResponse(status=response.status, data=parse_model(model, body, url))

    async def get_submissions_history(self, cik) -> ApiResponse[SubmissionHistory]:
        """Company metadata and its most recent filings."""
        return await self._get(endpoints.submissions_url(cik), SubmissionHistory)

    async def get_submissions_file(self, filename: str) -> ApiResponse[Recent]:
        """An older page of filings named in ``filings.files`` of a submission history."""
        return await self._get(endpoints.submissions_file_url(filename), Recent)

    async def get_company_concept(self, cik, taxonomy, tag: str) -> ApiResponse[CompanyConcept]:
        return await self._get(endpoints.company_concept_url(cik, taxonomy, tag), CompanyConcept)

    async def get_company_facts(self, cik) -> ApiResponse[CompanyFacts]:
        return await self._get(endpoints.company_facts_url(cik), CompanyFacts)

    async def get_xbrl_frames(self, taxonomy, tag: str, unit, period) -> ApiResponse[XbrlFrames]:
        """One concept across all companies; ``unit`` and ``period`` accept their text forms."""
        return await self._get(endpoints.frames_url(taxonomy, tag, unit, period), XbrlFrames)

    async def get_company_tickers(self) -> ApiResponse[CompanyTickers]:
        return await self._get(endpoints.COMPANY_TICKERS_URL, CompanyTickers)

    async def get_company_tickers_mf(self) -> ApiResponse[CompanyTickersMf]:
        return await self._get(endpoints.COMPANY_TICKERS_MF_URL, CompanyTickersMf)

    async def _download_archive(self, url: str, output_dir) -> None:
        response = await self._request(url, accept=ZIP_ACCEPT)
        body = check_response(response, url)
        logger.info(f"Downloaded {len(body):,} bytes from {url}")

        written = await asyncio.to_thread(
            download.extract_archive_bytes, body, output_dir, progress=self.config.show_progress
        )
        logger.info(f"Extracted {written:,} files into {output_dir}")

    async def download_bulk_submissions(self, output_dir) -> None:
        """Fetch ``submissions.zip`` and extract it into ``output_dir``.

        The archive is several gigabytes; it is held in memory, spooled to a
        temporary file and removed once extraction ends.
        """
        await self._download_archive(endpoints.BULK_SUBMISSIONS_URL, output_dir)

    async def download_bulk_company_facts(self, output_dir) -> None:
        """Fetch ``companyfacts.zip`` and extract it into ``output_dir``."""
        await self._download_archive(endpoints.BULK_COMPANY_FACTS_URL, output_dir)

    async def extract_zip_files(self, zip_path, output_dir) -> None:
        """Extract an archive already on disk, e.g. one downloaded earlier."""
        await asyncio.to_thread(
            download.extract_zip, Path(zip_path), output_dir, progress=self.config.show_progress
        )

    async def aclose(self) -> None:
        """Close the transport, and the governor unless it was passed in."""
        if self._owns_governor:
            self.governor.close()
        await self.transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
