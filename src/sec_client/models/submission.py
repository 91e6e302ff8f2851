"""Submission history: company metadata plus its filing index."""

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from sec_client.models.base import EdgarModel
from sec_client.transforms.edgar_filings.main import transform as filings_to_table


@dataclass(frozen=True)
class FilingEntry:
    """One filing, flattened out of the column-oriented ``Recent`` arrays."""

    accession_number: str
    filing_date: str
    report_date: str
    acceptance_date_time: str
    form: str
    primary_document: str
    primary_doc_description: str
    file_number: str
    film_number: str
    items: str
    size: int
    is_xbrl: bool
    is_inline_xbrl: bool
    is_paper: bool
    instance_url: str | None = None


def _at(values, i, default):
    return values[i] if i < len(values) else default


class Recent(EdgarModel):
    """Parallel arrays, one element per filing.

    The SEC serves the latest ~1000 filings in this shape under
    ``filings.recent`` and older ones as separate pages with the same shape.
    """

    accession_number: list[str] = Field(default_factory=list, alias="accessionNumber")
    filing_date: list[str] = Field(default_factory=list, alias="filingDate")
    report_date: list[str] = Field(default_factory=list, alias="reportDate")
    acceptance_date_time: list[str] = Field(default_factory=list, alias="acceptanceDateTime")
    act: list[str] = Field(default_factory=list)
    form: list[str] = Field(default_factory=list)
    primary_document: list[str] = Field(default_factory=list, alias="primaryDocument")
    primary_doc_description: list[str] = Field(default_factory=list, alias="primaryDocDescription")
    file_number: list[str] = Field(default_factory=list, alias="fileNumber")
    film_number: list[str] = Field(default_factory=list, alias="filmNumber")
    items: list[str] = Field(default_factory=list)
    size: list[int] = Field(default_factory=list)
    is_xbrl: list[int] = Field(default_factory=list, alias="isXBRL")
    is_inline_xbrl: list[int] = Field(default_factory=list, alias="isInlineXBRL")
    is_paper: list[int] = Field(default_factory=list, alias="isPaper")
    instance_url: list[str | None] = Field(default_factory=list, alias="instanceUrl")

    def entries(self) -> list[FilingEntry]:
        """Zip the arrays into rows.

        Rows missing a form or filing date are skipped; any other missing
        column falls back to an empty value.
        """
        entries = []
        for i, accession_number in enumerate(self.accession_number):
            if i >= len(self.form) or i >= len(self.filing_date):
                continue

            entries.append(FilingEntry(
                accession_number=accession_number,
                filing_date=self.filing_date[i],
                report_date=_at(self.report_date, i, ""),
                acceptance_date_time=_at(self.acceptance_date_time, i, ""),
                form=self.form[i],
                primary_document=_at(self.primary_document, i, ""),
                primary_doc_description=_at(self.primary_doc_description, i, ""),
                file_number=_at(self.file_number, i, ""),
                film_number=_at(self.film_number, i, ""),
                items=_at(self.items, i, ""),
                size=_at(self.size, i, 0),
                is_xbrl=_at(self.is_xbrl, i, 0) == 1,
                is_inline_xbrl=_at(self.is_inline_xbrl, i, 0) == 1,
                is_paper=_at(self.is_paper, i, 0) == 1,
                instance_url=_at(self.instance_url, i, None),
            ))
        return entries


class FileInfo(EdgarModel):
    name: str
    filing_count: int = Field(alias="filingCount")
    filing_from: str = Field(alias="filingFrom")
    filing_to: str = Field(alias="filingTo")


class Filings(EdgarModel):
    recent: Recent = Field(default_factory=Recent)
    files: list[FileInfo] | None = None


class FormerName(EdgarModel):
    name: str
    from_date: str | None = Field(default=None, alias="from")
    to_date: str | None = Field(default=None, alias="to")


class SubmissionHistory(EdgarModel):
    cik: str
    name: str
    entity_type: str = Field(default="", alias="entityType")
    sic: str = ""
    sic_description: str = Field(default="", alias="sicDescription")
    insider_transaction_for_owner_exists: int = Field(default=0, alias="insiderTransactionForOwnerExists")
    insider_transaction_for_issuer_exists: int = Field(default=0, alias="insiderTransactionForIssuerExists")
    tickers: list[str] = Field(default_factory=list)
    exchanges: list[str | None] = Field(default_factory=list)
    ein: str | None = None
    state_of_incorporation: str | None = Field(default=None, alias="stateOfIncorporation")
    fiscal_year_end: str | None = Field(default=None, alias="fiscalYearEnd")
    addresses: dict[str, Any] = Field(default_factory=dict)
    former_names: list[FormerName] = Field(default_factory=list, alias="formerNames")
    filings: Filings
    files: list[FileInfo] | None = None

    def recent_filings(self) -> list[FilingEntry]:
        """Filings from ``filings.recent`` only (the latest ~1000)."""
        return self.filings.recent.entries()

    async def all_filings(self, client) -> list[FilingEntry]:
        """Recent filings followed by every older page listed in ``filings.files``.

        Each page is fetched through ``client.get_submissions_file``; the first
        failing page aborts the whole call.
        """
        filings = self.recent_filings()
        for file_info in self.filings.files or []:
            page = await client.get_submissions_file(file_info.name)
            filings.extend(page.data.entries())
        return filings

    def ticker_map(self) -> dict[str, str]:
        """Ticker to exchange, or empty if the two lists do not line up."""
        if len(self.tickers) != len(self.exchanges):
            return {}
        return {ticker: exchange or "" for ticker, exchange in zip(self.tickers, self.exchanges)}

    def to_table(self):
        return filings_to_table(self)
