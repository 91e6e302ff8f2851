from sec_client.models.company_concept import CompanyConcept, ConceptValue
from sec_client.models.company_facts import CompanyFacts, Fact, FactRecord, FactValue
from sec_client.models.company_tickers import CompanyTickerEntry, CompanyTickers
from sec_client.models.company_tickers_mf import CompanyTickersMf, MutualFundTickerEntry
from sec_client.models.frames import FrameStatistics, FrameValue, XbrlFrames
from sec_client.models.submission import (
    FileInfo,
    FilingEntry,
    Filings,
    FormerName,
    Recent,
    SubmissionHistory,
)

__all__ = [
    "CompanyConcept",
    "ConceptValue",
    "CompanyFacts",
    "Fact",
    "FactRecord",
    "FactValue",
    "CompanyTickerEntry",
    "CompanyTickers",
    "CompanyTickersMf",
    "MutualFundTickerEntry",
    "FrameStatistics",
    "FrameValue",
    "XbrlFrames",
    "FileInfo",
    "FilingEntry",
    "Filings",
    "FormerName",
    "Recent",
    "SubmissionHistory",
]
