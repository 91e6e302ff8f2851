"""Shared payloads shaped like real data.sec.gov / www.sec.gov responses."""

import io
import zipfile

import pytest

from sec_client.config import ClientConfig

USER_AGENT = "Test Corp test@example.com"


@pytest.fixture
def config():
    return ClientConfig(user_agent=USER_AGENT)


@pytest.fixture
def submissions_payload():
    return {
        "cik": "320193",
        "entityType": "operating",
        "sic": "3571",
        "sicDescription": "Electronic Computers",
        "insiderTransactionForOwnerExists": 0,
        "insiderTransactionForIssuerExists": 1,
        "name": "Apple Inc.",
        "tickers": ["AAPL"],
        "exchanges": ["Nasdaq"],
        "ein": "942404110",
        "stateOfIncorporation": "CA",
        "fiscalYearEnd": "0928",
        "addresses": {"business": {"city": "CUPERTINO", "stateOrCountry": "CA"}},
        "formerNames": [
            {"name": "APPLE COMPUTER INC", "from": "1994-01-26T00:00:00.000Z", "to": "2007-01-04T00:00:00.000Z"}
        ],
        "filings": {
            "recent": {
                "accessionNumber": ["0000320193-23-000106", "0000320193-23-000077"],
                "filingDate": ["2023-11-03", "2023-08-04"],
                "reportDate": ["2023-09-30", ""],
                "acceptanceDateTime": ["2023-11-02T18:08:27.000Z", "2023-08-03T18:04:43.000Z"],
                "act": ["34", "34"],
                "form": ["10-K", "8-K"],
                "fileNumber": ["001-36743", "001-36743"],
                "filmNumber": ["231373899", "231140893"],
                "items": ["", "2.02,9.01"],
                "size": [9745812, 402563],
                "isXBRL": [1, 0],
                "isInlineXBRL": [1, 0],
                "primaryDocument": ["aapl-20230930.htm", "aapl-20230803.htm"],
                "primaryDocDescription": ["10-K", "8-K"],
            },
            "files": [
                {
                    "name": "CIK0000320193-submissions-001.json",
                    "filingCount": 1,
                    "filingFrom": "1994-01-26",
                    "filingTo": "2001-05-01",
                }
            ],
        },
    }


@pytest.fixture
def submissions_page_payload():
    return {
        "accessionNumber": ["0000912057-01-512345"],
        "filingDate": ["2001-05-01"],
        "reportDate": ["2001-03-31"],
        "acceptanceDateTime": ["2001-05-01T12:00:00.000Z"],
        "form": ["10-Q"],
        "fileNumber": ["000-10030"],
        "filmNumber": ["1617000"],
        "items": [""],
        "size": [120000],
        "isXBRL": [0],
        "isInlineXBRL": [0],
        "primaryDocument": ["d10q.txt"],
        "primaryDocDescription": ["10-Q"],
    }


@pytest.fixture
def concept_payload():
    return {
        "cik": 320193,
        "taxonomy": "us-gaap",
        "tag": "AccountsPayableCurrent",
        "label": "Accounts Payable, Current",
        "description": "Carrying value as of the balance sheet date of liabilities incurred and payable to vendors.",
        "entityName": "Apple Inc.",
        "units": {
            "USD": [
                {
                    "end": "2023-12-31", "val": 1000000, "accn": "0000320193-23-000064",
                    "fy": 2023, "fp": "FY", "form": "10-K", "filed": "2023-11-03",
                    "frame": "CY2023Q4I", "start": "2023-01-01",
                },
                {
                    "end": "2023-09-30", "val": 950000, "accn": "0000320193-23-000106",
                    "fy": 2024, "fp": "Q1", "form": "10-Q", "filed": "2023-11-02",
                },
            ],
            "EUR": [
                {
                    "end": "2023-12-31", "val": 850000, "accn": "0000320193-23-000064",
                    "fy": 2023, "fp": "FY", "form": "10-K", "filed": "2023-11-03",
                }
            ],
        },
    }


@pytest.fixture
def facts_payload():
    return {
        "cik": 320193,
        "entityName": "Apple Inc.",
        "facts": {
            "dei": {
                "EntityCommonStockSharesOutstanding": {
                    "label": "Entity Common Stock, Shares Outstanding",
                    "description": "Number of shares outstanding.",
                    "units": {
                        "shares": [
                            {
                                "end": "2023-10-20", "val": 15552752000, "accn": "0000320193-23-000106",
                                "fy": 2023, "fp": "FY", "form": "10-K", "filed": "2023-11-03",
                                "frame": "CY2023Q3I",
                            }
                        ]
                    },
                },
                "EntityRegistrantName": {
                    "label": None,
                    "description": None,
                    "units": {
                        "pure": [
                            {
                                "end": "2023-09-30", "val": "Apple Inc.", "accn": "0000320193-23-000106",
                                "fy": 2023, "fp": "FY", "form": "10-K", "filed": "2023-11-03",
                            }
                        ]
                    },
                },
            },
            "us-gaap": {
                "Assets": {
                    "label": "Assets",
                    "description": "Sum of the carrying amounts of all assets.",
                    "units": {
                        "USD": [
                            {
                                "end": "2022-09-24", "val": 352755000000, "accn": "0000320193-22-000108",
                                "fy": 2022, "fp": "FY", "form": "10-K", "filed": "2022-10-28",
                            },
                            {
                                "end": "2023-09-30", "val": 352583000000, "accn": "0000320193-23-000106",
                                "fy": 2023, "fp": "FY", "form": "10-K", "filed": "2023-11-03",
                                "frame": "CY2023Q3I",
                            },
                            {
                                "end": "2023-07-01", "val": 335038000000, "accn": "0000320193-23-000077",
                                "fy": 2023, "fp": "Q3", "form": "10-Q", "filed": "2023-08-04",
                            },
                        ]
                    },
                },
                "EarningsPerShareBasic": {
                    "label": "Earnings Per Share, Basic",
                    "units": {
                        "USD/shares": [
                            {
                                "start": "2022-09-25", "end": "2023-09-30", "val": 6.16,
                                "accn": "0000320193-23-000106", "fy": 2023, "fp": "FY",
                                "form": "10-K", "filed": "2023-11-03",
                            }
                        ]
                    },
                },
            },
        },
    }


@pytest.fixture
def frames_payload():
    return {
        "taxonomy": "us-gaap",
        "tag": "AccountsPayableCurrent",
        "ccp": "CY2019Q1I",
        "uom": "USD",
        "label": "Accounts Payable, Current",
        "description": "Carrying value of liabilities incurred and payable to vendors.",
        "pts": 4,
        "data": [
            {"accn": "0001104659-19-016320", "cik": 1750, "entityName": "AAR CORP", "loc": "US-IL",
             "end": "2019-02-28", "val": 218600000},
            {"accn": "0000320193-19-000066", "cik": 320193, "entityName": "Apple Inc.", "loc": "US-CA",
             "end": "2019-03-30", "val": 30443000000},
            {"accn": "0001558370-19-003956", "cik": 1800, "entityName": "ABBOTT LABORATORIES", "loc": "US-IL",
             "end": "2019-03-31", "val": 3386000000},
            {"accn": "0000002178-19-000021", "cik": 2178, "entityName": "ADAMS RESOURCES & ENERGY, INC.",
             "end": "2019-03-31", "val": 100000000},
        ],
    }


@pytest.fixture
def tickers_payload():
    return {
        "fields": ["cik", "name", "ticker", "exchange"],
        "data": [
            [320193, "Apple Inc.", "AAPL", "Nasdaq"],
            [789019, "MICROSOFT CORP", "MSFT", "Nasdaq"],
            [1961, "WORLDS INC.", "WDDD", None],
        ],
    }


@pytest.fixture
def tickers_mf_payload():
    return {
        "fields": ["cik", "seriesId", "classId", "symbol"],
        "data": [
            [2110, "S000009184", "C000024954", "LACAX"],
            [2110, "S000009184", "C000024956", "LIACX"],
        ],
    }


def make_zip(entries: dict) -> bytes:
    """Build an in-memory ZIP; names ending in ``/`` become directories."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def hello_zip():
    return make_zip({"hello.txt": "Hello, world!", "nested/": "", "nested/CIK0000320193.json": "{}"})
