"""URL builders for the data.sec.gov and www.sec.gov endpoints."""

from sec_client.types import Period, Taxonomy, Unit
from sec_client.utils.cik import format_cik

SEC_DATA_URL = "https://data.sec.gov"
SEC_WWW_URL = "https://www.sec.gov"

COMPANY_TICKERS_URL = f"{SEC_WWW_URL}/files/company_tickers_exchange.json"
COMPANY_TICKERS_MF_URL = f"{SEC_WWW_URL}/files/company_tickers_mf.json"

BULK_SUBMISSIONS_URL = f"{SEC_WWW_URL}/Archives/edgar/daily-index/bulkdata/submissions.zip"
BULK_COMPANY_FACTS_URL = f"{SEC_WWW_URL}/Archives/edgar/daily-index/xbrl/companyfacts.zip"


def submissions_url(cik) -> str:
    return f"{SEC_DATA_URL}/submissions/CIK{format_cik(cik)}.json"


def submissions_file_url(filename: str) -> str:
    """URL of an overflow page listed in ``filings.files``, e.g. ``CIK0000320193-submissions-001.json``."""
    if not filename or "/" in filename:
        raise ValueError(f"Invalid submissions file name: {filename!r}")
    return f"{SEC_DATA_URL}/submissions/{filename}"


def company_concept_url(cik, taxonomy, tag: str) -> str:
    taxonomy = Taxonomy.parse(taxonomy)
    return f"{SEC_DATA_URL}/api/xbrl/companyconcept/CIK{format_cik(cik)}/{taxonomy}/{tag}.json"


def company_facts_url(cik) -> str:
    return f"{SEC_DATA_URL}/api/xbrl/companyfacts/CIK{format_cik(cik)}.json"


def frames_url(taxonomy, tag: str, unit, period) -> str:
    taxonomy = Taxonomy.parse(taxonomy)
    unit = Unit.parse(unit)
    period = Period.parse(period)
    return f"{SEC_DATA_URL}/api/xbrl/frames/{taxonomy}/{tag}/{unit}/{period}.json"
