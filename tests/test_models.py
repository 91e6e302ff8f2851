"""Tests for the typed response models and their helpers."""

import logging

import pytest

from sec_client.errors import RowShapeError
from sec_client.models import (
    CompanyConcept,
    CompanyFacts,
    CompanyTickers,
    CompanyTickersMf,
    Recent,
    SubmissionHistory,
    XbrlFrames,
)


class TestSubmissionHistory:
    def test_fields(self, submissions_payload):
        history = SubmissionHistory.model_validate(submissions_payload)

        assert history.cik == "320193"
        assert history.entity_type == "operating"
        assert history.sic_description == "Electronic Computers"
        assert history.insider_transaction_for_issuer_exists == 1
        assert history.state_of_incorporation == "CA"
        assert history.fiscal_year_end == "0928"
        assert history.former_names[0].from_date == "1994-01-26T00:00:00.000Z"
        assert history.filings.files[0].filing_count == 1

    def test_unknown_fields_ignored(self, submissions_payload):
        submissions_payload["flags"] = "something new"
        SubmissionHistory.model_validate(submissions_payload)

    def test_recent_filings(self, submissions_payload):
        filings = SubmissionHistory.model_validate(submissions_payload).recent_filings()

        assert len(filings) == 2
        first = filings[0]
        assert first.accession_number == "0000320193-23-000106"
        assert first.form == "10-K"
        assert first.is_xbrl and first.is_inline_xbrl and not first.is_paper
        assert first.size == 9745812
        assert first.instance_url is None
        assert filings[1].items == "2.02,9.01"

    def test_rows_without_form_or_date_are_skipped(self):
        recent = Recent.model_validate({
            "accessionNumber": ["a", "b", "c"],
            "filingDate": ["2023-01-01", "2023-01-02"],
            "form": ["10-K", "10-Q", "8-K"],
        })
        entries = recent.entries()
        assert [e.accession_number for e in entries] == ["a", "b"]
        assert entries[0].primary_document == ""
        assert entries[0].size == 0

    def test_empty_recent(self):
        assert Recent().entries() == []

    def test_ticker_map(self, submissions_payload):
        history = SubmissionHistory.model_validate(submissions_payload)
        assert history.ticker_map() == {"AAPL": "Nasdaq"}

    def test_ticker_map_mismatched_lengths(self, submissions_payload):
        submissions_payload["tickers"] = ["AAPL", "APLE"]
        history = SubmissionHistory.model_validate(submissions_payload)
        assert history.ticker_map() == {}

    def test_ticker_map_null_exchange(self, submissions_payload):
        submissions_payload["exchanges"] = [None]
        history = SubmissionHistory.model_validate(submissions_payload)
        assert history.ticker_map() == {"AAPL": ""}


class TestCompanyConcept:
    def test_cik_as_number_or_string(self, concept_payload):
        assert CompanyConcept.model_validate(concept_payload).cik == 320193
        concept_payload["cik"] = "320193"
        assert CompanyConcept.model_validate(concept_payload).cik == 320193

    def test_cik_padded(self, concept_payload):
        assert CompanyConcept.model_validate(concept_payload).cik_padded() == "0000320193"

    def test_values_for_unit(self, concept_payload):
        concept = CompanyConcept.model_validate(concept_payload)
        assert [v.val for v in concept.values_for_unit("USD")] == [1000000.0, 950000.0]
        assert len(concept.values_for_unit("EUR")) == 1
        assert concept.values_for_unit("GBP") == []

    def test_most_recent_value(self, concept_payload):
        concept = CompanyConcept.model_validate(concept_payload)
        latest = concept.most_recent_value("USD")
        assert latest.end == "2023-12-31"
        assert latest.val == 1000000.0
        assert concept.most_recent_value("GBP") is None

    def test_available_units(self, concept_payload):
        concept = CompanyConcept.model_validate(concept_payload)
        assert sorted(concept.available_units()) == ["EUR", "USD"]

    def test_values_for_fiscal_period(self, concept_payload):
        concept = CompanyConcept.model_validate(concept_payload)

        assert len(concept.values_for_fiscal_period(2023, "FY")) == 2
        q1 = concept.values_for_fiscal_period(2024, "Q1")
        assert len(q1) == 1
        unit, value = q1[0]
        assert unit == "USD"
        assert value.val == 950000.0
        assert concept.values_for_fiscal_period(2022, "Q1") == []

    def test_optional_label_and_description(self, concept_payload):
        del concept_payload["label"]
        del concept_payload["description"]
        concept = CompanyConcept.model_validate(concept_payload)
        assert concept.label is None


class TestCompanyFacts:
    def test_taxonomies_and_tags(self, facts_payload):
        facts = CompanyFacts.model_validate(facts_payload)
        assert sorted(facts.taxonomies()) == ["dei", "us-gaap"]
        assert sorted(facts.tags_for_taxonomy("us-gaap")) == ["Assets", "EarningsPerShareBasic"]
        assert facts.tags_for_taxonomy("ifrs-full") == []

    def test_get_fact(self, facts_payload):
        facts = CompanyFacts.model_validate(facts_payload)
        assert facts.get_fact("us-gaap", "Assets").label == "Assets"
        assert facts.get_fact("us-gaap", "Liabilities") is None
        assert facts.get_fact("srt", "Assets") is None

    def test_facts_for_fiscal_period(self, facts_payload):
        facts = CompanyFacts.model_validate(facts_payload)
        q3 = facts.facts_for_fiscal_period(2023, "Q3")
        assert len(q3) == 1
        assert (q3[0].taxonomy, q3[0].tag, q3[0].unit) == ("us-gaap", "Assets", "USD")
        assert len(facts.facts_for_fiscal_period(2023, "FY")) == 4

    def test_facts_for_form(self, facts_payload):
        facts = CompanyFacts.model_validate(facts_payload)
        assert len(facts.facts_for_form("10-Q")) == 1
        assert len(facts.facts_for_form("10-K")) == 5
        assert facts.facts_for_form("S-1") == []

    def test_most_recent_value(self, facts_payload):
        facts = CompanyFacts.model_validate(facts_payload)
        latest = facts.most_recent_value("us-gaap", "Assets", "USD")
        assert latest.end == "2023-09-30"
        assert latest.as_integer() == 352583000000
        assert facts.most_recent_value("us-gaap", "Assets", "EUR") is None
        assert facts.most_recent_value("us-gaap", "Missing", "USD") is None


class TestFactValue:
    def _value(self, facts_payload, val):
        facts_payload["facts"]["us-gaap"]["Assets"]["units"]["USD"][0]["val"] = val
        facts = CompanyFacts.model_validate(facts_payload)
        return facts.facts["us-gaap"]["Assets"].units["USD"][0]

    def test_integer(self, facts_payload):
        value = self._value(facts_payload, 42)
        assert value.as_integer() == 42
        assert value.as_number() == 42.0
        assert value.as_text() is None
        assert value.as_boolean() is None

    def test_float(self, facts_payload):
        value = self._value(facts_payload, 6.16)
        assert value.as_number() == 6.16
        assert value.as_integer() is None

    def test_text(self, facts_payload):
        value = self._value(facts_payload, "Apple Inc.")
        assert value.as_text() == "Apple Inc."
        assert value.as_number() is None

    def test_boolean(self, facts_payload):
        value = self._value(facts_payload, True)
        assert value.as_boolean() is True
        assert value.as_number() is None
        assert value.as_integer() is None

    def test_absent(self, facts_payload):
        del facts_payload["facts"]["us-gaap"]["Assets"]["units"]["USD"][0]["val"]
        facts = CompanyFacts.model_validate(facts_payload)
        value = facts.facts["us-gaap"]["Assets"].units["USD"][0]
        assert value.val is None
        assert value.as_number() is None
        assert value.as_text() is None


class TestXbrlFrames:
    def test_fields(self, frames_payload):
        frames = XbrlFrames.model_validate(frames_payload)
        assert frames.ccp == "CY2019Q1I"
        assert frames.pts == 4
        assert frames.data[0].loc == "US-IL"
        assert frames.data[3].loc is None

    def test_values_for_company(self, frames_payload):
        frames = XbrlFrames.model_validate(frames_payload)
        values = frames.values_for_company("0000320193")
        assert len(values) == 1
        assert values[0].entity_name == "Apple Inc."
        assert frames.values_for_company(320193) == values
        assert frames.values_for_company("999") == []

    def test_values_for_company_unparseable(self, frames_payload, caplog):
        frames = XbrlFrames.model_validate(frames_payload)
        with caplog.at_level(logging.ERROR, logger="sec_client.models.frames"):
            assert frames.values_for_company("abc") == []
        assert "Failed to parse CIK 'abc'" in caplog.text

    def test_top_companies(self, frames_payload):
        frames = XbrlFrames.model_validate(frames_payload)
        assert [v.cik for v in frames.top_companies(2)] == [320193, 1800]
        assert [v.cik for v in frames.top_companies(2, ascending=True)] == [2178, 1750]
        assert len(frames.top_companies(10)) == 4

    def test_statistics(self, frames_payload):
        frames = XbrlFrames.model_validate(frames_payload)
        stats = frames.statistics()

        values = [218600000, 30443000000, 3386000000, 100000000]
        mean = sum(values) / 4
        assert stats.count == 4
        assert stats.mean == pytest.approx(mean)
        assert stats.median == pytest.approx((218600000 + 3386000000) / 2)
        assert stats.min == 100000000
        assert stats.max == 30443000000
        expected_std = (sum((v - mean) ** 2 for v in values) / 3) ** 0.5
        assert stats.std_dev == pytest.approx(expected_std)

    def test_statistics_empty(self, frames_payload):
        frames_payload["data"] = []
        stats = XbrlFrames.model_validate(frames_payload).statistics()
        assert (stats.count, stats.mean, stats.median, stats.min, stats.max, stats.std_dev) == (0, 0, 0, 0, 0, 0)

    def test_statistics_single_value(self, frames_payload):
        frames_payload["data"] = frames_payload["data"][:1]
        stats = XbrlFrames.model_validate(frames_payload).statistics()
        assert stats.count == 1
        assert stats.mean == stats.median == stats.min == stats.max == 218600000
        assert stats.std_dev == 0.0


class TestCompanyTickers:
    def test_entries(self, tickers_payload):
        entries = CompanyTickers.model_validate(tickers_payload).entries()
        assert len(entries) == 3
        apple = entries[0]
        assert (apple.cik, apple.name, apple.ticker, apple.exchange) == (320193, "Apple Inc.", "AAPL", "Nasdaq")

    def test_null_exchange_becomes_empty(self, tickers_payload):
        entries = CompanyTickers.model_validate(tickers_payload).entries()
        assert entries[2].exchange == ""

    def test_single_row(self):
        tickers = CompanyTickers.model_validate({
            "fields": ["cik", "name", "ticker", "exchange"],
            "data": [[320193, "Apple Inc.", "AAPL", "Nasdaq"]],
        })
        assert len(tickers.entries()) == 1

    def test_missing_column(self):
        tickers = CompanyTickers.model_validate({
            "fields": ["cik", "name", "ticker", "exchange"],
            "data": [[320193, "Apple Inc.", "AAPL"]],
        })
        with pytest.raises(RowShapeError):
            tickers.entries()

    @pytest.mark.parametrize("row", [
        ["320193", "Apple Inc.", "AAPL", "Nasdaq"],
        [True, "Apple Inc.", "AAPL", "Nasdaq"],
        [320193, None, "AAPL", "Nasdaq"],
        [320193, "Apple Inc.", 7, "Nasdaq"],
    ])
    def test_wrong_column_types(self, row):
        tickers = CompanyTickers.model_validate({"fields": [], "data": [row]})
        with pytest.raises(RowShapeError):
            tickers.entries()


class TestCompanyTickersMf:
    def test_entries(self, tickers_mf_payload):
        entries = CompanyTickersMf.model_validate(tickers_mf_payload).entries()
        assert len(entries) == 2
        first = entries[0]
        assert (first.cik, first.series_id, first.class_id, first.symbol) == (2110, "S000009184", "C000024954", "LACAX")

    def test_null_symbol_rejected(self):
        funds = CompanyTickersMf.model_validate({"fields": [], "data": [[2110, "S000009184", "C000024954", None]]})
        with pytest.raises(RowShapeError):
            funds.entries()

    def test_extra_column_rejected(self):
        funds = CompanyTickersMf.model_validate({"fields": [], "data": [[2110, "S1", "C1", "X", "extra"]]})
        with pytest.raises(RowShapeError):
            funds.entries()
