"""Tests for the symbol → CompanyStats composition."""

import pytest
import requests

from edgar_stats.company_stats import get_company_stats
from edgar_stats.facts import NO_METRICS_NOTE

from conftest import IBM_FACTS_URL, IBM_SUBMISSIONS_URL, TICKERS_URL


@pytest.fixture
def ibm_sec(fake_sec, ticker_registry, ibm_facts, ibm_submissions):
    fake_sec.add(TICKERS_URL, ticker_registry)
    fake_sec.add(IBM_FACTS_URL, ibm_facts)
    fake_sec.add(IBM_SUBMISSIONS_URL, ibm_submissions)
    return fake_sec


def test_full_record(ibm_sec, client):
    stats = get_company_stats(" ibm ", client=client)

    assert stats.ok
    assert stats.symbol == "IBM"
    assert stats.cik == "0000051143"
    assert stats.display_name == "INTERNATIONAL BUSINESS MACHINES CORP"
    assert stats.tickers == ["IBM"]
    assert stats.exchanges == ["NYSE"]
    assert stats.category == "Large accelerated filer"
    assert stats.recent_filing == "2023-12-31"
    assert "Total Assets" in stats.metrics
    assert len(stats.recent_filings) == 2
    assert stats.addresses.business.city == "ARMONK"
    assert stats.has_facts and stats.has_profile
    assert stats.facts_note is None
    assert stats.profile_note is None

    urls = [c["url"] for c in ibm_sec.calls]
    assert urls == [TICKERS_URL, IBM_FACTS_URL, IBM_SUBMISSIONS_URL]


def test_empty_symbol(fake_sec, client):
    stats = get_company_stats("   ", client=client)
    assert not stats.ok
    assert stats.error == "Invalid symbol provided."
    assert fake_sec.calls == []


def test_resolution_failure_stops_composition(fake_sec, client, ticker_registry):
    fake_sec.add(TICKERS_URL, ticker_registry)
    stats = get_company_stats("ZZZZ123", client=client)
    assert stats.error == "Symbol ZZZZ123 not found in SEC ticker dataset."
    assert len(fake_sec.calls) == 1


def test_facts_503_profile_ok(ibm_sec, client):
    ibm_sec.add(IBM_FACTS_URL, status_code=503)

    stats = get_company_stats("IBM", client=client)

    assert stats.ok
    assert stats.facts_note
    assert "503" in stats.facts_note
    assert stats.profile_note is None
    assert stats.metrics == {}
    assert stats.recent_filing == ""
    assert stats.display_name == "INTERNATIONAL BUSINESS MACHINES CORP"
    assert stats.recent_filings[0].form == "10-K"
    assert not stats.has_facts
    assert stats.has_profile


def test_profile_failure_facts_ok(ibm_sec, client):
    ibm_sec.fail(IBM_SUBMISSIONS_URL, requests.exceptions.ConnectionError("reset"))

    stats = get_company_stats("IBM", client=client)

    assert stats.ok
    assert stats.profile_note == "Error retrieving company profile: reset"
    assert stats.facts_note is None
    assert stats.tickers == ["IBM"]
    assert stats.recent_filings == []
    assert stats.metrics["Diluted EPS"].value == 8.14


def test_both_fail_prefers_facts_error(ibm_sec, client):
    ibm_sec.add(IBM_FACTS_URL, status_code=503)
    ibm_sec.add(IBM_SUBMISSIONS_URL, status_code=500)

    stats = get_company_stats("IBM", client=client)

    assert not stats.ok
    assert stats.error.startswith("Company facts request failed with status code 503")
    assert stats.cik == "0000051143"


def test_no_metrics_note_is_carried(ibm_sec, client):
    ibm_sec.add(IBM_FACTS_URL, {"entityName": "IBM SHELL", "facts": {"dei": {"X": {}}}})

    stats = get_company_stats("IBM", client=client)

    assert stats.ok
    assert stats.facts_note == NO_METRICS_NOTE
    assert stats.display_name == "IBM SHELL"
    assert stats.metrics == {}
    assert stats.recent_filing == "N/A"


def test_symbol_prepended_to_tickers(ibm_sec, client, ibm_submissions, ticker_registry):
    ticker_registry["9"] = {"cik_str": 51143, "ticker": "IBM.PR", "title": "IBM preferred"}
    ibm_sec.add(TICKERS_URL, ticker_registry)
    ibm_submissions["tickers"] = ["IBM", "IBMX"]
    ibm_sec.add(IBM_SUBMISSIONS_URL, ibm_submissions)

    stats = get_company_stats("ibm.pr", client=client)

    assert stats.tickers == ["IBM.PR", "IBM", "IBMX"]


def test_display_name_falls_back_to_symbol(ibm_sec, client, ibm_submissions):
    ibm_sec.add(IBM_FACTS_URL, status_code=404)
    ibm_submissions["name"] = ""
    ibm_sec.add(IBM_SUBMISSIONS_URL, ibm_submissions)

    stats = get_company_stats("IBM", client=client)
    assert stats.display_name == "IBM"


def test_same_input_same_record(ibm_sec, client):
    first = get_company_stats("IBM", client=client)
    second = get_company_stats("IBM", client=client)
    assert first.model_dump_json() == second.model_dump_json()


def test_record_serializes(ibm_sec, client):
    dumped = get_company_stats("IBM", client=client).model_dump()
    assert dumped["metrics"]["Total Assets"] == {
        "value": 135241000000.0,
        "unit": "USD",
        "date": "2023-12-31",
        "format": "currency",
    }
    assert dumped["addresses"]["mailing"]["zip_code"] == "10504"
    assert dumped["error"] is None
