"""Shared fixtures: canned SEC payloads and a fake ``requests.get``."""

from __future__ import annotations

import copy

import pytest
import requests

from edgar_stats.sec_client import SECClient

TICKERS_URL = "https://www.sec.gov/files/company_tickers.json"
IBM_FACTS_URL = "https://data.sec.gov/api/xbrl/companyfacts/CIK0000051143.json"
IBM_SUBMISSIONS_URL = "https://data.sec.gov/submissions/CIK0000051143.json"


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, invalid_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return copy.deepcopy(self._payload)


class FakeSEC:
    """URL → response table standing in for the SEC."""

    def __init__(self):
        self.routes: dict[str, FakeResponse | Exception] = {}
        self.calls: list[dict] = []

    def add(self, url: str, payload=None, status_code: int = 200, invalid_json: bool = False):
        self.routes[url] = FakeResponse(payload, status_code, invalid_json)

    def fail(self, url: str, exc: Exception):
        self.routes[url] = exc

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        route = self.routes.get(url)
        if route is None:
            raise requests.exceptions.ConnectionError(f"no route for {url}")
        if isinstance(route, Exception):
            raise route
        return route


@pytest.fixture
def fake_sec(monkeypatch) -> FakeSEC:
    sec = FakeSEC()
    monkeypatch.setattr("edgar_stats.sec_client.requests.get", sec.get)
    return sec


@pytest.fixture
def client() -> SECClient:
    return SECClient(user_agent="Test Suite tests@example.com", timeout=10.0)


@pytest.fixture
def ticker_registry() -> dict:
    return {
        "0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."},
        "1": {"cik_str": 51143, "ticker": "ibm", "title": "INTERNATIONAL BUSINESS MACHINES CORP"},
        "2": {"cik_str": 789019, "ticker": "MSFT", "title": "MICROSOFT CORP"},
        "3": "not-a-row",
        "4": {"ticker": "NOCIK"},
    }


@pytest.fixture
def ibm_facts() -> dict:
    return {
        "cik": 51143,
        "entityName": "INTERNATIONAL BUSINESS MACHINES CORP",
        "facts": {
            "dei": {
                "EntityCommonStockSharesOutstanding": {
                    "units": {"shares": [{"end": "2024-01-31", "val": 915013020}]},
                },
            },
            "us-gaap": {
                "Assets": {
                    "label": "Assets",
                    "units": {
                        "USD": [
                            {"end": "2022-12-31", "val": 127243000000, "fy": 2022, "form": "10-K"},
                            {"end": "2023-12-31", "val": 135241000000, "fy": 2023, "form": "10-K"},
                        ]
                    },
                },
                "Liabilities": {
                    "units": {
                        "USD": [
                            {"end": "2023-12-31", "val": 112628000000, "fy": 2023},
                        ]
                    },
                },
                "Revenues": {
                    "units": {
                        "USD": [
                            {"start": "2023-01-01", "end": "2023-12-31", "val": 61860000000, "fy": 2023},
                        ]
                    },
                },
                "EarningsPerShareDiluted": {
                    "units": {
                        "USD/shares": [
                            {"end": "2023-12-31", "val": 8.14, "fy": 2023},
                        ]
                    },
                },
                "CommonStockSharesOutstanding": {
                    "units": {
                        "shares": [
                            {"end": "2023-12-31", "val": 913363919, "fy": 2023},
                        ]
                    },
                },
            },
        },
    }


@pytest.fixture
def ibm_submissions() -> dict:
    return {
        "cik": "51143",
        "entityType": "operating",
        "sic": "3570",
        "sicDescription": "Computer & office Equipment",
        "name": "INTERNATIONAL BUSINESS MACHINES CORP",
        "tickers": ["IBM", "", None],
        "exchanges": ["NYSE", ""],
        "ein": "130871985",
        "lei": None,
        "description": "",
        "website": "",
        "investorWebsite": "",
        "category": "Large accelerated filer",
        "fiscalYearEnd": "1231",
        "stateOfIncorporation": "NY",
        "stateOfIncorporationDescription": "NY",
        "addresses": {
            "mailing": {
                "street1": "ONE NEW ORCHARD ROAD",
                "street2": None,
                "city": "ARMONK",
                "stateOrCountry": "NY",
                "zipCode": "10504",
                "stateOrCountryDescription": "NY",
            },
            "business": {
                "street1": "ONE NEW ORCHARD ROAD",
                "street2": None,
                "city": "ARMONK",
                "stateOrCountry": "NY",
                "zipCode": "10504",
                "stateOrCountryDescription": "NY",
            },
        },
        "phone": "9144991900",
        "filings": {
            "recent": {
                "accessionNumber": [
                    "0000051143-24-000012",
                    "0001104659-24-021634",
                ],
                "filingDate": ["2024-02-26", "2024-02-14"],
                "reportDate": ["2023-12-31", ""],
                "acceptanceDateTime": ["2024-02-26T16:05:23.000Z", "2024-02-14T10:12:01.000Z"],
                "act": ["34", "34"],
                "form": ["10-K", "SC 13G/A"],
                "fileNumber": ["001-02360", "005-12345"],
                "filmNumber": ["24680466", "24640212"],
                "items": ["", ""],
                "size": [17081942, 12345],
                "isXBRL": [1, 0],
                "primaryDocument": ["ibm-20231231.htm", ""],
                "primaryDocDescription": ["10-K", "SC 13G/A"],
            },
            "files": [],
        },
    }
