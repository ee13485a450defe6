"""Direct SEC EDGAR API client.

Uses only public SEC endpoints (no API key needed, just User-Agent header):
  - company_tickers.json  — ticker→CIK resolution
  - submissions/CIK{cik}.json  — company info + filing list
  - api/xbrl/companyfacts/CIK{cik}.json  — ALL XBRL facts for a company

One blocking GET per call, fixed timeout, no retries and no caching: the
ticker registry is downloaded fresh on every resolve_cik(). That full scan
is the obvious place for a cache if lookups ever get hot.

Every failure is raised as an ``edgar_stats.errors`` exception carrying a
message fit to show a user; ``requests`` exceptions stay in this module.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, NamedTuple

import requests

from edgar_stats.config import get_config
from edgar_stats.errors import (
    InvalidInputError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
    UpstreamStatusError,
)
from edgar_stats.facts import FACTS_NOT_JSON, normalize_facts
from edgar_stats.models import CompanyFacts, CompanyProfile, TickerRecord
from edgar_stats.profile import normalize_profile, sanitize_cik

log = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════
#  Constants
# ═══════════════════════════════════════════════════════════════════════════

# SEC EDGAR public API base URLs
SEC_BASE = "https://www.sec.gov"
DATA_BASE = "https://data.sec.gov"
TICKERS_URL = f"{SEC_BASE}/files/company_tickers.json"
SUBMISSIONS_URL = f"{DATA_BASE}/submissions/CIK{{cik}}.json"
COMPANY_FACTS_URL = f"{DATA_BASE}/api/xbrl/companyfacts/CIK{{cik}}.json"

INVALID_SYMBOL = "Invalid symbol provided."


class _Endpoint(NamedTuple):
    transport_msg: str      # prefix, transport error text is appended
    status_msg: str         # formatted with {status}
    malformed_msg: str      # body is not JSON


_TICKERS = _Endpoint(
    "Error retrieving ticker list",
    "Ticker lookup failed with status code {status}. "
    "Ensure the User-Agent header is accepted by the SEC.",
    "Unexpected response structure from SEC ticker list.",
)
_FACTS = _Endpoint(
    "Error retrieving company facts",
    "Company facts request failed with status code {status}. "
    "SEC may be blocking the request.",
    FACTS_NOT_JSON,
)
_SUBMISSIONS = _Endpoint(
    "Error retrieving company profile",
    "Company profile request failed with status code {status}.",
    "Company profile response is not valid JSON.",
)


# ═══════════════════════════════════════════════════════════════════════════
#  SEC EDGAR Client
# ═══════════════════════════════════════════════════════════════════════════

class SECClient:
    """Blocking HTTP client for the three SEC EDGAR endpoints we use.

    Holds only header/timeout configuration, so one instance can be shared.
    """

    def __init__(self, user_agent: str | None = None, timeout: float | None = None):
        # unset values come from Settings (EDGAR_IDENTITY, REQUEST_TIMEOUT)
        config = get_config()
        self.user_agent = user_agent or config.edgar_identity
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    # ── HTTP ──────────────────────────────────────────────────────────

    def _request_json(self, url: str, endpoint: _Endpoint) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        log.info("GET %s", url)
        try:
            resp = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            log.warning("Transport error for %s: %s", url, exc)
            raise TransportError(f"{endpoint.transport_msg}: {exc}") from exc

        if resp.status_code != 200:
            log.warning("SEC returned %d for %s", resp.status_code, url)
            raise UpstreamStatusError(
                endpoint.status_msg.format(status=resp.status_code),
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            log.warning("Non-JSON body from %s: %s", url, exc)
            raise MalformedResponseError(endpoint.malformed_msg) from exc

    # ── Ticker → CIK resolution ──────────────────────────────────────

    def lookup_ticker(self, symbol: str) -> TickerRecord:
        """Find the registry row for ``symbol`` (case-insensitive, first match).

        company_tickers.json is keyed by row number:
            {"0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."}, ...}
        A plain list of the same rows is accepted too.
        """
        if not symbol or not symbol.strip():
            raise InvalidInputError(INVALID_SYMBOL)

        raw = self._request_json(TICKERS_URL, _TICKERS)

        if isinstance(raw, Mapping):
            rows = raw.values()
        elif isinstance(raw, list):
            rows = raw
        else:
            log.warning("Ticker list decoded to %s", type(raw).__name__)
            raise MalformedResponseError(_TICKERS.malformed_msg)

        wanted = symbol.upper()
        for entry in rows:
            if not isinstance(entry, Mapping):
                continue
            ticker = entry.get("ticker")
            cik = entry.get("cik_str")
            if ticker is None or cik is None:
                continue
            if str(ticker).upper() == wanted:
                return TickerRecord(
                    ticker=str(ticker).upper(),
                    cik=str(cik).zfill(10),
                    title=str(entry.get("title") or ""),
                )

        log.warning("Symbol %s not in SEC ticker dataset", symbol)
        raise NotFoundError(f"Symbol {symbol} not found in SEC ticker dataset.")

    def resolve_cik(self, symbol: str) -> str:
        """Resolve a ticker symbol to a zero-padded CIK string.

        Accepts: "IBM", "ibm"
        Returns: "0000051143" (10-digit zero-padded)
        """
        return self.lookup_ticker(symbol).cik

    # ── Company facts ─────────────────────────────────────────────────

    def get_company_facts(self, cik: str) -> Any:
        """Raw companyfacts JSON for a CIK (can be tens of MB for big filers)."""
        digits = sanitize_cik(cik)
        if not digits:
            raise InvalidInputError("CIK passed to facts lookup is invalid.")
        return self._request_json(COMPANY_FACTS_URL.format(cik=digits), _FACTS)

    def fetch_facts(self, cik: str) -> CompanyFacts:
        """Fetch companyfacts and reduce it to the catalogue metrics."""
        return normalize_facts(self.get_company_facts(cik))

    # ── Submissions / profile ─────────────────────────────────────────

    def get_submissions(self, cik: str) -> Any:
        """Raw submissions JSON: company metadata + recent filings."""
        digits = sanitize_cik(cik)
        if not digits:
            raise InvalidInputError("CIK passed to company profile lookup is invalid.")
        return self._request_json(SUBMISSIONS_URL.format(cik=digits), _SUBMISSIONS)

    def fetch_profile(self, cik: str) -> CompanyProfile:
        """Fetch submissions and normalize the company profile."""
        data = self.get_submissions(cik)
        return normalize_profile(data, sanitize_cik(cik))


# ═══════════════════════════════════════════════════════════════════════════
#  Module-level singleton — shared across the app
# ═══════════════════════════════════════════════════════════════════════════

_client: SECClient | None = None


def get_sec_client() -> SECClient:
    """Get or create the shared SECClient singleton.

    Reads EDGAR_IDENTITY and REQUEST_TIMEOUT from config.
    """
    global _client
    if _client is None:
        _client = SECClient()
    return _client
