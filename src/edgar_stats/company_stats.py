"""Symbol → CompanyStats: resolve the CIK, then fetch facts and profile.

Data flow:
  1. SECClient.resolve_cik()    → 10-digit CIK (failure here is final)
  2. SECClient.fetch_facts()    → catalogue metrics + most recent filing date
  3. SECClient.fetch_profile()  → entity metadata, addresses, recent filings

Steps 2 and 3 are independent: either may fail and the record is built
from the other, with the failure carried as ``facts_note`` /
``profile_note``. Only when both fail is the result a hard error.
"""

from __future__ import annotations

import logging

from edgar_stats.errors import EdgarError
from edgar_stats.models import Addresses, CompanyFacts, CompanyProfile, CompanyStats
from edgar_stats.sec_client import INVALID_SYMBOL, SECClient, get_sec_client

log = logging.getLogger(__name__)


def _display_tickers(symbol: str, profile: CompanyProfile | None) -> list[str]:
    """Profile tickers with the requested symbol up front if it's missing."""
    tickers = list(profile.tickers) if profile else []
    if symbol not in tickers:
        tickers.insert(0, symbol)
    return list(dict.fromkeys(tickers))


def get_company_stats(symbol: str, client: SECClient | None = None) -> CompanyStats:
    """Build the full display record for a ticker symbol.

    Never raises for SEC-side problems; check ``result.error`` for a hard
    failure and ``facts_note`` / ``profile_note`` for partial data.
    """
    symbol = (symbol or "").strip().upper()
    if not symbol:
        return CompanyStats(symbol="", error=INVALID_SYMBOL)

    client = client or get_sec_client()

    try:
        cik = client.resolve_cik(symbol)
    except EdgarError as exc:
        message = str(exc) or f"Unable to find company CIK for symbol {symbol}."
        log.warning("CIK resolution failed for %s: %s", symbol, message)
        return CompanyStats(symbol=symbol, error=message)

    facts: CompanyFacts | None = None
    facts_error = ""
    try:
        facts = client.fetch_facts(cik)
    except EdgarError as exc:
        facts_error = str(exc)
        log.warning("Facts unavailable for %s (CIK %s): %s", symbol, cik, facts_error)

    profile: CompanyProfile | None = None
    profile_error = ""
    try:
        profile = client.fetch_profile(cik)
    except EdgarError as exc:
        profile_error = str(exc)
        log.warning("Profile unavailable for %s (CIK %s): %s", symbol, cik, profile_error)

    if facts is None and profile is None:
        message = (
            facts_error
            or profile_error
            or f"Unable to retrieve company information for {symbol}."
        )
        return CompanyStats(symbol=symbol, cik=cik, error=message)

    if facts is not None and facts.note:
        facts_error = facts.note

    display_name = (facts.name if facts else "") or (profile.name if profile else "") or symbol

    profile_fields = {}
    if profile is not None:
        profile_fields = profile.model_dump(
            include={
                "entity_type", "category", "sic", "sic_description",
                "state_of_incorporation", "state_description", "fiscal_year_end",
                "ein", "lei", "phone", "website", "investor_website",
                "exchanges", "description",
            }
        )

    return CompanyStats(
        symbol=symbol,
        cik=cik,
        display_name=display_name,
        tickers=_display_tickers(symbol, profile),
        addresses=profile.addresses if profile else Addresses(),
        metrics=facts.metrics if facts else {},
        recent_filing=facts.recent_filing if facts else "",
        recent_filings=profile.recent_filings if profile else [],
        has_facts=facts is not None,
        has_profile=profile is not None,
        facts_note=facts_error or None,
        profile_note=profile_error or None,
        **profile_fields,
    )
