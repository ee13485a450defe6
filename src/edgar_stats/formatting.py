"""Display formatting for normalized records.

These define what a "formatted value" means for each metric ``format`` tag;
markup and escaping are left to whoever renders the result.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import pandas as pd

from edgar_stats.models import Address, CatalogMetric, CompanyStats

_ADDRESS_KEYS = ("street1", "street2", "city", "stateOrCountry", "zipCode", "country")


def _group(value: float, decimals: int) -> str:
    """Thousands-separated, rounded half away from zero."""
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:,.{decimals}f}"


def format_currency(value: float) -> str:
    """1234567.0 → "1,234,567"; sub-dollar amounts keep cents (0.42 → "0.42")."""
    decimals = 2 if value != 0 and abs(value) < 1 else 0
    return _group(value, decimals)


def format_number(value: float) -> str:
    """Plain counts (shares) use the same rules as currency, minus the "$"."""
    return format_currency(value)


def format_decimal(value: float) -> str:
    return _group(value, 2)


def format_metric_value(metric: CatalogMetric) -> str:
    if metric.format == "currency":
        return "$" + format_currency(metric.value)
    if metric.format == "number":
        return format_number(metric.value)
    if metric.format == "decimal":
        return format_decimal(metric.value)
    return str(metric.value)


def format_date(date: str | None) -> str:
    """"2024-06-30" → "Jun 30, 2024". Empty → "N/A"; unparseable returned as-is."""
    if date is None or date == "":
        return "N/A"
    # bare fiscal years ("2023") would otherwise parse as Jan 1
    if re.fullmatch(r"\d{4}", date):
        return date
    ts = pd.to_datetime(date, errors="coerce")
    if pd.isna(ts):
        return date
    return f"{ts:%b} {ts.day}, {ts.year}"


def format_address(address: Address | Mapping[str, Any]) -> str:
    """Join the non-empty address parts with ", "."""
    if isinstance(address, Address):
        address = address.model_dump(by_alias=True)
    parts = [str(address[key]) for key in _ADDRESS_KEYS if address.get(key)]
    return ", ".join(parts)


def overview_items(stats: CompanyStats) -> dict[str, str]:
    """Label → value pairs for the company overview, empty values dropped."""
    items = {
        "CIK": stats.cik,
        "Primary Tickers": ", ".join(stats.tickers),
        "Exchanges": ", ".join(stats.exchanges),
        "Entity Type": stats.entity_type,
        "Category": stats.category,
        "SIC": stats.sic,
        "SIC Description": stats.sic_description,
        "State of Incorporation": stats.state_of_incorporation,
        "State Description": stats.state_description,
        "Fiscal Year End": stats.fiscal_year_end,
        "EIN": stats.ein,
        "LEI": stats.lei,
        "Phone": stats.phone,
        "Website": stats.website,
        "Investor Relations Site": stats.investor_website,
        "Most Recent Filing": stats.recent_filing,
    }
    return {label: value for label, value in items.items() if value not in ("", "N/A")}


def display_record(stats: CompanyStats) -> dict[str, Any]:
    """The whole record with every value formatted for display."""
    if not stats.ok:
        return {"symbol": stats.symbol, "error": stats.error}

    return {
        "symbol": stats.symbol,
        "name": stats.display_name,
        "overview": overview_items(stats),
        "business_address": format_address(stats.addresses.business),
        "mailing_address": format_address(stats.addresses.mailing),
        "metrics": [
            {
                "label": label,
                "value": format_metric_value(metric),
                "as_of": format_date(metric.date),
            }
            for label, metric in stats.metrics.items()
        ],
        "recent_filings": [
            {
                "form": f.form,
                "filing_date": format_date(f.filing_date),
                "report_date": format_date(f.report_date),
                "accession": f.accession,
                # no URL → show the bare document name instead
                "document": f.document_url or f.primary_document,
            }
            for f in stats.recent_filings
        ],
        "description": stats.description,
        "facts_note": stats.facts_note,
        "profile_note": stats.profile_note,
    }
