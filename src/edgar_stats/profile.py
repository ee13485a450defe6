"""Company profile normalization from the SEC submissions payload.

The submissions endpoint stores recent filings column-wise:

    "filings": {
        "recent": {
            "accessionNumber": ["0000051143-24-000012", ...],
            "form":            ["10-K", ...],
            "filingDate":      ["2024-02-26", ...],
            "primaryDocument": ["ibm-20231231.htm", ...],
            ...
        }
    }

Each index across those arrays is one filing. Arrays are not guaranteed to
be the same length, so a short or missing array just contributes "".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from edgar_stats.config import get_config
from edgar_stats.errors import MalformedResponseError
from edgar_stats.models import Address, Addresses, CompanyProfile, Filing

log = logging.getLogger(__name__)

ARCHIVES_URL = "https://www.sec.gov/Archives/edgar/data/{cik}/{accession}/{document}"

# Filing field → key under filings.recent
_FILING_COLUMNS: dict[str, str] = {
    "form": "form",
    "filing_date": "filingDate",
    "report_date": "reportDate",
    "acceptance_date": "acceptanceDateTime",
    "accession": "accessionNumber",
    "primary_document": "primaryDocument",
    "document_description": "primaryDocDescription",
    "items": "items",
    "act": "act",
    "file_number": "fileNumber",
    "film_number": "filmNumber",
    "size": "size",
}

# CompanyProfile field → top-level submissions key
_PROFILE_FIELDS: dict[str, str] = {
    "name": "name",
    "description": "description",
    "entity_type": "entityType",
    "category": "category",
    "sic": "sic",
    "sic_description": "sicDescription",
    "state_of_incorporation": "stateOfIncorporation",
    "state_description": "stateOfIncorporationDescription",
    "fiscal_year_end": "fiscalYearEnd",
    "ein": "ein",
    "lei": "lei",
    "phone": "phone",
    "website": "website",
    "investor_website": "investorWebsite",
}


def _str(v: Any) -> str:
    return "" if v is None else str(v)


def sanitize_cik(cik: str | int) -> str:
    """Strip everything but digits. May return ""."""
    return re.sub(r"[^0-9]", "", str(cik))


def build_document_url(cik: str, accession: str, primary_document: str) -> str:
    """Archive URL for a filing's primary document, or "" if inputs are missing.

    ``0000012345`` + ``0001-23-000123`` + ``doc.htm`` →
    ``https://www.sec.gov/Archives/edgar/data/12345/000123000123/doc.htm``
    """
    if not accession or not primary_document:
        return ""
    cik_raw = cik.lstrip("0") or cik
    return ARCHIVES_URL.format(
        cik=cik_raw,
        accession=accession.replace("-", ""),
        document=primary_document,
    )


def _clean_list(v: Any) -> list[str]:
    """Drop falsy entries, keep order. Non-lists become []."""
    if not isinstance(v, list):
        return []
    return [str(item) for item in v if item]


def _address(v: Any) -> Address:
    if not isinstance(v, Mapping):
        return Address()
    return Address.model_validate(v)


def _recent_filings(recent: Any, cik: str, limit: int) -> list[Filing]:
    if not isinstance(recent, Mapping) or not recent:
        return []

    columns: dict[str, list] = {}
    for field, key in _FILING_COLUMNS.items():
        column = recent.get(key)
        columns[field] = column if isinstance(column, list) else []

    count = min(limit, len(columns["accession"]))
    filings: list[Filing] = []
    for i in range(count):
        row = {
            field: _str(column[i]) if i < len(column) else ""
            for field, column in columns.items()
        }
        row["document_url"] = build_document_url(
            cik, row["accession"], row["primary_document"]
        )
        filings.append(Filing(**row))
    return filings


def normalize_profile(
    data: Any,
    cik: str,
    max_filings: int | None = None,
) -> CompanyProfile:
    """Build a CompanyProfile from a raw submissions response.

    ``cik`` is the identifier used for the request; it feeds the document
    URLs. A company with no filings just gets an empty ``recent_filings``.
    """
    if not isinstance(data, Mapping):
        raise MalformedResponseError("Company profile response is not valid JSON.")

    if max_filings is None:
        max_filings = get_config().max_recent_filings

    addresses = data.get("addresses")
    if isinstance(addresses, Mapping):
        addrs = Addresses(
            business=_address(addresses.get("business")),
            mailing=_address(addresses.get("mailing")),
        )
    else:
        addrs = Addresses()

    filings_block = data.get("filings")
    recent = filings_block.get("recent") if isinstance(filings_block, Mapping) else None
    filings = _recent_filings(recent, cik, max_filings)
    log.debug("Rebuilt %d recent filings for CIK %s", len(filings), cik)

    return CompanyProfile(
        **{field: _str(data.get(key)) for field, key in _PROFILE_FIELDS.items()},
        tickers=_clean_list(data.get("tickers")),
        exchanges=_clean_list(data.get("exchanges")),
        addresses=addrs,
        recent_filings=filings,
    )
