"""Pydantic value records for normalized EDGAR data.

Every record is frozen and built fresh per request; nothing here is
cached or shared between lookups.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


MetricFormat = Literal["currency", "number", "decimal"]


# ---------------------------------------------------------------------------
# Registry & facts
# ---------------------------------------------------------------------------

class TickerRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str
    cik: str                     # 10-digit, zero-padded
    title: str = ""


class Metric(BaseModel):
    """Latest reported value for one (concept, unit) pair."""
    model_config = ConfigDict(frozen=True)

    value: float
    unit: str
    date: str = ""               # period end, else fiscal year, else ""


class CatalogMetric(Metric):
    format: MetricFormat


class CompanyFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    metrics: dict[str, CatalogMetric] = {}    # label → metric, catalogue order
    recent_filing: str = "N/A"
    note: str | None = None                   # soft "no metrics" message


# ---------------------------------------------------------------------------
# Profile (submissions endpoint)
# ---------------------------------------------------------------------------

class Address(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state_or_country: str | None = Field(default=None, alias="stateOrCountry")
    zip_code: str | None = Field(default=None, alias="zipCode")
    country: str | None = None

    # SEC occasionally sends numbers (zip codes) where we expect strings
    @field_validator("*", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)


class Addresses(BaseModel):
    model_config = ConfigDict(frozen=True)

    business: Address = Address()
    mailing: Address = Address()


class Filing(BaseModel):
    """One filing rebuilt from the index-aligned arrays under filings.recent."""
    model_config = ConfigDict(frozen=True)

    form: str = ""
    filing_date: str = ""
    report_date: str = ""
    acceptance_date: str = ""
    accession: str = ""
    primary_document: str = ""
    document_url: str = ""
    document_description: str = ""
    items: str = ""
    act: str = ""
    file_number: str = ""
    film_number: str = ""
    size: str = ""


class CompanyProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    entity_type: str = ""
    category: str = ""
    sic: str = ""
    sic_description: str = ""
    state_of_incorporation: str = ""
    state_description: str = ""
    fiscal_year_end: str = ""
    ein: str = ""
    lei: str = ""
    phone: str = ""
    website: str = ""
    investor_website: str = ""
    tickers: list[str] = []
    exchanges: list[str] = []
    addresses: Addresses = Addresses()
    recent_filings: list[Filing] = []


# ---------------------------------------------------------------------------
# Combined record handed to the presentation layer
# ---------------------------------------------------------------------------

class CompanyStats(BaseModel):
    """Everything the presentation layer needs for one symbol.

    ``error`` set means a hard failure and nothing else is meaningful.
    ``facts_note`` / ``profile_note`` are non-fatal: the other side's data
    is still populated and should be shown alongside the warning.
    """
    model_config = ConfigDict(frozen=True)

    symbol: str
    cik: str = ""
    display_name: str = ""
    tickers: list[str] = []
    exchanges: list[str] = []
    entity_type: str = ""
    category: str = ""
    sic: str = ""
    sic_description: str = ""
    state_of_incorporation: str = ""
    state_description: str = ""
    fiscal_year_end: str = ""
    ein: str = ""
    lei: str = ""
    phone: str = ""
    website: str = ""
    investor_website: str = ""
    addresses: Addresses = Addresses()
    metrics: dict[str, CatalogMetric] = {}
    recent_filing: str = ""
    recent_filings: list[Filing] = []
    description: str = ""
    has_facts: bool = False
    has_profile: bool = False
    facts_note: str | None = None
    profile_note: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
