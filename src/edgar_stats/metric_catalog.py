"""Static catalogue of the financial metrics shown for every company.

Order matters: the facts normalizer walks this list top to bottom, and the
first metric with a non-empty date becomes the company's "most recent
filing" date.
"""

from __future__ import annotations

from typing import NamedTuple

from edgar_stats.models import MetricFormat


class MetricDefinition(NamedTuple):
    label: str              # display label, key in CompanyFacts.metrics
    concept: str            # us-gaap tag name (without prefix)
    unit: str = "USD"       # key under concept["units"]
    format: MetricFormat = "currency"


METRIC_CATALOG: tuple[MetricDefinition, ...] = (
    MetricDefinition("Total Assets", "Assets"),
    MetricDefinition("Total Liabilities", "Liabilities"),
    MetricDefinition("Current Assets", "AssetsCurrent"),
    MetricDefinition("Current Liabilities", "LiabilitiesCurrent"),
    MetricDefinition("Revenue", "Revenues"),
    MetricDefinition("Net Income", "NetIncomeLoss"),
    MetricDefinition("Operating Cash Flow", "NetCashProvidedByUsedInOperatingActivities"),
    MetricDefinition("Diluted EPS", "EarningsPerShareDiluted", "USD/shares", "decimal"),
    MetricDefinition("Shares Outstanding", "CommonStockSharesOutstanding", "shares", "number"),
)
