"""Latest-value extraction from the SEC companyfacts payload.

Payload shape (trimmed):
    {
        "cik": 51143,
        "entityName": "INTERNATIONAL BUSINESS MACHINES CORP",
        "facts": {
            "us-gaap": {
                "Assets": {
                    "label": "Assets",
                    "units": {
                        "USD": [
                            {"end": "2023-12-31", "val": 135241000000,
                             "fy": 2023, "fp": "FY", "form": "10-K", ...},
                            ...
                        ]
                    }
                },
                ...
            }
        }
    }

"Latest" is decided by sorting on the ``end`` string. SEC dates are
ISO-8601 (YYYY-MM-DD) so string order is chronological order; entries
without an ``end`` sort last. If SEC ever ships non-ISO dates this needs
real date parsing.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from edgar_stats.errors import MalformedResponseError, NoDataError
from edgar_stats.metric_catalog import METRIC_CATALOG, MetricDefinition
from edgar_stats.models import CatalogMetric, CompanyFacts, Metric

log = logging.getLogger(__name__)

FACTS_NOT_JSON = "Company facts response is not valid JSON."
FACTS_NO_ENTITY_NAME = "Company facts response missing entity name."
NO_METRICS_NOTE = "No financial metrics were found in the SEC facts dataset for this company."


def _safe(v: Any) -> float | None:
    """Convert a value to float, returning None for invalid/missing values."""
    if v is None:
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return f


def select_latest(entries: Sequence[Any]) -> Mapping[str, Any] | None:
    """Pick the most recent entry that carries a value.

    Entries that aren't mappings or have no ``val`` are ignored. Sorting is
    stable, so on equal ``end`` dates the entry seen first wins.
    """
    valid = [e for e in entries if isinstance(e, Mapping) and e.get("val") is not None]
    if not valid:
        return None

    valid.sort(key=lambda e: str(e.get("end") or ""), reverse=True)
    return valid[0]


def extract_metric(
    facts: Mapping[str, Any],
    concept: str,
    unit: str = "USD",
    taxonomy: str = "us-gaap",
) -> Metric | None:
    """Latest value for ``facts[taxonomy][concept]["units"][unit]``.

    Returns None for anything missing or malformed along the way; absence is
    not an error at this level. A reported value of 0 is kept.
    """
    node: Any = facts
    for key in (taxonomy, concept, "units", unit):
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]

    if isinstance(node, Mapping):
        node = list(node.values())
    elif not isinstance(node, list):
        return None

    latest = select_latest(node)
    if latest is None:
        return None

    value = _safe(latest.get("val"))
    if value is None:
        return None

    date = latest.get("end")
    if date is None:
        date = latest.get("fy")
    if date is None:
        date = ""

    return Metric(value=value, unit=unit, date=str(date))


def normalize_facts(
    data: Any,
    catalog: Sequence[MetricDefinition] = METRIC_CATALOG,
) -> CompanyFacts:
    """Build a CompanyFacts record from a raw companyfacts response.

    Raises MalformedResponseError when the body is not an object or has no
    ``entityName``, and NoDataError when the ``facts`` object is missing or
    empty. An entity with facts but none of the catalogue metrics is
    returned with ``note`` set.
    """
    if not isinstance(data, Mapping):
        raise MalformedResponseError(FACTS_NOT_JSON)
    if data.get("entityName") is None:
        raise MalformedResponseError(FACTS_NO_ENTITY_NAME)

    facts_payload = data.get("facts")
    if not isinstance(facts_payload, Mapping) or not facts_payload:
        raise NoDataError("Company facts payload missing in SEC response.")

    metrics: dict[str, CatalogMetric] = {}
    recent_filing = "N/A"

    for definition in catalog:
        metric = extract_metric(facts_payload, definition.concept, definition.unit)
        if metric is None:
            continue

        if recent_filing == "N/A" and metric.date != "":
            recent_filing = metric.date

        metrics[definition.label] = CatalogMetric(
            **metric.model_dump(), format=definition.format
        )

    note = None
    if not metrics:
        log.warning("No catalogue metrics in companyfacts for %s", data.get("entityName"))
        note = NO_METRICS_NOTE

    return CompanyFacts(
        name=str(data["entityName"]),
        metrics=metrics,
        recent_filing=recent_filing,
        note=note,
    )
