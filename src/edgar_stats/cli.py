"""Terminal front end for EDGAR Company Stats.

Usage:

  edgar-stats stats IBM        # full overview, metrics, filings
  edgar-stats cik AAPL         # ticker → CIK only
  edgar-stats filings MSFT     # recent filings with document links
  edgar-stats json NVDA        # raw normalized record as JSON
"""

from __future__ import annotations

import json
import logging
import sys

from edgar_stats.company_stats import get_company_stats
from edgar_stats.config import get_config
from edgar_stats.errors import EdgarError
from edgar_stats.formatting import display_record
from edgar_stats.sec_client import INVALID_SYMBOL, get_sec_client


def _header(title: str):
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def cmd_stats(symbol: str) -> int:
    """Print the formatted company record."""
    record = display_record(get_company_stats(symbol))
    _header(f"{record.get('name') or record['symbol']} ({record['symbol']})")

    if record.get("error"):
        print(f"  ERROR: {record['error']}")
        return 1

    for label, value in record["overview"].items():
        print(f"  {label + ':':26s} {value}")
    if record["profile_note"]:
        print(f"\n  Profile note: {record['profile_note']}")

    for kind in ("business", "mailing"):
        address = record[f"{kind}_address"]
        if address:
            print(f"\n  {kind.title()} Address: {address}")

    if record["metrics"]:
        print("\n  Key Financial Metrics:")
        for m in record["metrics"]:
            print(f"    {m['label']:24s}  {m['value']:>22s}  as of {m['as_of']}")
    elif record["facts_note"]:
        print(f"\n  Financial data note: {record['facts_note']}")

    _print_filings(record["recent_filings"])

    if record["description"]:
        print(f"\n  {record['description']}")
    return 0


def _print_filings(filings: list[dict]):
    if not filings:
        return
    print("\n  Recent Filings:")
    print(f"    {'Form':8s}  {'Filed':13s}  {'Report':13s}  {'Accession':22s}  Document")
    print(f"    {'-'*8}  {'-'*13}  {'-'*13}  {'-'*22}  {'-'*30}")
    for f in filings:
        print(
            f"    {f['form']:8s}  {f['filing_date']:13s}  {f['report_date']:13s}"
            f"  {f['accession']:22s}  {f['document']}"
        )


def cmd_cik(symbol: str) -> int:
    """Resolve a ticker to its CIK."""
    symbol = symbol.strip().upper()
    if not symbol:
        print(f"  ERROR: {INVALID_SYMBOL}")
        return 1
    try:
        print(f"  {symbol}: {get_sec_client().resolve_cik(symbol)}")
    except EdgarError as exc:
        print(f"  ERROR: {exc}")
        return 1
    return 0


def cmd_filings(symbol: str) -> int:
    """List recent filings only."""
    record = display_record(get_company_stats(symbol))
    if record.get("error"):
        print(f"  ERROR: {record['error']}")
        return 1
    _header(f"Filings: {record['symbol']}")
    if not record["recent_filings"]:
        print("  No filings found.")
        if record["profile_note"]:
            print(f"  Profile note: {record['profile_note']}")
        return 0
    _print_filings(record["recent_filings"])
    return 0


def cmd_json(symbol: str) -> int:
    """Dump the normalized record."""
    stats = get_company_stats(symbol)
    print(json.dumps(stats.model_dump(), indent=2))
    return 0 if stats.ok else 1


COMMANDS = {
    "stats": cmd_stats,
    "cik": cmd_cik,
    "filings": cmd_filings,
    "json": cmd_json,
}


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not argv or argv[0] in ("-h", "--help", "help"):
        print(__doc__)
        return 0

    cmd_name = argv[0].lower()
    if cmd_name not in COMMANDS:
        # bare symbol: `edgar-stats IBM`
        return cmd_stats(argv[0])

    symbol = argv[1] if len(argv) > 1 else "IBM"
    return COMMANDS[cmd_name](symbol)


if __name__ == "__main__":
    sys.exit(main())
