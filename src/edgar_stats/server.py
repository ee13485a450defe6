"""EDGAR Company Stats: MCP server exposing normalized company records.

Tools
─────
  1. get_company_stats     — ticker → CIK + profile + key metrics + recent filings
  2. resolve_cik           — ticker → 10-digit CIK
  3. format_company_stats  — the same record with display-formatted values
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from edgar_stats.company_stats import get_company_stats as _get_company_stats
from edgar_stats.config import get_config
from edgar_stats.errors import EdgarError
from edgar_stats.formatting import display_record
from edgar_stats.sec_client import INVALID_SYMBOL, get_sec_client

mcp = FastMCP(name="EDGAR-Company-Stats")


@mcp.tool()
def get_company_stats(symbol: str) -> dict:
    """Get the normalized SEC EDGAR record for a ticker symbol.

    Returns CIK, tickers, exchanges, entity metadata, business/mailing
    addresses, key financial metrics (value, unit, as-of date, format tag),
    the most recent filing date and up to 10 recent filings.

    'error' is set when nothing could be retrieved. 'facts_note' and
    'profile_note' are warnings: the rest of the record is still usable.
    """
    return _get_company_stats(symbol).model_dump()


@mcp.tool()
def resolve_cik(symbol: str) -> dict:
    """Resolve a ticker symbol (e.g. 'IBM') to its 10-digit SEC CIK."""
    symbol = symbol.strip().upper()
    if not symbol:
        return {"symbol": symbol, "error": INVALID_SYMBOL}
    try:
        return {"symbol": symbol, "cik": get_sec_client().resolve_cik(symbol)}
    except EdgarError as exc:
        return {"symbol": symbol, "error": str(exc)}


@mcp.tool()
def format_company_stats(symbol: str) -> dict:
    """Get the company record with values formatted for display.

    Metrics come back as '$1,234,567' / '1,234' / '6.43' strings and dates
    as 'Jun 30, 2024'. Empty overview fields are dropped.
    """
    return display_record(_get_company_stats(symbol))


# ═══════════════════════════════════════════════════════════════════════════
#  ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    import sys

    logging.basicConfig(level=get_config().log_level)

    # Support SSE transport for remote hosting:
    #   python -m edgar_stats.server --sse
    # Default is STDIO (for local MCP clients)
    if "--sse" in sys.argv:
        mcp.run(transport="sse", port=get_config().port)
    else:
        mcp.run()
