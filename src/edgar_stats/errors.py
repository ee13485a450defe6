"""Error taxonomy for SEC EDGAR retrieval.

Every retrieval function raises one of these with a readable message;
``str(exc)`` is what ends up in front of the user. Raw ``requests``
exceptions never leave ``sec_client``.

Only ``NoDataError`` describes a soft condition — the orchestrator keeps
going with whatever the other endpoint returned.
"""

from __future__ import annotations


class EdgarError(Exception):
    """Base class for all retrieval failures."""


class InvalidInputError(EdgarError):
    """Empty symbol, or an identifier with no digits in it."""


class TransportError(EdgarError):
    """Network / DNS / TLS / timeout failure reaching SEC."""


class UpstreamStatusError(EdgarError):
    """SEC answered with something other than HTTP 200."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(EdgarError):
    """Body was not JSON, or not the shape we expected."""


class NotFoundError(EdgarError):
    """Symbol is not in the SEC ticker registry."""


class NoDataError(EdgarError):
    """Valid response, but the sub-structure we need is absent or empty."""
