from __future__ import annotations
"""Exception hierarchy for vehicle enquiry lookups."""
from typing import Optional


class DvlaError(Exception):
    """Base class for every lookup failure."""


class TransportError(DvlaError):
    """The HTTP call failed (DNS, connection, timeout, error status)."""


class ParseError(DvlaError):
    """Response body could not be read as HTML."""


class ContinuationNotFoundError(DvlaError):
    """Confirmation page did not carry the continuation form or its inputs."""

    def __init__(self, message: str = "required continuation parameters not found", missing: tuple[str, ...] = ()):
        if missing:
            message = f"{message} (missing: {', '.join(missing)})"
        super().__init__(message)
        self.missing = missing


class DetailsNotFoundError(DvlaError):
    """Details page has no vehicle attribute container."""

    def __init__(self, message: str = "vehicle details not found"):
        super().__init__(message)


class MalformedItemError(DvlaError):
    """A vehicle attribute item does not hold exactly one value element."""

    def __init__(self, index: int, found: int):
        super().__init__(f"unexpected item structure at item={index} value_elements={found}")
        self.index = index
        self.found = found


class CheckError(DvlaError):
    """Stage-tagged wrapper raised by ``check``.

    ``stage`` is one of ``negotiation``, ``fetch`` or ``extraction``; the
    underlying error is kept in ``cause`` (and ``__cause__``).
    """

    def __init__(self, stage: str, cause: Optional[BaseException]):
        super().__init__(f"{stage} failed: {cause}")
        self.stage = stage
        self.cause = cause


__all__ = [
    "DvlaError",
    "TransportError",
    "ParseError",
    "ContinuationNotFoundError",
    "DetailsNotFoundError",
    "MalformedItemError",
    "CheckError",
]
