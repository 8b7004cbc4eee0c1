"""
Exception hierarchy for namazflow.

Every failure that ends an invocation derives from `NamazflowError` so
the CLI can report it as a single terminal message.  Library code never
retries; the underlying exception (requests, json, OS) is chained with
``raise ... from exc`` for debugging.
"""

from __future__ import annotations


class NamazflowError(RuntimeError):
    """Base class for fatal pipeline errors."""


class ConfigError(NamazflowError):
    """The configuration file is missing or malformed."""


class TransportError(NamazflowError):
    """Network failure or a non-200 HTTP response."""


class DecodeError(NamazflowError):
    """The locality directory returned something that is not the expected JSON."""


class LookupFailure(NamazflowError):
    """A province or district identifier could not be resolved."""


class RegionNotFoundError(LookupFailure):
    pass


class SubRegionNotFoundError(LookupFailure):
    pass


class ExtractionError(NamazflowError):
    """No prayer time could be extracted from the schedule page."""


class OutputWriteError(NamazflowError):
    """Creating the output directory or writing the JSON file failed."""
