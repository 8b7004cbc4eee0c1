"""
Collection subsystem for namazflow.

Wraps the Diyanet adapter: resolves the province, selects a district
and returns the raw schedule page together with its metadata.  Exactly
two requests are made per run, one after the other.
"""

from .runner import Collected, collect, select_sub_region  # noqa: F401
