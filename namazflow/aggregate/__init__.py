"""
Aggregation subsystem for namazflow.

`assembler` combines extractor output, province/district metadata and
the requested schedule mode into the final `ResultRecord`, including the
day-count statistics for weekly and yearly output.
"""

from .assembler import WEEKLY_DAYS, assemble_record, compute_statistics  # noqa: F401
