"""
Normalization subsystem for namazflow.

Turns the raw HTML of a district schedule page into typed records and
writes them as JSON.  The record layout is defined by the dataclasses in
`schema.py`; `html_to_fields.py` holds the two extractors and `dates.py`
converts Turkish dates to ISO form.
"""

from .schema import (  # noqa: F401
    PRAYER_LABELS,
    DailySchedule,
    PrayerTime,
    Region,
    ResultRecord,
    ScheduleMode,
    Statistics,
    SubRegion,
)
from .dates import parse_date_to_iso  # noqa: F401
from .html_to_fields import extract_daily_times, extract_schedule_rows  # noqa: F401
from .write_json import auto_output_path, clean_file_name, record_to_json, write_json_file  # noqa: F401
