"""
Source adapters for namazflow.

`regions` holds the static province table; `diyanet_adapter` speaks to
the Diyanet website to list a province's districts and download a
district's schedule page.
"""

from .regions import REGIONS, find_region_by_id, find_region_by_name, regions_payload  # noqa: F401
from .diyanet_adapter import fetch_schedule_page, fetch_sub_regions  # noqa: F401
