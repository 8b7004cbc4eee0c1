"""
Schedule page to prayer-time extractor.

Two extractors work on the raw HTML of a district page:

* `extract_daily_times` reads today's six times from the inline
  JavaScript assignments (``var _imsakTime = "04:12";`` ...).
* `extract_schedule_rows` reads the multi-day table, one `<tr>` per day
  with eight cells: Gregorian date, Hijri date and the six times.

Both are lenient: labels that are not found and rows of the wrong shape
are dropped rather than reported.  It is up to the caller to decide
whether what came back is enough.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List

from bs4 import BeautifulSoup

from .dates import parse_date_to_iso
from .schema import PRAYER_LABELS, DailySchedule, PrayerTime

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")
ROW_CELLS = 2 + len(PRAYER_LABELS)


def _script_var(name: str) -> re.Pattern:
    return re.compile(name + r'\s*=\s*"([0-9]{2}:[0-9]{2})"')


# Label -> matcher, in canonical order.  A change in the page's variable
# names only needs an edit here.
DAILY_PATTERNS: Dict[str, re.Pattern] = {
    "İmsak": _script_var("_imsakTime"),
    "Güneş": _script_var("_gunesTime"),
    "Öğle": _script_var("_ogleTime"),
    "İkindi": _script_var("_ikindiTime"),
    "Akşam": _script_var("_aksamTime"),
    "Yatsı": _script_var("_yatsiTime"),
}


def extract_daily_times(html: str) -> List[PrayerTime]:
    """Extract today's prayer times from the inline script variables.

    Args:
        html: Raw HTML of the district page.

    Returns:
        Up to six `PrayerTime` entries in canonical order.  Labels whose
        variable is missing are left out; an empty list means nothing
        matched at all.
    """
    times: List[PrayerTime] = []
    for label, pattern in DAILY_PATTERNS.items():
        match = pattern.search(html)
        if match:
            times.append(PrayerTime(name=label, clock_time=match.group(1)))
        else:
            logger.debug("No script value found for %s", label)
    if times and len(times) < len(DAILY_PATTERNS):
        logger.warning(
            "Only %d of %d daily prayer times found", len(times), len(DAILY_PATTERNS)
        )
    return times


def extract_schedule_rows(html: str) -> List[DailySchedule]:
    """Extract the multi-day schedule table.

    Rows are returned in document order.  A row is used only when it
    has exactly eight cells, two non-empty dates followed by six
    ``HH:MM`` values; anything else is skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    days: List[DailySchedule] = []
    skipped = 0
    for row in soup.find_all("tr"):
        cells = [td.get_text().strip() for td in row.find_all("td", recursive=False)]
        if len(cells) != ROW_CELLS:
            skipped += 1
            continue
        calendar_date, hijri_date, clock_times = cells[0], cells[1], cells[2:]
        if not calendar_date or not hijri_date:
            skipped += 1
            continue
        if not all(TIME_RE.match(t) for t in clock_times):
            skipped += 1
            continue
        days.append(
            DailySchedule(
                calendar_date=calendar_date,
                calendar_date_iso=parse_date_to_iso(calendar_date),
                religious_calendar_date=hijri_date,
                times=[
                    PrayerTime(name=label, clock_time=value)
                    for label, value in zip(PRAYER_LABELS, clock_times)
                ],
            )
        )
    logger.debug("Schedule table: %d rows kept, %d skipped", len(days), skipped)
    return days
