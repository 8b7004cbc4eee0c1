"""
Record assembly.

Combines the extractor output with province/district metadata and the
requested `ScheduleMode` into one `ResultRecord`.  Daily times are the
minimum viable result: if the page yields none, assembly fails for
every mode.  Weekly and yearly modes additionally read the schedule
table and attach summary statistics over the retained days.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence, Union

from ..errors import ExtractionError
from ..normalize.html_to_fields import extract_daily_times, extract_schedule_rows
from ..normalize.schema import (
    DailySchedule,
    Region,
    ResultRecord,
    ScheduleMode,
    Statistics,
    SubRegion,
)

logger = logging.getLogger(__name__)

WEEKLY_DAYS = 7


def compute_statistics(days: Sequence[DailySchedule]) -> Optional[Statistics]:
    """Summarize a run of days, or return None when there are none."""
    if not days:
        return None
    return Statistics(
        count=len(days),
        first_date=days[0].calendar_date,
        last_date=days[-1].calendar_date,
    )


def assemble_record(
    region: Region,
    sub_region: SubRegion,
    html: str,
    mode: Union[ScheduleMode, str],
    today: Optional[date] = None,
) -> ResultRecord:
    """Build the output record for one district page.

    Args:
        region: Province the page belongs to.
        sub_region: District the page was fetched for.
        html: Raw page markup.
        mode: Requested mode; free text is accepted and falls back to
            daily when unrecognized.
        today: Date stamped on the record, `date.today()` by default.

    Returns:
        A `ResultRecord` with exactly one of the daily/weekly/yearly
        fields populated (weekly and yearly stay empty if the page has
        no schedule table).

    Raises:
        ExtractionError: If no daily prayer time could be extracted.
    """
    schedule_mode = ScheduleMode.from_text(mode)
    record = ResultRecord(
        region_name=region.name,
        region_id=region.id,
        sub_region_name=sub_region.name,
        sub_region_id=sub_region.id,
        mode=schedule_mode,
        generated_date=(today or date.today()).isoformat(),
    )

    daily_times = extract_daily_times(html)
    if not daily_times:
        raise ExtractionError("günlük vakitler parse edilemedi")

    if schedule_mode is ScheduleMode.DAILY:
        record.daily_times = daily_times
        return record

    days = extract_schedule_rows(html)
    if schedule_mode is ScheduleMode.WEEKLY:
        days = days[:WEEKLY_DAYS]
    if not days:
        logger.warning("No schedule rows found for %s; %s output left empty",
                       sub_region.name, schedule_mode.value)
        return record

    if schedule_mode is ScheduleMode.WEEKLY:
        record.weekly_times = days
    else:
        record.yearly_times = days
    record.statistics = compute_statistics(days)
    logger.info("Assembled %s record with %d days", schedule_mode.value, len(days))
    return record
