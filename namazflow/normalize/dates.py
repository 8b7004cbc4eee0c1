"""
Turkish calendar-date normalization.

The schedule table prints Gregorian dates as ``"03 Ağustos 2025 Pazar"``
(day, month name, year, weekday).  `parse_date_to_iso` turns that into
``"2025-08-03"``.  Matching of the month name is exact and
case-sensitive; abbreviations or other spellings are not recognized.
"""

from __future__ import annotations

from typing import Dict

TURKISH_MONTHS: Dict[str, str] = {
    "Ocak": "01",
    "Şubat": "02",
    "Mart": "03",
    "Nisan": "04",
    "Mayıs": "05",
    "Haziran": "06",
    "Temmuz": "07",
    "Ağustos": "08",
    "Eylül": "09",
    "Ekim": "10",
    "Kasım": "11",
    "Aralık": "12",
}


def parse_date_to_iso(text: str) -> str:
    """Convert a Turkish date string to ``YYYY-MM-DD``.

    Args:
        text: Free text with at least day, month name and year separated
            by whitespace.  Further tokens (e.g. the weekday) are ignored.

    Returns:
        The ISO date, or an empty string when there are fewer than three
        tokens or the month name is unknown.
    """
    parts = (text or "").split()
    if len(parts) < 3:
        return ""
    day, month_name, year = parts[0], parts[1], parts[2]
    month = TURKISH_MONTHS.get(month_name)
    if month is None:
        return ""
    return f"{year}-{month}-{day.zfill(2)}"
