"""
Unittest suite for the schedule page extractors.

The pages are synthesised in `tests/pages.py`: an inline script block
holding today's six times and a table with one row per day.  No
network access is involved.
"""

from __future__ import annotations

import unittest

from namazflow.normalize.html_to_fields import extract_daily_times, extract_schedule_rows
from namazflow.normalize.schema import PRAYER_LABELS
from tests.pages import DAILY_SCRIPT, make_page, make_row

# "04:12" written with Arabic-Indic digits
ARABIC_INDIC_TIME = "٠٤:١٢"


class TestDailyExtractor(unittest.TestCase):
    """Inline script variable extraction."""

    def test_all_six_in_canonical_order(self) -> None:
        times = extract_daily_times(DAILY_SCRIPT)
        self.assertEqual([t.name for t in times], list(PRAYER_LABELS))
        self.assertEqual(
            [t.clock_time for t in times],
            ["04:12", "05:48", "13:05", "16:52", "20:10", "21:40"],
        )

    def test_source_order_does_not_matter(self) -> None:
        html = (
            'var _yatsiTime = "21:40"; var _imsakTime="04:12";'
            'var _aksamTime  =  "20:10"; var _ogleTime = "13:05";'
        )
        times = extract_daily_times(html)
        self.assertEqual([t.name for t in times], ["İmsak", "Öğle", "Akşam", "Yatsı"])
        self.assertEqual([t.clock_time for t in times], ["04:12", "13:05", "20:10", "21:40"])

    def test_missing_labels_are_omitted(self) -> None:
        times = extract_daily_times('var _gunesTime = "05:48";')
        self.assertEqual(len(times), 1)
        self.assertEqual(times[0].name, "Güneş")

    def test_malformed_values_do_not_match(self) -> None:
        html = 'var _imsakTime = "4:12"; var _gunesTime = \'05:48\';'
        self.assertEqual(extract_daily_times(html), [])

    def test_non_ascii_digits_do_not_match(self) -> None:
        html = f'var _imsakTime = "{ARABIC_INDIC_TIME}"; var _gunesTime = "05:48";'
        times = extract_daily_times(html)
        self.assertEqual([(t.name, t.clock_time) for t in times], [("Güneş", "05:48")])

    def test_no_patterns_returns_empty(self) -> None:
        self.assertEqual(extract_daily_times("<html><body>bakım</body></html>"), [])


class TestTabularExtractor(unittest.TestCase):
    """Schedule table row extraction."""

    def test_rows_in_document_order(self) -> None:
        days = extract_schedule_rows(make_page(rows=3))
        self.assertEqual(len(days), 3)
        self.assertEqual(
            [d.calendar_date for d in days],
            ["01 Ağustos 2025 Pazar", "02 Ağustos 2025 Pazar", "03 Ağustos 2025 Pazar"],
        )
        self.assertEqual(days[0].calendar_date_iso, "2025-08-01")
        self.assertEqual(days[2].religious_calendar_date, "3 Safer 1447")

    def test_times_labelled_canonically(self) -> None:
        day = extract_schedule_rows(make_row(4))[0]
        self.assertEqual([t.name for t in day.times], list(PRAYER_LABELS))
        self.assertEqual(
            [t.clock_time for t in day.times],
            ["04:14", "05:44", "13:04", "16:54", "20:14", "21:44"],
        )

    def test_malformed_rows_are_skipped(self) -> None:
        short_row = "<tr><td>05 Ağustos 2025</td><td>5 Safer 1447</td><td>04:15</td></tr>"
        bad_time = (
            "<tr><td>06 Ağustos 2025</td><td>6 Safer 1447</td>"
            "<td>04:16</td><td>05:46</td><td>--:--</td><td>16:56</td><td>20:16</td><td>21:46</td></tr>"
        )
        empty_date = (
            "<tr><td> </td><td>7 Safer 1447</td>"
            "<td>04:17</td><td>05:47</td><td>13:07</td><td>16:57</td><td>20:17</td><td>21:47</td></tr>"
        )
        extra_cell = make_row(8).replace("</tr>", "<td>22:00</td></tr>")
        html = "<table>" + "".join(
            [make_row(1), short_row, make_row(2), bad_time, empty_date, extra_cell, make_row(3)]
        ) + "</table>"
        days = extract_schedule_rows(html)
        self.assertEqual([d.calendar_date_iso for d in days], ["2025-08-01", "2025-08-02", "2025-08-03"])

    def test_cells_with_attributes_are_accepted(self) -> None:
        row = (
            '<tr class="today"><td class="tarih"> 10 Ağustos 2025 Pazar </td><td class="hicri">10 Safer 1447</td>'
            '<td class="v">04:20</td><td class="v">05:50</td><td class="v">13:05</td>'
            '<td class="v">16:50</td><td class="v">20:00</td><td class="v">21:30</td></tr>'
        )
        days = extract_schedule_rows("<table>" + row + "</table>")
        self.assertEqual(len(days), 1)
        self.assertEqual(days[0].calendar_date, "10 Ağustos 2025 Pazar")
        self.assertEqual(days[0].calendar_date_iso, "2025-08-10")
        self.assertEqual(days[0].religious_calendar_date, "10 Safer 1447")
        self.assertEqual(days[0].times[-1].clock_time, "21:30")

    def test_non_ascii_digit_row_is_skipped(self) -> None:
        row = make_row(12).replace("04:12", ARABIC_INDIC_TIME)
        html = "<table>" + make_row(1) + row + "</table>"
        days = extract_schedule_rows(html)
        self.assertEqual([d.calendar_date_iso for d in days], ["2025-08-01"])

    def test_unparseable_date_keeps_row(self) -> None:
        days = extract_schedule_rows(make_row(9, month="Agustos"))
        self.assertEqual(len(days), 1)
        self.assertEqual(days[0].calendar_date, "09 Agustos 2025 Pazar")
        self.assertEqual(days[0].calendar_date_iso, "")

    def test_no_table(self) -> None:
        self.assertEqual(extract_schedule_rows(DAILY_SCRIPT), [])


if __name__ == "__main__":
    unittest.main()
