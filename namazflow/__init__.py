"""
namazflow: Diyanet prayer-time extractor.

The package fetches the prayer-time page of a Turkish district from the
Diyanet website and turns it into normalized JSON records.

The flow is:

1. **ingest** – Static province table plus the HTTP adapter for the
   locality directory and the district schedule page.
2. **collect** – Resolve the province, choose a district and download
   its page.
3. **normalize** – Extract today's times from inline script variables
   and the multi-day table rows, convert Turkish dates to ISO, and
   write JSON.
4. **aggregate** – Assemble the daily, weekly or yearly record and its
   statistics.
5. **cli** – Command line entry point wiring together the above.
"""

__version__ = "0.1.0"
