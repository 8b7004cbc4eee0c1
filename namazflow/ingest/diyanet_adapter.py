"""
Diyanet adapter.

Thin HTTP wrappers around the two endpoints of the Diyanet prayer-time
site (https://namazvakitleri.diyanet.gov.tr):

* the locality directory, a JSON endpoint listing the districts of a
  province (``home/GetRegList``), and
* the district page, an HTML document that embeds today's times in
  inline JavaScript and the upcoming days in a table.

Each call is a single blocking GET.  Failures are raised immediately as
`TransportError` / `DecodeError`; nothing is retried or cached.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from ..config import Settings
from ..errors import DecodeError, TransportError
from ..normalize.schema import SubRegion

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept-Language": "tr-TR,tr;q=0.9,en-US;q=0.8,en;q=0.7",
}


def _get(url: str, **kwargs) -> requests.Response:
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers=HEADERS, timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as exc:
        raise TransportError(f"HTTP isteği hatası: {exc}") from exc
    if resp.status_code != requests.codes.ok:
        raise TransportError(f"HTTP hatası! durum: {resp.status_code} ({url})")
    return resp


def region_list_url(settings: Settings) -> str:
    return f"{settings.base_url}/{settings.culture}/home/GetRegList"


def schedule_page_url(sub_region_id: str, settings: Settings) -> str:
    return f"{settings.base_url}/{settings.culture}/{sub_region_id}"


def fetch_sub_regions(region_id: str, settings: Optional[Settings] = None) -> List[SubRegion]:
    """Fetch the districts of a province.

    Args:
        region_id: The province's ``StateId`` (e.g. "516").
        settings: Endpoint settings; defaults are used when omitted.

    Returns:
        Districts in the order the directory lists them.  A response
        without a district list yields an empty list.

    Raises:
        TransportError: On network failure or a non-200 status.
        DecodeError: If the body is not JSON of the expected shape.
    """
    settings = settings or Settings()
    params = {
        "ChangeType": "state",
        "CountryId": settings.country_id,
        "Culture": settings.culture,
        "StateId": region_id,
    }
    resp = _get(region_list_url(settings), params=params)
    try:
        data = resp.json()
    except ValueError as exc:
        raise DecodeError(f"JSON parse hatası: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError("JSON parse hatası: beklenmeyen yanıt biçimi")

    entries = data.get("StateRegionList") or []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise DecodeError("JSON parse hatası: StateRegionList bir liste değil")
    sub_regions = [SubRegion.from_api(e) for e in entries]
    logger.info("Province %s has %d districts", region_id, len(sub_regions))
    return sub_regions


def fetch_schedule_page(sub_region_id: str, settings: Optional[Settings] = None) -> str:
    """Fetch the raw HTML of a district's prayer-time page.

    The body is decoded as UTF-8 whatever the declared content type.
    """
    settings = settings or Settings()
    resp = _get(schedule_page_url(sub_region_id, settings))
    return resp.content.decode("utf-8", errors="replace")
