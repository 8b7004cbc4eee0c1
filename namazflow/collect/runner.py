"""
Schedule page collection.

`collect` resolves a province id to its reference record, asks the
locality directory for the province's districts, picks one and
downloads its schedule page.  When no district id is given the
province centre (the district named like the province) is chosen,
falling back to the first listed district.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from ..config import Settings
from ..errors import SubRegionNotFoundError
from ..ingest import diyanet_adapter
from ..ingest.regions import find_region_by_id, fold_name
from ..normalize.schema import Region, SubRegion

logger = logging.getLogger(__name__)


class Collected(NamedTuple):
    region: Region
    sub_region: SubRegion
    html: str


def select_sub_region(
    sub_regions: List[SubRegion], region: Region, sub_region_id: Optional[str] = None
) -> SubRegion:
    """Pick the district to fetch.

    Args:
        sub_regions: Districts of `region` as listed by the directory.
        region: The province.
        sub_region_id: Explicit district id; must be present in the list.

    Raises:
        SubRegionNotFoundError: If the list is empty or the explicit id
            is not in it.
    """
    if not sub_regions:
        raise SubRegionNotFoundError(f"ilçe listesi boş: {region.name}")
    if sub_region_id:
        for sub_region in sub_regions:
            if sub_region.id == sub_region_id:
                return sub_region
        raise SubRegionNotFoundError(f"belirtilen ilçe ID'si bulunamadı: {sub_region_id}")
    centre = fold_name(region.name)
    for sub_region in sub_regions:
        if fold_name(sub_region.name) == centre:
            return sub_region
    logger.info("No district named %s; using %s", region.name, sub_regions[0].name)
    return sub_regions[0]


def collect(
    region_id: str,
    sub_region_id: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> Collected:
    """Fetch the schedule page for a province (and optionally a district)."""
    settings = settings or Settings()
    region = find_region_by_id(region_id)
    sub_regions = diyanet_adapter.fetch_sub_regions(region.id, settings)
    sub_region = select_sub_region(sub_regions, region, sub_region_id)
    logger.info("Fetching schedule for %s / %s (%s)", region.name, sub_region.name, sub_region.id)
    html = diyanet_adapter.fetch_schedule_page(sub_region.id, settings)
    return Collected(region=region, sub_region=sub_region, html=html)
