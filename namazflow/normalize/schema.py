"""
Record types for the normalized prayer-time output.

The dataclasses below use English attribute names; their JSON form keeps
the Turkish field names that downstream consumers rely on
(`il`, `ilce`, `vakit_tipi`, `gunluk_vakitler`, ...).  Optional parts of a
`ResultRecord` are omitted from the JSON instead of being written as
``null``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# Canonical order of the six daily prayers.
PRAYER_LABELS = ("İmsak", "Güneş", "Öğle", "İkindi", "Akşam", "Yatsı")


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    name_latin: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "adi": self.name, "adiEn": self.name_latin}


@dataclass(frozen=True)
class SubRegion:
    id: str
    name: str
    name_latin: str
    page_url_fragment: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "SubRegion":
        """Build from one `StateRegionList` entry of the directory response."""
        return cls(
            id=str(data.get("IlceID") or ""),
            name=data.get("IlceAdi") or "",
            name_latin=data.get("IlceAdiEn") or "",
            page_url_fragment=data.get("IlceUrl") or "",
        )


@dataclass
class PrayerTime:
    name: str
    clock_time: str  # HH:MM

    def to_dict(self) -> Dict[str, str]:
        return {"VakitAdi": self.name, "Vakit": self.clock_time}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "PrayerTime":
        return cls(name=data["VakitAdi"], clock_time=data["Vakit"])


@dataclass
class DailySchedule:
    calendar_date: str            # as printed on the page, e.g. "03 Ağustos 2025 Pazar"
    calendar_date_iso: str        # YYYY-MM-DD, empty when the date could not be parsed
    religious_calendar_date: str  # Hijri date, carried through unparsed
    times: List[PrayerTime] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tarih": self.calendar_date,
            "tarih_iso": self.calendar_date_iso,
            "hicriTarih": self.religious_calendar_date,
            "vakitler": [t.to_dict() for t in self.times],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailySchedule":
        return cls(
            calendar_date=data["tarih"],
            calendar_date_iso=data["tarih_iso"],
            religious_calendar_date=data["hicriTarih"],
            times=[PrayerTime.from_dict(t) for t in data.get("vakitler", [])],
        )


class ScheduleMode(str, Enum):
    DAILY = "gunluk"
    WEEKLY = "haftalik"
    YEARLY = "yillik"

    @classmethod
    def from_text(cls, text: Optional[str]) -> "ScheduleMode":
        """Map free text to a mode; anything unrecognized means daily."""
        if isinstance(text, cls):
            return text
        normalized = (text or "").strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        return cls.DAILY


@dataclass
class Statistics:
    count: int
    first_date: str
    last_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "toplam_gun": self.count,
            "ilk_tarih": self.first_date,
            "son_tarih": self.last_date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Statistics":
        return cls(
            count=int(data["toplam_gun"]),
            first_date=data["ilk_tarih"],
            last_date=data["son_tarih"],
        )


@dataclass
class ResultRecord:
    region_name: str
    region_id: str
    sub_region_name: str
    sub_region_id: str
    mode: ScheduleMode
    generated_date: str  # YYYY-MM-DD
    daily_times: Optional[List[PrayerTime]] = None
    weekly_times: Optional[List[DailySchedule]] = None
    yearly_times: Optional[List[DailySchedule]] = None
    statistics: Optional[Statistics] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "il": self.region_name,
            "il_id": self.region_id,
            "ilce": self.sub_region_name,
            "ilce_id": self.sub_region_id,
            "vakit_tipi": self.mode.value,
            "tarih": self.generated_date,
        }
        if self.daily_times:
            data["gunluk_vakitler"] = [t.to_dict() for t in self.daily_times]
        if self.weekly_times:
            data["haftalik_vakitler"] = [d.to_dict() for d in self.weekly_times]
        if self.yearly_times:
            data["yillik_vakitler"] = [d.to_dict() for d in self.yearly_times]
        if self.statistics is not None:
            data["istatistikler"] = self.statistics.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResultRecord":
        daily = data.get("gunluk_vakitler")
        weekly = data.get("haftalik_vakitler")
        yearly = data.get("yillik_vakitler")
        stats = data.get("istatistikler")
        return cls(
            region_name=data["il"],
            region_id=data["il_id"],
            sub_region_name=data["ilce"],
            sub_region_id=data["ilce_id"],
            mode=ScheduleMode(data["vakit_tipi"]),
            generated_date=data["tarih"],
            daily_times=[PrayerTime.from_dict(t) for t in daily] if daily else None,
            weekly_times=[DailySchedule.from_dict(d) for d in weekly] if weekly else None,
            yearly_times=[DailySchedule.from_dict(d) for d in yearly] if yearly else None,
            statistics=Statistics.from_dict(stats) if stats else None,
        )
