"""
Province reference data.

The 81 Turkish provinces as listed by the Diyanet prayer-time site,
keyed by the site's ``StateId``.  The table is built once at import
time and never modified.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ..errors import RegionNotFoundError
from ..normalize.schema import Region

COUNTRY = MappingProxyType({"id": "2", "adi": "Türkiye", "adiEn": "Turkey"})

REGIONS: Tuple[Region, ...] = (
    Region("500", "ADANA", "ADANA"),
    Region("501", "ADIYAMAN", "ADIYAMAN"),
    Region("502", "AFYONKARAHİSAR", "AFYONKARAHISAR"),
    Region("503", "AĞRI", "AGRI"),
    Region("504", "AKSARAY", "AKSARAY"),
    Region("505", "AMASYA", "AMASYA"),
    Region("506", "ANKARA", "ANKARA"),
    Region("507", "ANTALYA", "ANTALYA"),
    Region("508", "ARDAHAN", "ARDAHAN"),
    Region("509", "ARTVİN", "ARTVIN"),
    Region("510", "AYDIN", "AYDIN"),
    Region("511", "BALIKESİR", "BALIKESIR"),
    Region("512", "BARTIN", "BARTIN"),
    Region("513", "BATMAN", "BATMAN"),
    Region("514", "BAYBURT", "BAYBURT"),
    Region("515", "BİLECİK", "BILECIK"),
    Region("516", "BİNGÖL", "BINGOL"),
    Region("517", "BİTLİS", "BITLIS"),
    Region("518", "BOLU", "BOLU"),
    Region("519", "BURDUR", "BURDUR"),
    Region("520", "BURSA", "BURSA"),
    Region("521", "ÇANAKKALE", "CANAKKALE"),
    Region("522", "ÇANKIRI", "CANKIRI"),
    Region("523", "ÇORUM", "CORUM"),
    Region("524", "DENİZLİ", "DENIZLI"),
    Region("525", "DİYARBAKIR", "DIYARBAKIR"),
    Region("526", "DÜZCE", "DUZCE"),
    Region("527", "EDİRNE", "EDIRNE"),
    Region("528", "ELAZIĞ", "ELAZIG"),
    Region("529", "ERZİNCAN", "ERZINCAN"),
    Region("530", "ERZURUM", "ERZURUM"),
    Region("531", "ESKİŞEHİR", "ESKISEHIR"),
    Region("532", "GAZİANTEP", "GAZIANTEP"),
    Region("533", "GİRESUN", "GIRESUN"),
    Region("534", "GÜMÜŞHANE", "GUMUSHANE"),
    Region("535", "HAKKARİ", "HAKKARI"),
    Region("536", "HATAY", "HATAY"),
    Region("537", "IĞDIR", "IGDIR"),
    Region("538", "ISPARTA", "ISPARTA"),
    Region("539", "İSTANBUL", "ISTANBUL"),
    Region("540", "İZMİR", "IZMIR"),
    Region("541", "KAHRAMANMARAŞ", "KAHRAMANMARAS"),
    Region("542", "KARABÜK", "KARABUK"),
    Region("543", "KARAMAN", "KARAMAN"),
    Region("544", "KARS", "KARS"),
    Region("545", "KASTAMONU", "KASTAMONU"),
    Region("546", "KAYSERİ", "KAYSERI"),
    Region("547", "KİLİS", "KILIS"),
    Region("548", "KIRIKKALE", "KIRIKKALE"),
    Region("549", "KIRKLARELİ", "KIRKLARELI"),
    Region("550", "KIRŞEHİR", "KIRSEHIR"),
    Region("551", "KOCAELİ", "KOCAELI"),
    Region("552", "KONYA", "KONYA"),
    Region("553", "KÜTAHYA", "KUTAHYA"),
    Region("554", "MALATYA", "MALATYA"),
    Region("555", "MANİSA", "MANISA"),
    Region("556", "MARDİN", "MARDIN"),
    Region("557", "MERSİN", "MERSIN"),
    Region("558", "MUĞLA", "MUGLA"),
    Region("559", "MUŞ", "MUS"),
    Region("560", "NEVŞEHİR", "NEVSEHIR"),
    Region("561", "NİĞDE", "NIGDE"),
    Region("562", "ORDU", "ORDU"),
    Region("563", "OSMANİYE", "OSMANIYE"),
    Region("564", "RİZE", "RIZE"),
    Region("565", "SAKARYA", "SAKARYA"),
    Region("566", "SAMSUN", "SAMSUN"),
    Region("567", "ŞANLIURFA", "SANLIURFA"),
    Region("568", "SİİRT", "SIIRT"),
    Region("569", "SİNOP", "SINOP"),
    Region("570", "ŞIRNAK", "SIRNAK"),
    Region("571", "SİVAS", "SIVAS"),
    Region("572", "TEKİRDAĞ", "TEKIRDAG"),
    Region("573", "TOKAT", "TOKAT"),
    Region("574", "TRABZON", "TRABZON"),
    Region("575", "TUNCELİ", "TUNCELI"),
    Region("576", "UŞAK", "USAK"),
    Region("577", "VAN", "VAN"),
    Region("578", "YALOVA", "YALOVA"),
    Region("579", "YOZGAT", "YOZGAT"),
    Region("580", "ZONGULDAK", "ZONGULDAK"),
)

REGIONS_BY_ID: Mapping[str, Region] = MappingProxyType({r.id: r for r in REGIONS})

_TURKISH_ASCII = str.maketrans("İıĞğÜüŞşÖöÇç", "IiGgUuSsOoCc")


def fold_name(name: str) -> str:
    """Case- and diacritic-insensitive key for comparing place names."""
    return name.strip().translate(_TURKISH_ASCII).lower()


def find_region_by_id(region_id: str) -> Region:
    region = REGIONS_BY_ID.get(str(region_id).strip())
    if region is None:
        raise RegionNotFoundError(f"il bulunamadı: {region_id}")
    return region


def find_region_by_name(name: str) -> Region:
    """Find a province by its Turkish or Latin name, ignoring case."""
    key = fold_name(name)
    for region in REGIONS:
        if key in (fold_name(region.name), fold_name(region.name_latin)):
            return region
    raise RegionNotFoundError(f"il bulunamadı: {name}")


def regions_payload() -> Dict[str, object]:
    """The province listing document printed by the ``iller`` command."""
    iller: List[Dict[str, str]] = [r.to_dict() for r in REGIONS]
    return {"ulke": dict(COUNTRY), "iller": iller}
