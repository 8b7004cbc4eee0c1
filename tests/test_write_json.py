"""Tests for JSON serialization and output paths."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from unittest import mock

import pytest

from namazflow.aggregate.assembler import assemble_record
from namazflow.errors import OutputWriteError
from namazflow.normalize.schema import Region, ResultRecord, SubRegion
from namazflow.normalize.write_json import (
    auto_output_path,
    clean_file_name,
    record_to_json,
    write_json_file,
)

REGION = Region("567", "ŞANLIURFA", "SANLIURFA")
SUB_REGION = SubRegion("9831", "ŞANLIURFA", "SANLIURFA", "sanliurfa-icin-namaz-vakti")


@pytest.mark.parametrize("mode, absent", [
    ("gunluk", {"haftalik_vakitler", "yillik_vakitler", "istatistikler"}),
    ("haftalik", {"gunluk_vakitler", "yillik_vakitler"}),
    ("yillik", {"gunluk_vakitler", "haftalik_vakitler"}),
])
def test_round_trip(page_factory, mode: str, absent: set) -> None:
    record = assemble_record(REGION, SUB_REGION, page_factory(rows=9), mode, today=date(2025, 8, 3))
    text = record_to_json(record)
    data = json.loads(text)
    assert absent.isdisjoint(data)
    assert "null" not in text
    assert ResultRecord.from_dict(data) == record


def test_json_layout(page_factory) -> None:
    record = assemble_record(REGION, SUB_REGION, page_factory(rows=2), "haftalik", today=date(2025, 8, 3))
    text = record_to_json(record)
    assert "ŞANLIURFA" in text
    assert ": " not in text
    data = json.loads(text)
    assert list(data) == [
        "il", "il_id", "ilce", "ilce_id", "vakit_tipi", "tarih",
        "haftalik_vakitler", "istatistikler",
    ]
    first = data["haftalik_vakitler"][0]
    assert list(first) == ["tarih", "tarih_iso", "hicriTarih", "vakitler"]
    assert first["vakitler"][0] == {"VakitAdi": "İmsak", "Vakit": "04:11"}
    assert data["istatistikler"] == {
        "toplam_gun": 2,
        "ilk_tarih": "01 Ağustos 2025 Pazar",
        "son_tarih": "02 Ağustos 2025 Pazar",
    }


@pytest.mark.parametrize("name, expected", [
    ("ŞANLIURFA", "sanliurfa"),
    ("İSTANBUL", "istanbul"),
    ("Merkez - Doğu", "merkez___dogu"),
    ("Çanakkale & Gökçeada", "canakkale_ve_gokceada"),
    ("K.MARAŞ (Merkez)", "kmaras_merkez"),
])
def test_clean_file_name(name: str, expected: str) -> None:
    assert clean_file_name(name) == expected


def test_auto_output_path() -> None:
    path = auto_output_path("BİNGÖL", "SOLHAN", "haftalik")
    assert path == Path("vakitler") / "bingol" / "solhan" / "haftalik.json"
    assert auto_output_path("BİNGÖL", "SOLHAN", "bogus", root="out").name == "gunluk.json"


def test_write_json_file_creates_directories(tmp_path: Path) -> None:
    target = tmp_path / "vakitler" / "bingol" / "bingol" / "gunluk.json"
    written = write_json_file('{"il":"BİNGÖL"}', target)
    assert written == target
    assert target.read_text(encoding="utf-8") == '{"il":"BİNGÖL"}'


def test_write_json_file_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        write_json_file("{}", blocker / "sub" / "out.json")


def test_write_json_file_write_error(tmp_path: Path) -> None:
    with mock.patch.object(Path, "write_text", side_effect=PermissionError("denied")):
        with pytest.raises(OutputWriteError):
            write_json_file("{}", tmp_path / "out.json")
