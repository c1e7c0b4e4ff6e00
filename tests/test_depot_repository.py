from datetime import date
from pathlib import Path

import pytest
from openpyxl import Workbook

from delivery_router.config import settings
from delivery_router.data import depot_repository
from delivery_router.data.depot_repository import (
    clear_depot_cache,
    depot_for_date,
    get_depots,
    load_depots_from_workbook,
    resolve_depot,
)


@pytest.fixture(autouse=True)
def clear_cache():
    clear_depot_cache()
    yield
    clear_depot_cache()


def _write_workbook(path: Path, rows: list[tuple]) -> Path:
    wb = Workbook()
    sheet = wb.active
    for row in rows:
        sheet.append(row)
    wb.save(path)
    return path


def test_builtin_depots_without_workbook(monkeypatch):
    monkeypatch.setattr(settings, "depot_presets_file", None)

    codes = {depot.code for depot in get_depots()}

    assert codes == {"EILON", "HAIFA", "NAHARIYA"}


def test_resolve_depot_is_case_insensitive(monkeypatch):
    monkeypatch.setattr(settings, "depot_presets_file", None)

    depot = resolve_depot(" haifa ")

    assert depot is not None
    assert depot.location.latitude == pytest.approx(32.7940)
    assert resolve_depot("ATLANTIS") is None


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2026, 10, 18), "HAIFA"),  # Sunday
        (date(2026, 10, 19), "NAHARIYA"),  # Monday
        (date(2026, 10, 21), "NAHARIYA"),  # Wednesday
        (date(2026, 10, 22), "EILON"),  # Thursday
        (date(2026, 10, 24), "EILON"),  # Saturday
    ],
)
def test_depot_for_date_follows_weekday_schedule(monkeypatch, day: date, expected: str):
    monkeypatch.setattr(settings, "depot_presets_file", None)

    assert depot_for_date(day).code == expected


def test_workbook_depots_override_builtins(monkeypatch, tmp_path: Path):
    workbook = _write_workbook(
        tmp_path / "depots.xlsx",
        [
            ("Code", "Name", "Latitude", "Longitude"),
            ("haifa", "Haifa Port", 32.8200, 35.0000),
            ("KARMIEL", None, 32.9196, 35.2951),
            (None, "blank row", 0, 0),
        ],
    )
    monkeypatch.setattr(settings, "depot_presets_file", workbook)

    depots = {depot.code: depot for depot in get_depots()}

    assert set(depots) == {"HAIFA", "KARMIEL", "EILON", "NAHARIYA"}
    assert depots["HAIFA"].name == "Haifa Port"
    assert depots["HAIFA"].location.latitude == pytest.approx(32.82)
    assert depots["KARMIEL"].name == "Karmiel"


def test_workbook_missing_columns(tmp_path: Path):
    workbook = _write_workbook(tmp_path / "bad.xlsx", [("Code", "Latitude"), ("X", 1.0)])

    with pytest.raises(ValueError, match="Longitude"):
        load_depots_from_workbook(workbook)


def test_workbook_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_depots_from_workbook(tmp_path / "missing.xlsx")


def test_get_depots_is_cached(monkeypatch, tmp_path: Path):
    workbook = _write_workbook(
        tmp_path / "depots.xlsx",
        [("Code", "Latitude", "Longitude"), ("AKKO", 32.9283, 35.0823)],
    )
    monkeypatch.setattr(settings, "depot_presets_file", workbook)
    calls = []
    original = depot_repository.load_depots_from_workbook

    def _counting_loader(path):
        calls.append(path)
        return original(path)

    monkeypatch.setattr(depot_repository, "load_depots_from_workbook", _counting_loader)

    get_depots()
    get_depots()

    assert len(calls) == 1


def test_workbook_rows_without_coordinates_are_skipped(tmp_path: Path, caplog):
    workbook = _write_workbook(
        tmp_path / "depots.xlsx",
        [
            ("Code", "Name", "Latitude", "Longitude"),
            ("X", "X", None, 35.0),
            ("AKKO", "Akko", 32.9283, 35.0823),
        ],
    )

    with caplog.at_level("WARNING"):
        depots = load_depots_from_workbook(workbook)

    assert [depot.code for depot in depots] == ["AKKO"]
    assert "row 2" in caplog.text


def test_workbook_non_numeric_coordinates_name_the_row(tmp_path: Path):
    workbook = _write_workbook(
        tmp_path / "depots.xlsx",
        [("Code", "Latitude", "Longitude"), ("AKKO", 32.9283, 35.0823), ("BAD", "north", 35.0)],
    )

    with pytest.raises(ValueError, match="BAD' on row 3"):
        load_depots_from_workbook(workbook)
