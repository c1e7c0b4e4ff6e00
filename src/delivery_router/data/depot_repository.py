"""Named depot presets: built-in table with an optional Excel workbook override."""

from __future__ import annotations

import functools
import logging
from datetime import date
from pathlib import Path

from openpyxl import load_workbook

from ..config import settings
from ..models.domain import Depot, GeoPoint

logger = logging.getLogger(__name__)

BUILTIN_DEPOTS: tuple[Depot, ...] = (
    Depot(code="EILON", name="Eilon", location=GeoPoint(33.062496506108666, 35.21928128639784)),
    Depot(code="HAIFA", name="Haifa", location=GeoPoint(32.7940, 34.9896)),
    Depot(code="NAHARIYA", name="Nahariya", location=GeoPoint(33.0094, 35.0947)),
)

# date.weekday(): Monday == 0
WEEKDAY_DEPOTS: dict[int, str] = {
    6: "HAIFA",
    0: "NAHARIYA",
    1: "HAIFA",
    2: "NAHARIYA",
    3: "EILON",
    4: "EILON",
    5: "EILON",
}


def _normalize_code(code: str) -> str:
    return code.strip().upper()


def load_depots_from_workbook(source: Path) -> tuple[Depot, ...]:
    """Load depots from an Excel workbook with Code/Name/Latitude/Longitude columns."""
    if not source.exists():
        raise FileNotFoundError(f"Depot workbook not found: {source}")

    wb = load_workbook(source, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Depot workbook '{source}' is empty.")

        header_map = {str(name).strip(): idx for idx, name in enumerate(header) if name is not None}
        missing_columns = {"Code", "Latitude", "Longitude"} - set(header_map)
        if missing_columns:
            raise ValueError(f"Depot workbook missing columns: {', '.join(sorted(missing_columns))}")

        depots: list[Depot] = []
        for row_number, row in enumerate(rows, start=2):
            code_value = row[header_map["Code"]]
            if not code_value:
                continue
            code = _normalize_code(str(code_value))
            lat_value = row[header_map["Latitude"]]
            lon_value = row[header_map["Longitude"]]
            if lat_value in (None, "") or lon_value in (None, ""):
                logger.warning(f"Skipping depot '{code}' on row {row_number}: missing coordinates")
                continue
            try:
                location = GeoPoint(float(lat_value), float(lon_value))
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"Depot '{code}' on row {row_number} has invalid coordinates: {lat_value!r}, {lon_value!r}"
                ) from exc
            name_value = row[header_map["Name"]] if "Name" in header_map else None
            depots.append(
                Depot(
                    code=code,
                    name=str(name_value).strip() if name_value else code.title(),
                    location=location,
                )
            )
    finally:
        wb.close()
    return tuple(depots)


@functools.lru_cache(maxsize=1)
def get_depots() -> tuple[Depot, ...]:
    """Depots from the configured workbook, or the built-in presets.

    Workbook depots replace built-ins with the same code; built-ins not
    mentioned in the workbook stay available for the weekday schedule.
    """
    workbook_path = settings.depot_presets_file
    if workbook_path is None:
        return BUILTIN_DEPOTS

    file_depots = load_depots_from_workbook(workbook_path)
    logger.info(f"Loaded {len(file_depots)} depots from {workbook_path}")
    overridden = {depot.code for depot in file_depots}
    return file_depots + tuple(depot for depot in BUILTIN_DEPOTS if depot.code not in overridden)


def clear_depot_cache() -> None:
    get_depots.cache_clear()


def resolve_depot(code: str) -> Depot | None:
    """Find a depot preset by code (case-insensitive)."""
    normalized = _normalize_code(code)
    for depot in get_depots():
        if depot.code == normalized:
            return depot
    return None


def depot_for_date(day: date) -> Depot:
    """Depot the delivery schedule starts from on ``day``'s weekday."""
    code = WEEKDAY_DEPOTS.get(day.weekday(), settings.default_depot)
    depot = resolve_depot(code) or resolve_depot(settings.default_depot)
    if depot is None:
        raise LookupError(f"No depot preset for '{code}' or default '{settings.default_depot}'.")
    return depot
