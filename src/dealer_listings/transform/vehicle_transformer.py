"""Transformation of raw spreadsheet rows into canonical vehicle records."""

import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from dealer_listings.models.pydantic_models import CombinedFieldKey, Scalar, VehicleRecord
from dealer_listings.splitting.color import extract_color_from_description
from dealer_listings.splitting.make_model import split_make_model

logger = logging.getLogger(__name__)

_COMBINED_KEYS = {key.value: key for key in CombinedFieldKey}

_YEAR_RE = re.compile(r"\b(199[0-9]|20[0-3][0-9])\b")
_MILEAGE_NOISE_RE = re.compile(r"[,\s]")

# Mileage below this is assumed to be recorded in thousands ("45" -> 45000)
MILEAGE_THOUSANDS_THRESHOLD = 500
MILEAGE_THOUSANDS_MULTIPLIER = 1000


def normalize_year(value: Scalar) -> Scalar:
    """Reduce a year cell to its 4-digit year (1990-2039) when one is present.

    Handles formula residue and dates, e.g. "=2022" or "2022-03-01". Values
    without a recognizable year are returned unchanged.
    """
    if value is None or value == "":
        return value
    match = _YEAR_RE.search(str(value))
    return match.group(1) if match else value


def normalize_mileage(value: Scalar) -> Scalar:
    """Parse a mileage cell into a number.

    Thousands separators and whitespace are dropped before parsing. Values
    under 500 are taken to be in thousands and multiplied by 1000. Values
    that don't parse are returned unchanged.

    Examples:
        >>> normalize_mileage("45,000")
        45000
        >>> normalize_mileage("45")
        45000
        >>> normalize_mileage("600")
        600
    """
    if value is None or isinstance(value, bool):
        return value

    try:
        number = float(_MILEAGE_NOISE_RE.sub("", str(value)))
    except ValueError:
        return value
    if not math.isfinite(number):
        return value

    if number < MILEAGE_THOUSANDS_THRESHOLD:
        number *= MILEAGE_THOUSANDS_MULTIPLIER
    return int(number) if number.is_integer() else number


def _as_scalar(value: Any) -> Scalar:
    """Coerce a cell value to a scalar the vehicle record can hold."""
    if value is None or (isinstance(value, (str, int, float)) and not isinstance(value, bool)):
        return value
    return str(value)


def _fill(values: dict[str, Scalar], combo_filled: set[str], key: str, value: str) -> None:
    """Set a combined-derived value unless the field already has one."""
    if value and not values.get(key):
        values[key] = value
        combo_filled.add(key)


def _apply_combined(
    combined: CombinedFieldKey,
    raw: str,
    values: dict[str, Scalar],
    combo_filled: set[str],
) -> None:
    """Split one combined cell into the row accumulator."""
    if combined in (CombinedFieldKey.MAKE_MODEL, CombinedFieldKey.MAKE_MODEL_VARIANT):
        split = split_make_model(raw)
        _fill(values, combo_filled, "make", split.make)
        _fill(values, combo_filled, "model", split.model)
        _fill(values, combo_filled, "year", split.year)
        if combined == CombinedFieldKey.MAKE_MODEL_VARIANT:
            _fill(values, combo_filled, "variant", split.variant)

    elif combined == CombinedFieldKey.FULL_DESCRIPTION:
        _fill(values, combo_filled, "color", extract_color_from_description(raw))
        _fill(values, combo_filled, "description", raw)
        # Independent of the color extractor's own dash handling
        _fill(values, combo_filled, "variant", raw.split("-")[0].strip())


def transform_row(row: Mapping[str, Any], mapping: Mapping[str, str | None]) -> VehicleRecord:
    """Apply a confirmed column mapping to one raw row.

    Steps:
    1. Combined columns are split; the first combined column to supply a
       field wins within the row
    2. Plain columns are copied, except into fields already supplied by a
       combined column
    3. Year and mileage are normalized

    Args:
        row: Raw row record (column name -> cell value).
        mapping: Column name -> schema field key. Empty/None targets are skipped.

    Returns:
        VehicleRecord for the row.
    """
    values: dict[str, Scalar] = {}
    combo_filled: set[str] = set()

    for column, target in mapping.items():
        combined = _COMBINED_KEYS.get(target or "")
        if combined is None:
            continue
        raw = row.get(column)
        if raw is None or raw == "":
            continue
        _apply_combined(combined, str(raw), values, combo_filled)

    for column, target in mapping.items():
        if not target or target in _COMBINED_KEYS or target in combo_filled:
            continue
        values[target] = _as_scalar(row.get(column))

    if values.get("year"):
        values["year"] = normalize_year(values["year"])
    if "mileage" in values:
        values["mileage"] = normalize_mileage(values["mileage"])

    return VehicleRecord.model_validate(values)


def transform_to_vehicles(
    raw_rows: Sequence[Mapping[str, Any]],
    mapping: Mapping[str, str | None],
) -> list[VehicleRecord]:
    """Transform raw rows into vehicle records, one per row, in input order.

    Args:
        raw_rows: Row records from the file parser.
        mapping: Confirmed column name -> schema field key mapping.

    Returns:
        List of VehicleRecord instances.
    """
    vehicles = [transform_row(row, mapping) for row in raw_rows]
    logger.debug("Transformed %d rows using %d mapped columns", len(vehicles), len(mapping))
    return vehicles
