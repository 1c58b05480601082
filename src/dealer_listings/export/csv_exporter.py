"""CSV export functionality for listings."""

import csv
from io import StringIO
from pathlib import Path
from typing import TextIO

from dealer_listings.models.pydantic_models import (
    GROUPING_KEYS,
    LISTING_KEYS,
    VEHICLE_KEYS,
    Listing,
)

# One row per vehicle; listing values repeat for every vehicle of a listing
EXPORT_COLUMNS = ["listing_id", "listing_count", *GROUPING_KEYS, *LISTING_KEYS, *VEHICLE_KEYS]


def _cell(value: object) -> str:
    return "" if value is None else str(value)


def _write_rows(stream: TextIO, rows: list[dict[str, str]]) -> None:
    writer = csv.DictWriter(stream, fieldnames=EXPORT_COLUMNS)
    writer.writeheader()
    writer.writerows(rows)


def listing_to_rows(listing: Listing) -> list[dict[str, str]]:
    """Convert a Listing to CSV row dictionaries, one per vehicle.

    Args:
        listing: Listing instance.

    Returns:
        List of dictionaries with column names as keys.
    """
    shared = {
        "listing_id": listing.id,
        "listing_count": str(listing.count),
        **{key: _cell(listing.get(key)) for key in GROUPING_KEYS + LISTING_KEYS},
    }
    rows = []
    for vehicle in listing.vehicles:
        detail = vehicle.model_dump(by_alias=True)
        rows.append({**shared, **{key: _cell(detail.get(key)) for key in VEHICLE_KEYS}})
    return rows


def export_to_csv(
    listings: list[Listing],
    output: Path | TextIO | None = None,
) -> str:
    """Export listings to CSV format.

    Args:
        listings: List of Listing instances.
        output: Optional file path or file-like object. If None, returns string.

    Returns:
        CSV string if output is None, empty string otherwise.
    """
    rows = [row for listing in listings for row in listing_to_rows(listing)]

    if output is None:
        buffer = StringIO()
        _write_rows(buffer, rows)
        return buffer.getvalue()

    if isinstance(output, Path):
        with open(output, "w", newline="", encoding="utf-8") as f:
            _write_rows(f, rows)
    else:
        _write_rows(output, rows)
    return ""
