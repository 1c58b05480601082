"""JSON export functionality for listings."""

import json
from pathlib import Path
from typing import Any, TextIO

from dealer_listings.grouping.listing_grouper import get_listings_stats
from dealer_listings.models.pydantic_models import Listing


def listing_to_dict(listing: Listing) -> dict[str, Any]:
    """Convert a Listing to a JSON-serializable dictionary.

    Keys use the camelCase schema names ("bodyType", "registrationNumber").

    Args:
        listing: Listing instance.

    Returns:
        Dictionary representation of the listing, vehicles nested.
    """
    return listing.model_dump(by_alias=True)


def export_to_json(
    listings: list[Listing],
    output: Path | TextIO | None = None,
    indent: int = 2,
) -> str:
    """Export listings as a JSON document with a "stats" summary and the
    "listings" array.

    Args:
        listings: Listings in display order.
        output: File path or open text stream to write to. When None the
            document is returned instead.
        indent: JSON indentation level.

    Returns:
        The JSON document when output is None, otherwise "".
    """
    data = {
        "stats": get_listings_stats(listings).model_dump(by_alias=True),
        "listings": [listing_to_dict(listing) for listing in listings],
    }

    document = json.dumps(data, indent=indent, ensure_ascii=False)
    if output is None:
        return document

    if isinstance(output, Path):
        output.write_text(document, encoding="utf-8")
    else:
        output.write(document)
    return ""
