"""Grouping of vehicle records into multi-vehicle listings.

A listing represents one make/model/year/color combination. The first
vehicle seen for a combination supplies the listing-level values (variant,
body type, ...); every vehicle, including the first, contributes its
vehicle-level values (VIN, mileage, price, ...) to the listing's vehicles.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from dealer_listings.matching.normalizer import normalize_grouping_value
from dealer_listings.models.pydantic_models import (
    GROUPING_KEYS,
    LISTING_KEYS,
    Listing,
    ListingStats,
    VehicleRecord,
)

LISTING_KEY_SEPARATOR = "_"


def generate_listing_key(vehicle: VehicleRecord) -> str:
    """Build the grouping key for a vehicle.

    Grouping values are lowercased and trimmed, so "Audi " and "audi"
    land in the same listing.
    """
    return LISTING_KEY_SEPARATOR.join(
        normalize_grouping_value(vehicle.get(key)) for key in GROUPING_KEYS
    )


def group_vehicles_into_listings(vehicles: Iterable[VehicleRecord]) -> list[Listing]:
    """Group vehicles into listings by make, model, year and color.

    Single left-to-right pass; listings come out in the order their key was
    first seen, and vehicles inside a listing keep input order.

    Args:
        vehicles: Vehicle records, typically from ``transform_to_vehicles``.

    Returns:
        List of Listing instances.
    """
    groups: dict[str, Listing] = {}

    for vehicle in vehicles:
        key = generate_listing_key(vehicle)

        if key not in groups:
            groups[key] = Listing.model_validate(
                {
                    "id": key,
                    **{k: vehicle.get(k) for k in GROUPING_KEYS},
                    **{k: vehicle.get(k) for k in LISTING_KEYS},
                }
            )

        groups[key].add_vehicle(vehicle.vehicle_detail())

    return list(groups.values())


def _round_half_up(value: float) -> float:
    """Round to one decimal, halves away from zero (2.25 -> 2.3)."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def get_listings_stats(listings: list[Listing]) -> ListingStats:
    """Summarize a set of listings.

    Returns:
        ListingStats with listing and vehicle totals, the average number of
        vehicles per listing (one decimal, 0 without listings) and the
        number of distinct non-empty makes.
    """
    total_vehicles = sum(listing.count for listing in listings)
    avg = _round_half_up(total_vehicles / len(listings)) if listings else 0.0
    unique_makes = {listing.make for listing in listings if listing.make}

    return ListingStats(
        total_listings=len(listings),
        total_vehicles=total_vehicles,
        avg_vehicles_per_listing=avg,
        unique_makes=len(unique_makes),
    )
