"""Row to vehicle record transformation."""

from dealer_listings.transform.vehicle_transformer import (
    normalize_mileage,
    normalize_year,
    transform_to_vehicles,
)

__all__ = ["normalize_mileage", "normalize_year", "transform_to_vehicles"]
