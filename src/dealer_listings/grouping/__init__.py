"""Listing grouping modules."""

from dealer_listings.grouping.listing_grouper import (
    generate_listing_key,
    get_listings_stats,
    group_vehicles_into_listings,
)

__all__ = ["generate_listing_key", "get_listings_stats", "group_vehicles_into_listings"]
