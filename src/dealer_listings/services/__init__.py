"""Service layer for dealer listing sessions."""

from dealer_listings.services.listing_service import ImportResult, ListingService, SessionStats

__all__ = ["ImportResult", "ListingService", "SessionStats"]
