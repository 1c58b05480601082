"""Data models for dealer listings."""

from dealer_listings.models.pydantic_models import (
    CombinedFieldKey,
    FieldGroup,
    Listing,
    ListingStats,
    SchemaField,
    SplitResult,
    VehicleDetail,
    VehicleRecord,
)

__all__ = [
    "CombinedFieldKey",
    "FieldGroup",
    "Listing",
    "ListingStats",
    "SchemaField",
    "SplitResult",
    "VehicleDetail",
    "VehicleRecord",
]
