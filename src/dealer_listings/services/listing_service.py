"""In-memory listing session: import, filtering, selection and deletion."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from dealer_listings.grouping.listing_grouper import (
    get_listings_stats,
    group_vehicles_into_listings,
)
from dealer_listings.matching.column_matcher import mapping_status
from dealer_listings.models.pydantic_models import (
    GROUPING_KEYS,
    LISTING_KEYS,
    Listing,
    ListingStats,
    MappingStatus,
)
from dealer_listings.schema import SchemaRegistry
from dealer_listings.transform.vehicle_transformer import transform_to_vehicles

logger = logging.getLogger(__name__)

FILTERABLE_KEYS = frozenset(GROUPING_KEYS + LISTING_KEYS)

# Fields offered as filter dropdowns
FILTER_OPTION_KEYS = ["make", "model", "year", "color", "bodyType", "fuelType", "transmission"]


@dataclass
class ImportResult:
    """Result of importing a file into the session."""

    total_rows: int
    total_listings: int
    mapping: MappingStatus
    listing_ids: list[str] = field(default_factory=list)


@dataclass
class SessionStats:
    """Listing totals plus the current filter and selection sizes."""

    listings: ListingStats
    filtered_count: int
    selected_count: int


def _filter_text(value: Any) -> str:
    return "" if value is None else str(value).lower()


def _year_sort_key(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("-inf")


class ListingService:
    """Holds the listings of one import session.

    Nothing is persisted; a new import replaces the whole listing set and
    clears filters and selection.
    """

    def __init__(self, registry: SchemaRegistry | None = None) -> None:
        """Initialize an empty session.

        Args:
            registry: Schema registry used to check mappings. Defaults to the
                process-wide registry.
        """
        self._registry = registry
        self._listings: list[Listing] = []
        self._selected_ids: list[str] = []
        self._filters: dict[str, str] = {}

    @property
    def listings(self) -> list[Listing]:
        """All listings of the current import."""
        return list(self._listings)

    @property
    def selected_ids(self) -> list[str]:
        return list(self._selected_ids)

    @property
    def filters(self) -> dict[str, str]:
        return dict(self._filters)

    def import_vehicles(
        self,
        raw_rows: Sequence[Mapping[str, Any]],
        mapping: Mapping[str, str | None],
    ) -> ImportResult:
        """Transform and group raw rows, replacing the current listings.

        Missing required fields do not block the import here; they are
        reported in the result so the caller can decide.

        Args:
            raw_rows: Row records from the file parser.
            mapping: Confirmed column name -> schema field key mapping.

        Returns:
            ImportResult with counts and the mapping status.
        """
        status = mapping_status(mapping, self._registry)
        vehicles = transform_to_vehicles(raw_rows, mapping)
        self._listings = group_vehicles_into_listings(vehicles)
        self._selected_ids = []
        self._filters = {}

        logger.info(
            "Imported %d vehicles into %d listings", len(vehicles), len(self._listings)
        )
        if status.missing_required:
            logger.warning("Import mapping is missing required fields: %s", status.missing_required)

        return ImportResult(
            total_rows=len(vehicles),
            total_listings=len(self._listings),
            mapping=status,
            listing_ids=[listing.id for listing in self._listings],
        )

    def set_filter(self, key: str, value: str | None) -> None:
        """Set or clear (empty value) a filter on a grouping or listing field.

        Raises:
            ValueError: If the key is not a filterable field.
        """
        if key not in FILTERABLE_KEYS:
            raise ValueError(f"Cannot filter on unknown field: {key}")
        if value:
            self._filters[key] = value
        else:
            self._filters.pop(key, None)

    def clear_filters(self) -> None:
        self._filters = {}

    def filtered_listings(self) -> list[Listing]:
        """Listings matching every active filter (case-insensitive equality).

        A listing without a value for a filtered field never matches.
        """
        return [
            listing
            for listing in self._listings
            if all(
                _filter_text(listing.get(key)) == str(value).lower()
                for key, value in self._filters.items()
            )
        ]

    def filter_options(self) -> dict[str, list[Any]]:
        """Distinct non-empty values per filter field.

        Years are sorted newest first; everything else alphabetically.
        """
        options: dict[str, list[Any]] = {}
        for key in FILTER_OPTION_KEYS:
            values = list(dict.fromkeys(v for v in (listing.get(key) for listing in self._listings) if v))
            if key == "year":
                options[key] = sorted(values, key=_year_sort_key, reverse=True)
            else:
                options[key] = sorted(values, key=str)
        return options

    def select_all(self) -> None:
        """Select every listing that passes the current filters."""
        self._selected_ids = [listing.id for listing in self.filtered_listings()]

    def deselect_all(self) -> None:
        self._selected_ids = []

    def toggle_selection(self, listing_id: str) -> None:
        if listing_id in self._selected_ids:
            self._selected_ids.remove(listing_id)
        else:
            self._selected_ids.append(listing_id)

    def set_selection(self, listing_ids: Sequence[str]) -> None:
        self._selected_ids = list(listing_ids)

    def delete_selected(self) -> int:
        """Delete all selected listings.

        Returns:
            Number of listings removed.
        """
        selected = set(self._selected_ids)
        before = len(self._listings)
        self._listings = [listing for listing in self._listings if listing.id not in selected]
        self._selected_ids = []
        return before - len(self._listings)

    def delete_listing(self, listing_id: str) -> bool:
        """Delete a listing by ID.

        Args:
            listing_id: Listing ID (grouping key) to delete.

        Returns:
            True if deleted, False if not found.
        """
        before = len(self._listings)
        self._listings = [listing for listing in self._listings if listing.id != listing_id]
        self._selected_ids = [i for i in self._selected_ids if i != listing_id]
        return len(self._listings) < before

    def reset(self) -> None:
        """Drop all listings, filters and selection."""
        self._listings = []
        self._selected_ids = []
        self._filters = {}

    def stats(self) -> SessionStats:
        return SessionStats(
            listings=get_listings_stats(self._listings),
            filtered_count=len(self.filtered_listings()),
            selected_count=len(self._selected_ids),
        )
