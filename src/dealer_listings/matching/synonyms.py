"""Column name synonym dictionary."""

import threading
from collections.abc import Iterator, Mapping

from dealer_listings.matching.normalizer import normalize_column_name


class SynonymDictionary:
    """Known column name variants per schema field key.

    The dictionary is append-only once built. Writers are serialized by an
    internal lock; readers receive tuple snapshots and never observe a list
    being extended underneath them.
    """

    def __init__(self, synonyms: Mapping[str, list[str]] | None = None) -> None:
        """Initialize from a field key -> synonyms mapping.

        Args:
            synonyms: Initial synonyms. Entries are normalized and de-duplicated,
                keeping first occurrence order.
        """
        self._lock = threading.Lock()
        self._synonyms: dict[str, list[str]] = {}
        for field_key, variants in (synonyms or {}).items():
            self._synonyms[field_key] = []
            for variant in variants or []:
                self._append(field_key, variant)

    def __contains__(self, field_key: object) -> bool:
        return field_key in self._synonyms

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._synonyms))

    def synonyms_for(self, field_key: str) -> tuple[str, ...]:
        """Return the synonyms of a field, empty for unknown keys."""
        return tuple(self._synonyms.get(field_key, ()))

    def as_dict(self) -> dict[str, list[str]]:
        """Return a copy of the whole dictionary."""
        return {key: list(values) for key, values in self._synonyms.items()}

    def add_synonym(self, field_key: str, synonym: str) -> bool:
        """Register a new column name variant for a field.

        Unknown field keys are ignored rather than rejected.

        Args:
            field_key: Schema field key, e.g. "mileage".
            synonym: Column name as seen in a dealer file.

        Returns:
            True if the synonym was added, False if it was a duplicate,
            blank, or the field key is unknown.
        """
        if field_key not in self._synonyms:
            return False
        with self._lock:
            return self._append(field_key, synonym)

    def _append(self, field_key: str, synonym: str) -> bool:
        normalized = normalize_column_name(synonym)
        # A blank synonym would match every column through substring tests
        if not normalized or normalized in self._synonyms[field_key]:
            return False
        self._synonyms[field_key].append(normalized)
        return True
