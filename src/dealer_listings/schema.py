"""Registry of canonical schema fields."""

from collections.abc import Iterable

from dealer_listings.models.pydantic_models import FieldGroup, SchemaField

# Groups scanned, in order, when proposing a column mapping
MATCHING_GROUPS = (FieldGroup.GROUPING, FieldGroup.LISTING, FieldGroup.VEHICLE)


class SchemaRegistry:
    """Ordered, read-only collection of schema fields.

    Declaration order is preserved per group and is significant: automatic
    column mapping walks grouping, listing and vehicle fields in exactly
    that order.
    """

    def __init__(self, fields: Iterable[SchemaField]) -> None:
        """Initialize with field definitions in declaration order.

        Args:
            fields: Schema fields. Keys must be unique.

        Raises:
            ValueError: If a key is declared twice.
        """
        self._fields: list[SchemaField] = []
        self._by_key: dict[str, SchemaField] = {}
        for field in fields:
            if field.key in self._by_key:
                raise ValueError(f"Duplicate schema field key: {field.key}")
            self._fields.append(field)
            self._by_key[field.key] = field

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __len__(self) -> int:
        return len(self._fields)

    def get(self, key: str) -> SchemaField | None:
        """Return the field with the given key, or None."""
        return self._by_key.get(key)

    def fields(self, group: FieldGroup) -> list[SchemaField]:
        """Return the fields of one group in declaration order."""
        return [f for f in self._fields if f.group == group]

    def keys(self, group: FieldGroup) -> list[str]:
        """Return the field keys of one group in declaration order."""
        return [f.key for f in self.fields(group)]

    def all_fields(self, include_combined: bool = False) -> list[SchemaField]:
        """Return grouping, listing and vehicle fields, optionally followed by combined ones."""
        groups = MATCHING_GROUPS + ((FieldGroup.COMBINED,) if include_combined else ())
        return [f for group in groups for f in self.fields(group)]

    def matching_order(self) -> list[str]:
        """Return plain field keys in the order column matching scans them."""
        return [f.key for f in self.all_fields()]

    def required_keys(self) -> list[str]:
        """Return keys of required fields in schema order."""
        return [f.key for f in self.all_fields() if f.required]

    def is_combined(self, key: str) -> bool:
        """Check whether a key names a combined field."""
        field = self._by_key.get(key)
        return field is not None and field.group == FieldGroup.COMBINED

    def combined_info(self, key: str) -> SchemaField | None:
        """Return the definition of a combined field, or None for any other key."""
        return self._by_key[key] if self.is_combined(key) else None
