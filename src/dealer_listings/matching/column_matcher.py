"""Column name matching against the synonym dictionary."""

import logging
from collections.abc import Mapping

from dealer_listings.matching.normalizer import normalize_column_name
from dealer_listings.matching.synonyms import SynonymDictionary
from dealer_listings.models.pydantic_models import MappingStatus
from dealer_listings.schema import SchemaRegistry

logger = logging.getLogger(__name__)


def _matches(normalized_column: str, synonyms: tuple[str, ...]) -> bool:
    """Exact match, or either string contained in the other."""
    return any(
        normalized_column == synonym or synonym in normalized_column or normalized_column in synonym
        for synonym in synonyms
    )


def auto_detect_mapping(
    columns: list[str],
    registry: SchemaRegistry | None = None,
    synonyms: SynonymDictionary | None = None,
) -> dict[str, str]:
    """Propose a column -> field mapping from raw column names.

    Algorithm (greedy, first come first served):
    1. Walk columns in input order
    2. Normalize the column name (lowercase, trim)
    3. Walk schema fields in matching order (grouping, listing, vehicle),
       skipping fields already claimed by an earlier column
    4. The first field with a synonym equal to, contained in, or containing
       the normalized name claims the column
    5. Columns with no match are left out of the mapping

    A claimed field is never reassigned, even if a later column is a better
    match for it.

    Args:
        columns: Column names from the uploaded file.
        registry: Schema registry. Defaults to the process-wide registry.
        synonyms: Synonym dictionary. Defaults to the process-wide dictionary.

    Returns:
        Mapping of column name to schema field key.

    Example:
        >>> auto_detect_mapping(["Make", "Brand", "Odometer"])
        {'Make': 'make', 'Odometer': 'mileage'}
    """
    if registry is None or synonyms is None:
        from dealer_listings.config import get_default_registry, get_default_synonyms

        if registry is None:
            registry = get_default_registry()
        if synonyms is None:
            synonyms = get_default_synonyms()

    field_order = [key for key in registry.matching_order() if key in synonyms]
    mapping: dict[str, str] = {}
    used_fields: set[str] = set()

    for column in columns:
        normalized = normalize_column_name(column)

        for field_key in field_order:
            if field_key in used_fields:
                continue
            if _matches(normalized, synonyms.synonyms_for(field_key)):
                mapping[column] = field_key
                used_fields.add(field_key)
                break
        else:
            logger.debug("No field matched column %r", column)
            continue

        logger.debug("Mapped column %r -> %s", column, mapping[column])

    return mapping


def missing_required_fields(
    mapping: Mapping[str, str | None],
    registry: SchemaRegistry | None = None,
) -> list[str]:
    """Return required field keys that no column is mapped to.

    Args:
        mapping: Column -> field key mapping. None values mean "skip".
        registry: Schema registry. Defaults to the process-wide registry.

    Returns:
        Missing required keys, in schema order.
    """
    if registry is None:
        from dealer_listings.config import get_default_registry

        registry = get_default_registry()

    mapped = {field for field in mapping.values() if field}
    return [key for key in registry.required_keys() if key not in mapped]


def mapping_status(
    mapping: Mapping[str, str | None],
    registry: SchemaRegistry | None = None,
) -> MappingStatus:
    """Summarize a mapping for confirmation gating.

    Args:
        mapping: Column -> field key mapping. None values mean "skip".
        registry: Schema registry. Defaults to the process-wide registry.

    Returns:
        MappingStatus; ``can_confirm`` is False while required fields are missing.
    """
    mapped_fields = list(dict.fromkeys(field for field in mapping.values() if field))
    return MappingStatus(
        mapped_fields=mapped_fields,
        missing_required=missing_required_fields(mapping, registry),
    )
