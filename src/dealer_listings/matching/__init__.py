"""Column matching modules."""

from dealer_listings.matching.column_matcher import (
    auto_detect_mapping,
    mapping_status,
    missing_required_fields,
)
from dealer_listings.matching.normalizer import normalize_column_name
from dealer_listings.matching.synonyms import SynonymDictionary

__all__ = [
    "SynonymDictionary",
    "auto_detect_mapping",
    "mapping_status",
    "missing_required_fields",
    "normalize_column_name",
]
