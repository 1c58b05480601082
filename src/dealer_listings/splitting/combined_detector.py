"""Detection of columns holding combined make + model text."""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from dealer_listings.models.pydantic_models import ColumnAnalysis, CombinedDetection
from dealer_listings.splitting.vocabulary import KNOWN_MAKES

logger = logging.getLogger(__name__)

# Share of non-empty samples that must name a known make
COMBINED_CONFIDENCE_THRESHOLD = 0.3
DEFAULT_SAMPLE_SIZE = 10
PREVIEW_SAMPLES = 3

# Declaration order (not length order): the first listed make found is recorded
_MAKE_PATTERNS = [
    (make, re.compile(rf"\b{re.escape(make)}\b", re.IGNORECASE)) for make in KNOWN_MAKES
]


def detect_combined_make_model(sample_values: Sequence[Any]) -> CombinedDetection:
    """Score whether sample values look like combined make + model text.

    A sample counts as a hit when it contains a known make as a whole word,
    anywhere in the text, so both "Audi A6" and "GAC Honda" count.

    Args:
        sample_values: Sample cell values from one column.

    Returns:
        CombinedDetection. ``confidence`` is hits / non-empty samples (0 when
        there are none) and ``is_combined`` is confidence > 0.3.
    """
    if not sample_values:
        return CombinedDetection()

    detected_makes: dict[str, None] = {}
    match_count = 0

    for value in sample_values:
        if not value or not isinstance(value, str):
            continue
        normalized = value.strip()
        for make, pattern in _MAKE_PATTERNS:
            if pattern.search(normalized):
                detected_makes[make] = None
                match_count += 1
                break

    non_empty = sum(1 for value in sample_values if value)
    confidence = match_count / non_empty if non_empty else 0.0

    return CombinedDetection(
        is_combined=confidence > COMBINED_CONFIDENCE_THRESHOLD,
        confidence=confidence,
        detected_makes=list(detected_makes),
    )


def get_sample_values(
    rows: Sequence[Mapping[str, Any]],
    column: str,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> list[str]:
    """Take the first ``sample_size`` present values of a column as strings."""
    return [str(row.get(column)) for row in rows[:sample_size] if row.get(column) is not None]


def analyze_columns_for_combined_data(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
) -> list[ColumnAnalysis]:
    """Find columns that likely hold combined make + model data.

    Args:
        rows: Raw row records.
        columns: Column names to analyze.

    Returns:
        Analyses for the columns flagged as combined, in column order.
    """
    results = []
    for column in columns:
        samples = get_sample_values(rows, column)
        detection = detect_combined_make_model(samples)
        logger.debug(
            "Column %r: combined=%s confidence=%.2f makes=%s",
            column,
            detection.is_combined,
            detection.confidence,
            detection.detected_makes,
        )
        if detection.is_combined:
            results.append(
                ColumnAnalysis(
                    column=column,
                    samples=samples[:PREVIEW_SAMPLES],
                    **detection.model_dump(),
                )
            )
    return results
