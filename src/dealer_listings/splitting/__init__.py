"""Heuristic splitting of free-text vehicle columns."""

from dealer_listings.splitting.color import extract_color_from_description
from dealer_listings.splitting.combined_detector import (
    analyze_columns_for_combined_data,
    detect_combined_make_model,
)
from dealer_listings.splitting.make_model import split_make_model

__all__ = [
    "analyze_columns_for_combined_data",
    "detect_combined_make_model",
    "extract_color_from_description",
    "split_make_model",
]
