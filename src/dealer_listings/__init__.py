"""Dealer spreadsheet normalization and listing grouping."""

__version__ = "0.1.0"
