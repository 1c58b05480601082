"""Shared fixtures for dealer-listings tests."""

from collections.abc import Iterator
from typing import Any

import pytest

from dealer_listings.config import load_schema_registry, load_synonym_dictionary, reset_defaults
from dealer_listings.matching.synonyms import SynonymDictionary
from dealer_listings.schema import SchemaRegistry


@pytest.fixture(autouse=True)
def fresh_defaults() -> Iterator[None]:
    """Ensure each test starts from the packaged default configuration."""
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def registry() -> SchemaRegistry:
    """Packaged schema registry."""
    return load_schema_registry()


@pytest.fixture
def synonyms() -> SynonymDictionary:
    """A private copy of the packaged synonym dictionary."""
    return load_synonym_dictionary()


@pytest.fixture
def sample_rows() -> list[dict[str, Any]]:
    """Rows as a dealer export would produce them."""
    return [
        {
            "Brand": "Audi",
            "Model": "A6",
            "Year": "=2022",
            "Colour": "Black",
            "Trim": "45 TFSI",
            "VIN": "WAUZZZF20NN000001",
            "Odometer": "12,500",
            "Price": "42000",
        },
        {
            "Brand": "audi ",
            "Model": "A6",
            "Year": "2022",
            "Colour": "black",
            "Trim": "55 TFSI quattro",
            "VIN": "WAUZZZF20NN000002",
            "Odometer": "8",
            "Price": "51000",
        },
        {
            "Brand": "BMW",
            "Model": "X5",
            "Year": "2021",
            "Colour": "White",
            "Trim": "xDrive40i",
            "VIN": "WBACV610X0L000003",
            "Odometer": "30000",
            "Price": "58000",
        },
    ]
