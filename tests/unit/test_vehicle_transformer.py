"""Unit tests for row transformation and value normalization."""

from typing import Any

import pytest

from dealer_listings.transform.vehicle_transformer import (
    normalize_mileage,
    normalize_year,
    transform_row,
    transform_to_vehicles,
)


class TestNormalizeYear:
    """Tests for normalize_year."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("=2022", "2022"),
            ("2022-03-01", "2022"),
            ("MY 2019", "2019"),
            (2021, "2021"),
            ("1985", "1985"),
            ("new", "new"),
            (None, None),
            ("", ""),
        ],
    )
    def test_normalize_year(self, value: Any, expected: Any) -> None:
        """Should keep only a 1990-2039 year, or return the value unchanged."""
        assert normalize_year(value) == expected


class TestNormalizeMileage:
    """Tests for normalize_mileage."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("45,000", 45000),
            ("45", 45000),
            (45, 45000),
            ("600", 600),
            ("499", 499000),
            ("500", 500),
            ("12.5", 12500),
            ("1 200", 1200),
            ("0", 0),
        ],
    )
    def test_numeric(self, value: Any, expected: int) -> None:
        """Should parse numbers and scale values under 500 by 1000."""
        result = normalize_mileage(value)

        assert result == expected
        assert isinstance(result, int)

    def test_fractional_result_kept(self) -> None:
        """Should keep a non-integral result as float."""
        assert normalize_mileage("1234.5") == 1234.5

    @pytest.mark.parametrize("value", ["abc", "45000 km", "", "inf", "nan"])
    def test_unparseable_unchanged(self, value: str) -> None:
        """Should return values that don't parse as finite numbers unchanged."""
        assert normalize_mileage(value) == value

    def test_none_unchanged(self) -> None:
        """Should leave missing mileage alone."""
        assert normalize_mileage(None) is None


class TestTransformRow:
    """Tests for transform_row."""

    def test_direct_mapping(self) -> None:
        """Should copy mapped columns and leave the rest empty."""
        row = {"Brand": "Audi", "Model": "A6", "Trim": "45 TFSI", "Stock": "S1"}
        mapping = {"Brand": "make", "Model": "model", "Trim": "variant"}

        vehicle = transform_row(row, mapping)

        assert vehicle.make == "Audi"
        assert vehicle.model == "A6"
        assert vehicle.variant == "45 TFSI"
        assert vehicle.vin is None
        assert vehicle.color is None

    def test_camel_case_targets(self) -> None:
        """Should fill fields addressed by their schema keys."""
        row = {"Body": "SUV", "Plate": "ABC 123", "Seats": 7}
        mapping = {"Body": "bodyType", "Plate": "registrationNumber", "Seats": "seatingCapacity"}

        vehicle = transform_row(row, mapping)

        assert vehicle.body_type == "SUV"
        assert vehicle.registration_number == "ABC 123"
        assert vehicle.get("seatingCapacity") == 7

    def test_skipped_targets(self) -> None:
        """Should ignore columns mapped to None or an empty string."""
        row = {"Brand": "Audi", "Notes": "x", "Other": "y"}

        vehicle = transform_row(row, {"Brand": "make", "Notes": None, "Other": ""})

        assert vehicle.make == "Audi"
        assert vehicle.description is None

    def test_year_and_mileage_normalized(self) -> None:
        """Should normalize year and mileage values."""
        row = {"Year": "=2022", "Km": "45"}

        vehicle = transform_row(row, {"Year": "year", "Km": "mileage"})

        assert vehicle.year == "2022"
        assert vehicle.mileage == 45000

    def test_missing_cells(self) -> None:
        """Should treat mapped columns absent from the row as empty."""
        vehicle = transform_row({}, {"Year": "year", "Km": "mileage"})

        assert vehicle.year is None
        assert vehicle.mileage is None

    def test_combined_make_model(self) -> None:
        """Should split make, model and year but not variant."""
        row = {"Vehicle": "Toyota Camry 2020 Hybrid"}

        vehicle = transform_row(row, {"Vehicle": "combined_make_model"})

        assert vehicle.make == "Toyota"
        assert vehicle.model == "Camry"
        assert vehicle.year == "2020"
        assert vehicle.variant is None

    def test_combined_make_model_variant(self) -> None:
        """Should also fill the variant."""
        row = {"Vehicle": "VW Tiguan 330TSI Luxury"}

        vehicle = transform_row(row, {"Vehicle": "combined_make_model_variant"})

        assert vehicle.make == "Volkswagen"
        assert vehicle.model == "Tiguan"
        assert vehicle.variant == "330TSI Luxury"
        assert vehicle.year is None

    def test_combined_value_beats_direct_column(self) -> None:
        """Should keep the combined value when a plain column targets the same field."""
        row = {"Make": "BMW", "Vehicle": "Audi A6"}
        mapping = {"Make": "make", "Vehicle": "combined_make_model"}

        vehicle = transform_row(row, mapping)

        assert vehicle.make == "Audi"
        assert vehicle.model == "A6"

    def test_direct_column_fills_what_split_left_empty(self) -> None:
        """Should use a plain column for a field the split could not supply."""
        row = {"Vehicle": "Audi A6", "Year": "2021"}
        mapping = {"Vehicle": "combined_make_model", "Year": "year"}

        vehicle = transform_row(row, mapping)

        assert vehicle.year == "2021"

    def test_first_combined_column_wins(self) -> None:
        """Should not let a second combined column overwrite the first."""
        row = {"Title": "Audi A6 2020", "Name": "BMW X5 2019"}
        mapping = {"Title": "combined_make_model", "Name": "combined_make_model"}

        vehicle = transform_row(row, mapping)

        assert vehicle.make == "Audi"
        assert vehicle.year == "2020"

    def test_full_description(self) -> None:
        """Should derive color, description and variant from a description."""
        row = {"Material Name": "Tiguan L 330TSI - Sky Blue"}

        vehicle = transform_row(row, {"Material Name": "combined_full_description"})

        assert vehicle.color == "Blue"
        assert vehicle.description == "Tiguan L 330TSI - Sky Blue"
        assert vehicle.variant == "Tiguan L 330TSI"

    def test_full_description_after_make_model_variant(self) -> None:
        """Should keep the variant from an earlier combined column."""
        row = {"Vehicle": "VW Tiguan 330TSI Luxury", "Material": "Tiguan L - Pearl White"}
        mapping = {"Vehicle": "combined_make_model_variant", "Material": "combined_full_description"}

        vehicle = transform_row(row, mapping)

        assert vehicle.variant == "330TSI Luxury"
        assert vehicle.color == "White"

    def test_empty_combined_value_ignored(self) -> None:
        """Should let plain columns fill fields when the combined cell is empty."""
        row = {"Vehicle": "", "Make": "Kia"}
        mapping = {"Vehicle": "combined_make_model", "Make": "make"}

        assert transform_row(row, mapping).make == "Kia"

    def test_non_scalar_cell_stringified(self) -> None:
        """Should store odd cell types as strings."""
        vehicle = transform_row({"Notes": ["a", "b"]}, {"Notes": "description"})

        assert vehicle.description == "['a', 'b']"


class TestTransformToVehicles:
    """Tests for transform_to_vehicles."""

    def test_one_vehicle_per_row_in_order(self, sample_rows: list[dict[str, Any]]) -> None:
        """Should produce one record per row, in input order."""
        mapping = {
            "Brand": "make",
            "Model": "model",
            "Year": "year",
            "Colour": "color",
            "VIN": "vin",
            "Odometer": "mileage",
        }

        vehicles = transform_to_vehicles(sample_rows, mapping)

        assert [v.vin for v in vehicles] == [row["VIN"] for row in sample_rows]
        assert [v.mileage for v in vehicles] == [12500, 8000, 30000]
        assert vehicles[0].year == "2022"

    def test_empty_input(self) -> None:
        """Should return an empty list for no rows."""
        assert transform_to_vehicles([], {"Make": "make"}) == []
