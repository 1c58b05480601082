"""Unit tests for combined make/model splitting."""

import pytest

from dealer_listings.models.pydantic_models import SplitResult
from dealer_listings.splitting.make_model import canonical_make, split_make_model


class TestCanonicalMake:
    """Tests for canonical_make."""

    @pytest.mark.parametrize(
        ("matched", "expected"),
        [
            ("VW", "Volkswagen"),
            ("vw", "Volkswagen"),
            ("Chevy", "Chevrolet"),
            ("Mercedes-Benz", "Mercedes"),
            ("Range Rover", "Land rover"),
            ("BMW", "BMW"),
            ("bmw", "BMW"),
            ("TOYOTA", "Toyota"),
            ("Land Rover", "Land rover"),
        ],
    )
    def test_canonical_make(self, matched: str, expected: str) -> None:
        """Should resolve aliases then capitalize the first letter only."""
        assert canonical_make(matched) == expected

    def test_alias_lookup_is_case_sensitive(self) -> None:
        """Should only resolve aliases written exactly as listed."""
        assert canonical_make("chevy") == "Chevy"


class TestSplitMakeModel:
    """Tests for split_make_model."""

    def test_make_model_year_variant(self) -> None:
        """Should split make, model, year and variant."""
        result = split_make_model("Audi A6 2020 quattro")

        assert result == SplitResult(make="Audi", model="A6", variant="quattro", year="2020")

    def test_alias_and_multi_word_variant(self) -> None:
        """Should resolve VW and keep the remaining words as variant."""
        result = split_make_model("VW Tiguan 330TSI Luxury")

        assert result == SplitResult(make="Volkswagen", model="Tiguan", variant="330TSI Luxury")

    def test_lowercase_bmw(self) -> None:
        """Should restore BMW casing."""
        result = split_make_model("bmw X5 xDrive40i")

        assert result.make == "BMW"
        assert result.model == "X5"
        assert result.variant == "xDrive40i"

    def test_longest_make_wins(self) -> None:
        """Should prefer Mercedes-Benz over Mercedes."""
        result = split_make_model("Mercedes-Benz C200 2019")

        assert result == SplitResult(make="Mercedes", model="C200", year="2019")

    def test_multi_word_make(self) -> None:
        """Should match makes made of several words."""
        assert split_make_model("Land Rover Defender 110").make == "Land rover"
        result = split_make_model("Range Rover Sport")
        assert result.make == "Land rover"
        assert result.model == "Sport"

    def test_chevy_alias(self) -> None:
        """Should resolve Chevy to Chevrolet."""
        assert split_make_model("Chevy Tahoe").make == "Chevrolet"

    def test_parent_company_prefix(self) -> None:
        """Should drop a joint venture parent in front of the make."""
        assert split_make_model("GAC Honda Accord") == SplitResult(make="Honda", model="Accord")

        result = split_make_model("SAIC Volkswagen Lavida Plus 2020")
        assert result == SplitResult(
            make="Volkswagen", model="Lavida", variant="Plus", year="2020"
        )

    def test_parent_company_as_make(self) -> None:
        """Should use the parent itself when no make follows it."""
        result = split_make_model("GAC GS8 2022")

        assert result == SplitResult(make="Gac", model="GS8", year="2022")

    def test_make_not_at_start(self) -> None:
        """Should find a make later in the text and use what follows it."""
        result = split_make_model("2021 Toyota Camry SE")

        # The year sits before the make, so it is not part of the remainder
        assert result == SplitResult(make="Toyota", model="Camry", variant="SE")

    def test_make_at_end(self) -> None:
        """Should use the text before the make when nothing follows it."""
        result = split_make_model("Accord Honda")

        assert result == SplitResult(make="Honda", model="Accord")

    def test_unknown_make(self) -> None:
        """Should leave make empty and still split the rest."""
        result = split_make_model("Unknown Thing 2018")

        assert result == SplitResult(make="", model="Unknown", variant="Thing", year="2018")

    def test_year_outside_range_is_variant(self) -> None:
        """Should only treat 1990-2039 as a model year."""
        result = split_make_model("Ford Mustang 1967")

        assert result == SplitResult(make="Ford", model="Mustang", variant="1967")

    def test_decimal_year_leaves_fraction(self) -> None:
        """Should take the year out of "2022.6" and keep ".6" in the remainder."""
        result = split_make_model("VW Tiguan 2022.6 330TSI")

        assert result == SplitResult(
            make="Volkswagen", model="Tiguan", variant=".6 330TSI", year="2022"
        )
        assert split_make_model("Tiguan 2022.6") == SplitResult(
            model="Tiguan", variant=".6", year="2022"
        )

    def test_surrounding_whitespace(self) -> None:
        """Should trim the input."""
        assert split_make_model("  Kia Sportage  ") == SplitResult(make="Kia", model="Sportage")

    def test_make_only(self) -> None:
        """Should leave model and variant empty for a bare make."""
        assert split_make_model("Tesla") == SplitResult(make="Tesla")

    @pytest.mark.parametrize("value", [None, "", 2020, 3.5, ["Audi A6"]])
    def test_non_string_or_empty(self, value: object) -> None:
        """Should return an empty result for missing or non-string values."""
        assert split_make_model(value) == SplitResult()
