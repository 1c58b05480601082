"""Pydantic models for data validation."""

from enum import Enum
from functools import lru_cache
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

# Raw spreadsheet cells arrive as strings or numbers, or are missing
Scalar = Union[str, int, float, None]


class FieldGroup(str, Enum):
    """Role a schema field plays when vehicles are grouped into listings."""

    GROUPING = "grouping"
    LISTING = "listing"
    VEHICLE = "vehicle"
    COMBINED = "combined"


class CombinedFieldKey(str, Enum):
    """Mapping targets that encode several schema fields as free text."""

    MAKE_MODEL = "combined_make_model"
    MAKE_MODEL_VARIANT = "combined_make_model_variant"
    FULL_DESCRIPTION = "combined_full_description"


# Serialized (camelCase) keys, in declaration order
GROUPING_KEYS = ["make", "model", "year", "color"]
LISTING_KEYS = [
    "variant",
    "bodyType",
    "fuelType",
    "transmission",
    "drivetrain",
    "engineSize",
    "cylinders",
    "horsepower",
    "seatingCapacity",
    "doors",
    "condition",
    "regionalSpecs",
    "city",
    "country",
    "description",
]
VEHICLE_KEYS = ["vin", "registrationNumber", "mileage", "owners", "warranty", "price"]


class SchemaField(BaseModel):
    """Definition of a single canonical field."""

    key: str = Field(..., description="Unique field key, e.g. 'bodyType'")
    label: str = Field(..., description="Human readable label")
    group: FieldGroup
    required: bool = Field(False, description="Whether a mapping must target this field")
    description: str | None = Field(None, description="Help text for combined fields")
    splits_to: list[str] = Field(
        default_factory=list, description="Target field keys of a combined field"
    )

    model_config = ConfigDict(frozen=True)


class VehicleDetail(BaseModel):
    """Vehicle-specific values kept per car inside a listing."""

    vin: Scalar = None
    registration_number: Scalar = Field(None, alias="registrationNumber")
    mileage: Scalar = None
    owners: Scalar = None
    warranty: Scalar = None
    price: Scalar = None

    model_config = ConfigDict(populate_by_name=True)


class VehicleRecord(VehicleDetail):
    """Canonical per-row vehicle after mapping and normalization."""

    # Grouping fields
    make: Scalar = None
    model: Scalar = None
    year: Scalar = None
    color: Scalar = None

    # Listing fields
    variant: Scalar = None
    body_type: Scalar = Field(None, alias="bodyType")
    fuel_type: Scalar = Field(None, alias="fuelType")
    transmission: Scalar = None
    drivetrain: Scalar = None
    engine_size: Scalar = Field(None, alias="engineSize")
    cylinders: Scalar = None
    horsepower: Scalar = None
    seating_capacity: Scalar = Field(None, alias="seatingCapacity")
    doors: Scalar = None
    condition: Scalar = None
    regional_specs: Scalar = Field(None, alias="regionalSpecs")
    city: Scalar = None
    country: Scalar = None
    description: Scalar = None

    def get(self, key: str) -> Scalar:
        """Return a value by its schema key (camelCase)."""
        return getattr(self, _attribute_names(type(self)).get(key, key), None)

    def vehicle_detail(self) -> VehicleDetail:
        """Return the vehicle-level subset of this record."""
        return VehicleDetail(**{name: getattr(self, name) for name in VehicleDetail.model_fields})


class Listing(BaseModel):
    """A group of vehicles sharing make, model, year and color."""

    id: str = Field(..., description="Grouping key")

    make: Scalar = None
    model: Scalar = None
    year: Scalar = None
    color: Scalar = None

    variant: Scalar = None
    body_type: Scalar = Field(None, alias="bodyType")
    fuel_type: Scalar = Field(None, alias="fuelType")
    transmission: Scalar = None
    drivetrain: Scalar = None
    engine_size: Scalar = Field(None, alias="engineSize")
    cylinders: Scalar = None
    horsepower: Scalar = None
    seating_capacity: Scalar = Field(None, alias="seatingCapacity")
    doors: Scalar = None
    condition: Scalar = None
    regional_specs: Scalar = Field(None, alias="regionalSpecs")
    city: Scalar = None
    country: Scalar = None
    description: Scalar = None

    vehicles: list[VehicleDetail] = Field(default_factory=list)
    count: int = Field(0, ge=0)

    model_config = ConfigDict(populate_by_name=True)

    def add_vehicle(self, detail: VehicleDetail) -> None:
        """Append a vehicle and keep count in step with the vehicle list."""
        self.vehicles.append(detail)
        self.count = len(self.vehicles)

    def get(self, key: str) -> Any:
        """Return a grouping or listing value by its schema key (camelCase)."""
        return getattr(self, _attribute_names(type(self)).get(key, key), None)


class ListingStats(BaseModel):
    """Summary statistics over a set of listings."""

    total_listings: int = Field(0, alias="totalListings")
    total_vehicles: int = Field(0, alias="totalVehicles")
    avg_vehicles_per_listing: float = Field(0, alias="avgVehiclesPerListing")
    unique_makes: int = Field(0, alias="uniqueMakes")

    model_config = ConfigDict(populate_by_name=True)


class SplitResult(BaseModel):
    """Parts recovered from a combined make/model string."""

    make: str = ""
    model: str = ""
    variant: str = ""
    year: str = ""


class CombinedDetection(BaseModel):
    """Whether a column's samples look like combined make + model text."""

    is_combined: bool = False
    confidence: float = Field(0.0, ge=0, le=1)
    detected_makes: list[str] = Field(default_factory=list)


class ColumnAnalysis(CombinedDetection):
    """Combined-data detection result for one named column."""

    column: str
    samples: list[str] = Field(default_factory=list, description="First samples for preview")


class MappingStatus(BaseModel):
    """Whether a column mapping covers every required field."""

    mapped_fields: list[str] = Field(default_factory=list)
    missing_required: list[str] = Field(default_factory=list)

    @property
    def can_confirm(self) -> bool:
        """A mapping can be confirmed once no required field is missing."""
        return not self.missing_required


@lru_cache(maxsize=None)
def _attribute_names(model: type[BaseModel]) -> dict[str, str]:
    """Map serialized schema keys to model attribute names."""
    return {info.alias or name: name for name, info in model.model_fields.items()}
