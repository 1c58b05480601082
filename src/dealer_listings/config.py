"""YAML configuration loader for the field schema and column synonyms."""

import threading
from pathlib import Path
from typing import Any

import yaml

from dealer_listings.matching.synonyms import SynonymDictionary
from dealer_listings.models.pydantic_models import FieldGroup, SchemaField
from dealer_listings.schema import SchemaRegistry

_DATA_DIR = Path(__file__).parent / "data"

_defaults_lock = threading.Lock()
_default_registry: SchemaRegistry | None = None
_default_synonyms: SynonymDictionary | None = None


def _get_default_schema_path() -> Path:
    """Get the packaged schema definition path."""
    return _DATA_DIR / "schema.yaml"


def _get_default_synonyms_path() -> Path:
    """Get the packaged synonyms path."""
    return _DATA_DIR / "synonyms.yaml"


def _load_raw_config(path: Path) -> dict[str, Any]:
    """Load raw YAML config from path.

    Args:
        path: Path to YAML file.

    Returns:
        Raw config dictionary (empty for an empty file).

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    return raw_config if raw_config is not None else {}


def load_schema_registry(path: Path | None = None) -> SchemaRegistry:
    """Load and validate the field schema from YAML.

    The file has one top-level list per group (grouping, listing, vehicle,
    combined). Field order inside each list is preserved.

    Args:
        path: Path to YAML schema file. If None, uses the packaged schema.

    Returns:
        SchemaRegistry instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
        ValidationError: If a field doesn't match the expected schema.
    """
    raw_config = _load_raw_config(path or _get_default_schema_path())

    fields: list[SchemaField] = []
    for group in FieldGroup:
        fields.extend(_parse_field_list(raw_config.get(group.value) or [], group))

    return SchemaRegistry(fields)


def _parse_field_list(fields_data: list[dict[str, Any]], group: FieldGroup) -> list[SchemaField]:
    """Parse the field definitions of one group.

    Args:
        fields_data: List of field dictionaries from YAML.
        group: Group the fields belong to.

    Returns:
        List of validated SchemaField instances.
    """
    fields = []
    for field_dict in fields_data:
        field = SchemaField(
            key=field_dict["key"],
            label=field_dict.get("label", field_dict["key"]),
            group=group,
            required=field_dict.get("required", False),
            description=field_dict.get("description"),
            splits_to=field_dict.get("splits_to", []),
        )
        fields.append(field)
    return fields


def load_synonym_dictionary(path: Path | None = None) -> SynonymDictionary:
    """Load column name synonyms from YAML.

    Args:
        path: Path to YAML synonyms file (field key -> list of names).
            If None, uses the packaged synonyms.

    Returns:
        SynonymDictionary instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
    """
    raw_config = _load_raw_config(path or _get_default_synonyms_path())
    return SynonymDictionary(
        {str(key): [str(s) for s in (values or [])] for key, values in raw_config.items()}
    )


def get_default_registry() -> SchemaRegistry:
    """Return the process-wide schema registry, loading it on first use."""
    global _default_registry
    with _defaults_lock:
        if _default_registry is None:
            _default_registry = load_schema_registry()
        return _default_registry


def get_default_synonyms() -> SynonymDictionary:
    """Return the process-wide synonym dictionary, loading it on first use.

    This is the one shared dictionary that ``add_synonym`` calls from the
    CLI or a service mutate for the rest of the process.
    """
    global _default_synonyms
    with _defaults_lock:
        if _default_synonyms is None:
            _default_synonyms = load_synonym_dictionary()
        return _default_synonyms


def reset_defaults() -> None:
    """Drop the process-wide instances so the next access reloads them."""
    global _default_registry, _default_synonyms
    with _defaults_lock:
        _default_registry = None
        _default_synonyms = None
