"""Text normalization for column matching and grouping."""

from typing import Any


def normalize_column_name(name: Any) -> str:
    """Normalize a raw column header for synonym matching.

    Only case and surrounding whitespace are normalized; inner spacing and
    punctuation are kept so that "Reg. No" and "reg no" stay distinct.

    Args:
        name: Column header as read from the file.

    Returns:
        Lowercased, trimmed header.

    Examples:
        >>> normalize_column_name("  Exterior Color ")
        'exterior color'
        >>> normalize_column_name("VIN")
        'vin'
    """
    if name is None:
        return ""
    return str(name).lower().strip()


def normalize_grouping_value(value: Any) -> str:
    """Normalize a grouping field value for listing key comparison.

    Missing and falsy values (None, "", 0) become the empty string; numbers
    are compared by their string form, so a year of 2022 and "2022" group
    together.

    Examples:
        >>> normalize_grouping_value(" Audi ")
        'audi'
        >>> normalize_grouping_value(None)
        ''
    """
    if not value:
        return ""
    return str(value).lower().strip()
