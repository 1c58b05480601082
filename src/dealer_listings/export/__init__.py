"""Export modules."""

from dealer_listings.export.csv_exporter import export_to_csv
from dealer_listings.export.json_exporter import export_to_json

__all__ = ["export_to_csv", "export_to_json"]
