"""CLI interface for dealer-listings."""

import csv
import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dealer_listings import __version__
from dealer_listings.config import load_schema_registry, load_synonym_dictionary
from dealer_listings.export.csv_exporter import export_to_csv
from dealer_listings.export.json_exporter import export_to_json, listing_to_dict
from dealer_listings.grouping.listing_grouper import get_listings_stats
from dealer_listings.matching.column_matcher import auto_detect_mapping, mapping_status
from dealer_listings.matching.synonyms import SynonymDictionary
from dealer_listings.models.pydantic_models import FieldGroup
from dealer_listings.schema import SchemaRegistry
from dealer_listings.services.listing_service import ListingService
from dealer_listings.splitting.color import extract_color_from_description
from dealer_listings.splitting.combined_detector import analyze_columns_for_combined_data
from dealer_listings.splitting.make_model import split_make_model

app = typer.Typer(
    name="dealer-listings",
    help="Map dealer vehicle spreadsheets to a standard schema and group them into listings",
    add_completion=False,
)
console = Console()

SKIP_TARGETS = ("", "skip")


def output_json(data: Any) -> None:
    """Output JSON to stdout (for programmatic consumption)."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def read_rows(path: Path) -> tuple[list[str], list[dict[str, Any]]]:
    """Read a CSV file into its header and row records.

    Args:
        path: CSV file path.

    Returns:
        Tuple of (column names, rows). Empty cells are kept as "".

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        rows = [dict(row) for row in reader]
        columns = list(reader.fieldnames or [])
    return columns, rows


def load_configuration(
    schema_path: Path | None,
    synonyms_path: Path | None,
) -> tuple[SchemaRegistry, SynonymDictionary]:
    """Load schema and synonyms, exiting with an error message on failure."""
    try:
        return load_schema_registry(schema_path), load_synonym_dictionary(synonyms_path)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1) from e


def apply_extra_synonyms(synonyms: SynonymDictionary, entries: list[str] | None) -> None:
    """Register FIELD=NAME synonyms given on the command line."""
    for entry in entries or []:
        field_key, sep, name = entry.partition("=")
        if not sep or not name.strip():
            console.print(f"[red]Invalid synonym '{entry}'. Use FIELD=NAME.[/red]")
            raise typer.Exit(1)
        if not synonyms.add_synonym(field_key.strip(), name):
            console.print(f"[yellow]Synonym '{name.strip()}' not added to '{field_key.strip()}'.[/yellow]")


def apply_mapping_overrides(
    mapping: dict[str, str],
    overrides: list[str] | None,
    registry: SchemaRegistry,
) -> dict[str, str]:
    """Apply COLUMN=FIELD overrides to a proposed mapping.

    A FIELD of "skip" (or nothing) removes the column from the mapping.
    """
    result = dict(mapping)
    for entry in overrides or []:
        column, sep, field_key = entry.rpartition("=")
        field_key = field_key.strip()
        if not sep or not column:
            console.print(f"[red]Invalid mapping '{entry}'. Use COLUMN=FIELD.[/red]")
            raise typer.Exit(1)
        if field_key.lower() in SKIP_TARGETS:
            result.pop(column, None)
            continue
        if field_key not in registry:
            console.print(f"[red]Unknown field '{field_key}' in mapping '{entry}'.[/red]")
            raise typer.Exit(1)
        result[column] = field_key
    return result


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"dealer-listings version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show debug logging.",
    ),
) -> None:
    """Dealer vehicle spreadsheet normalizer."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(name="map")
def map_columns(
    input_file: Path = typer.Argument(..., help="CSV file to inspect."),
    synonym: list[str] | None = typer.Option(
        None,
        "--synonym",
        help="Extra column synonym as FIELD=NAME (repeatable).",
    ),
    schema: Path | None = typer.Option(None, "--schema", help="Schema YAML file."),
    synonyms_file: Path | None = typer.Option(None, "--synonyms", help="Synonyms YAML file."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON (for programmatic consumption).",
    ),
) -> None:
    """Propose a column mapping for a file."""
    registry, synonyms = load_configuration(schema, synonyms_file)
    apply_extra_synonyms(synonyms, synonym)

    try:
        columns, _rows = read_rows(input_file)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    mapping = auto_detect_mapping(columns, registry, synonyms)
    status = mapping_status(mapping, registry)

    if json_output:
        output_json({
            "mapping": mapping,
            "unmapped": [c for c in columns if c not in mapping],
            "missing_required": status.missing_required,
        })
        return

    table = Table(title=f"Proposed mapping for {input_file.name}")
    table.add_column("Column", style="white")
    table.add_column("Field", style="cyan")
    table.add_column("Group", style="dim")

    for column in columns:
        field_key = mapping.get(column)
        field = registry.get(field_key) if field_key else None
        table.add_row(
            column,
            field.label if field else "[dim]-- skip --[/dim]",
            field.group.value if field else "",
        )

    console.print(table)

    if status.missing_required:
        console.print(
            f"[yellow]{len(status.missing_required)} required field(s) unmapped: "
            f"{', '.join(status.missing_required)}[/yellow]"
        )
    else:
        console.print("[green]All required fields mapped.[/green]")


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="CSV file to inspect."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON (for programmatic consumption).",
    ),
) -> None:
    """Find columns that look like combined make + model text."""
    try:
        columns, rows = read_rows(input_file)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    results = analyze_columns_for_combined_data(rows, columns)

    if json_output:
        output_json([result.model_dump() for result in results])
        return

    if not results:
        console.print("[yellow]No combined make/model columns detected.[/yellow]")
        return

    table = Table(title="Combined columns")
    table.add_column("Column", style="white")
    table.add_column("Confidence", style="yellow", justify="right")
    table.add_column("Makes", style="cyan")
    table.add_column("Samples", style="dim")

    for result in results:
        table.add_row(
            result.column,
            f"{result.confidence:.0%}",
            ", ".join(result.detected_makes),
            " | ".join(result.samples),
        )

    console.print(table)


@app.command()
def split(
    text: str = typer.Argument(..., help="Combined text, e.g. 'VW Tiguan 330TSI Luxury'."),
    color: bool = typer.Option(
        False,
        "--color",
        "-c",
        help="Also extract a color from the text.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON (for programmatic consumption).",
    ),
) -> None:
    """Split combined make/model text into its parts."""
    result = split_make_model(text).model_dump()
    if color:
        result["color"] = extract_color_from_description(text)

    if json_output:
        output_json(result)
        return

    details = [f"[bold]{key.title()}:[/bold] {value or '-'}" for key, value in result.items()]
    console.print(Panel("\n".join(details), title=f"[bold blue]{text}[/bold blue]", expand=False))


@app.command()
def group(
    input_file: Path = typer.Argument(..., help="CSV file to import."),
    map_override: list[str] | None = typer.Option(
        None,
        "--map",
        "-m",
        help="Mapping override as COLUMN=FIELD, FIELD 'skip' to ignore (repeatable).",
    ),
    synonym: list[str] | None = typer.Option(
        None,
        "--synonym",
        help="Extra column synonym as FIELD=NAME (repeatable).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Import even if required fields are unmapped.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Export listings to a .json or .csv file.",
    ),
    schema: Path | None = typer.Option(None, "--schema", help="Schema YAML file."),
    synonyms_file: Path | None = typer.Option(None, "--synonyms", help="Synonyms YAML file."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON (for programmatic consumption).",
    ),
) -> None:
    """Import a file and group its vehicles into listings."""
    registry, synonyms = load_configuration(schema, synonyms_file)
    apply_extra_synonyms(synonyms, synonym)

    try:
        columns, rows = read_rows(input_file)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    mapping = auto_detect_mapping(columns, registry, synonyms)
    mapping = apply_mapping_overrides(mapping, map_override, registry)

    status = mapping_status(mapping, registry)
    if not status.can_confirm and not force:
        console.print(
            f"[red]{len(status.missing_required)} required field(s) unmapped: "
            f"{', '.join(status.missing_required)}. Use --map or --force.[/red]"
        )
        raise typer.Exit(1)

    service = ListingService(registry)
    service.import_vehicles(rows, mapping)
    listings = service.listings
    stats = get_listings_stats(listings)

    if output is not None:
        if output.suffix.lower() == ".csv":
            export_to_csv(listings, output)
        else:
            export_to_json(listings, output)

    if json_output:
        output_json({
            "mapping": mapping,
            "stats": stats.model_dump(by_alias=True),
            "listings": [listing_to_dict(listing) for listing in listings],
        })
        return

    if not listings:
        console.print("[yellow]No vehicles found.[/yellow]")
        return

    table = Table(title=f"Listings ({stats.total_listings})")
    table.add_column("Make", style="cyan")
    table.add_column("Model", style="white")
    table.add_column("Year", style="blue", justify="right")
    table.add_column("Color", style="magenta")
    table.add_column("Variant", style="dim", max_width=30)
    table.add_column("Vehicles", style="green", justify="right")

    for listing in listings:
        table.add_row(
            str(listing.make or "-"),
            str(listing.model or "-"),
            str(listing.year or "-"),
            str(listing.color or "-"),
            str(listing.variant or "-"),
            str(listing.count),
        )

    console.print(table)
    console.print(
        f"[bold]{stats.total_vehicles}[/bold] vehicles in [bold]{stats.total_listings}[/bold] "
        f"listings (avg {stats.avg_vehicles_per_listing:.1f}, {stats.unique_makes} makes)"
    )
    if output is not None:
        console.print(f"[green]Export complete: {output}[/green]")


@app.command()
def fields(
    schema: Path | None = typer.Option(None, "--schema", help="Schema YAML file."),
    synonyms_file: Path | None = typer.Option(None, "--synonyms", help="Synonyms YAML file."),
) -> None:
    """Show the standard fields and their known column synonyms."""
    registry, synonyms = load_configuration(schema, synonyms_file)

    for field_group in FieldGroup:
        group_fields = registry.fields(field_group)
        if not group_fields:
            continue
        table = Table(title=f"{field_group.value.title()} fields")
        table.add_column("Key", style="cyan")
        table.add_column("Label", style="white")
        table.add_column("Req", justify="center")
        table.add_column("Synonyms / splits to", style="dim")
        for field in group_fields:
            extra = field.splits_to if field_group == FieldGroup.COMBINED else synonyms.synonyms_for(field.key)
            table.add_row(
                field.key,
                field.label,
                "[green]Y[/green]" if field.required else "",
                ", ".join(extra),
            )
        console.print(table)


if __name__ == "__main__":
    app()
