"""Typer CLI for cutting-plan generation."""

from pathlib import Path
from typing import Annotated

import typer

from nestplan.application import get_factory
from nestplan.application.config import (
    ConfigError,
    config_to_packing_config,
    config_to_pieces,
    config_to_remnants,
    config_to_sheets,
    load_config,
    validate_config,
)
from nestplan.cli.commands import display_load_error, validate_command
from nestplan.domain import STANDARD_MATERIALS, MaterialType
from nestplan.infrastructure import available_strategies

OUTPUT_FORMATS = ("text", "json")

# Exit code for a plan that left pieces unplaced
EXIT_INCOMPLETE_PLAN = 3


app = typer.Typer(
    name="nestplan",
    help="Plan how to cut pieces from sheet stock, reusing remnants first.",
)

app.command(name="validate")(validate_command)


@app.command()
def plan(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON planning job"),
    ],
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Report format: text, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file instead of stdout"),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Plan name (overrides the job's name)"),
    ] = None,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-s", help="Placement strategy (overrides the job's)"),
    ] = None,
) -> None:
    """Create a cutting plan from a planning job.

    Remnants are used before new sheets. The report lists placements, plates
    used, the remnants the plan leaves behind and any piece that could not
    be placed.

    Exit codes:
        0 - Every piece was placed
        1 - The job could not be loaded or has errors
        3 - Some or all pieces could not be placed (the plan is still shown)

    Examples:
        nestplan plan --config kitchen.json
        nestplan plan --config kitchen.json --format json --output plan.json
        nestplan plan --config kitchen.json --strategy best_short_side
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    validation = validate_config(config)
    if not validation.is_valid:
        typer.echo("Error: planning job has errors:", err=True)
        for error in validation.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)
    for warning in validation.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    if output_format is None:
        output_format = config.output.format
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. "
            f"Available: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        packing_config = config_to_packing_config(config, strategy=strategy)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    factory = get_factory()
    command = factory.create_plan_command(packing_config)
    record = command.execute(
        config_to_pieces(config),
        config_to_remnants(config),
        config_to_sheets(config),
        name=name or config.name,
    )

    if output_format == "json":
        report = factory.get_json_exporter().export(record, indent=config.output.indent)
    else:
        report = factory.get_report_formatter().format(record)

    if output_file is not None:
        output_file.write_text(report + "\n", encoding="utf-8")
        typer.echo(f"Plan written to {output_file}")
    else:
        typer.echo(report)

    if not record.is_complete:
        raise typer.Exit(code=EXIT_INCOMPLETE_PLAN)


@app.command()
def materials(
    material_type: Annotated[
        MaterialType | None,
        typer.Option("--type", "-t", help="Only list materials of this type"),
    ] = None,
) -> None:
    """List the standard material catalog."""
    catalog = [
        m for m in STANDARD_MATERIALS
        if material_type is None or m.material_type == material_type
    ]
    if not catalog:
        typer.echo("No materials found.")
        return

    typer.echo(f"{'ID':<20} {'Type':<10} {'Description':<18} Thicknesses (mm)")
    typer.echo("-" * 70)
    for material in catalog:
        thicknesses = ", ".join(f"{t:g}" for t in material.standard_thicknesses)
        typer.echo(
            f"{material.id:<20} {material.material_type.value:<10} "
            f"{material.description:<18} {thicknesses}"
        )


@app.command()
def strategies() -> None:
    """List the available placement strategies."""
    for strategy_name in available_strategies():
        typer.echo(strategy_name)


if __name__ == "__main__":
    app()
