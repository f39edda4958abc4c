"""Typer CLI for pane layout."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from joinery.application import (
    DecomposeOpeningCommand,
    LayoutItemCommand,
    OpeningInput,
    SashInput,
    SubdivideSashCommand,
)
from joinery.application.config import ConfigError, load_config
from joinery.cli.commands import display_load_error, validate_command
from joinery.infrastructure import (
    ElevationSummaryFormatter,
    ExporterRegistry,
    ExportManager,
    PaneLayoutFormatter,
)
from joinery.logging_config import setup_logging

app = typer.Typer(
    name="joinery",
    help="Lay out glass panes, frame members and sashes for windows and doors.",
)

app.command(name="validate")(validate_command)

OUTPUT_FORMATS = ("text", "json")


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    return fmt


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write log messages to this file"),
    ] = None,
) -> None:
    """Lay out glass panes, frame members and sashes for windows and doors."""
    if verbose or log_file:
        setup_logging(
            logging.DEBUG if verbose else logging.INFO,
            str(log_file) if log_file else None,
        )


@app.command()
def panes(
    width: Annotated[float, typer.Option("--width", "-w", help="Opening width in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Opening height in mm")],
    mullions: Annotated[
        list[float] | None,
        typer.Option("--mullion", "-m", help="Mullion centre offset from the left in mm (repeatable)"),
    ] = None,
    transoms: Annotated[
        list[float] | None,
        typer.Option("--transom", "-t", help="Transom centre offset from the top in mm (repeatable)"),
    ] = None,
    mullion_thickness: Annotated[
        float, typer.Option("--mullion-thickness", help="Default mullion thickness in mm")
    ] = 0.0,
    transom_thickness: Annotated[
        float, typer.Option("--transom-thickness", help="Default transom thickness in mm")
    ] = 0.0,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Split a frame opening into glass panes around mullions and transoms."""
    fmt = _check_format(output_format)
    opening = OpeningInput(
        width=width,
        height=height,
        mullions=list(mullions or []),
        transoms=list(transoms or []),
        mullion_thickness=mullion_thickness,
        transom_thickness=transom_thickness,
    )
    result = DecomposeOpeningCommand().execute(opening)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    formatter = PaneLayoutFormatter()
    if fmt == "json":
        typer.echo(formatter.format_json(result))
    else:
        typer.echo(formatter.format(result))


@app.command()
def sash(
    width: Annotated[float, typer.Option("--width", "-w", help="Glass width in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Glass height in mm")],
    vertical_bars: Annotated[
        int, typer.Option("--vertical-bars", help="Number of vertical glazing bars")
    ] = 0,
    horizontal_bars: Annotated[
        int, typer.Option("--horizontal-bars", help="Number of horizontal glazing bars")
    ] = 0,
    bar_thickness: Annotated[
        float, typer.Option("--bar-thickness", help="Glazing bar thickness in mm")
    ] = 0.0,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Split a sash's glass into evenly spaced panes between glazing bars."""
    fmt = _check_format(output_format)
    sash_input = SashInput(
        width=width,
        height=height,
        vertical_bars=vertical_bars,
        horizontal_bars=horizontal_bars,
        bar_thickness=bar_thickness,
    )
    result = SubdivideSashCommand().execute(sash_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    formatter = PaneLayoutFormatter()
    if fmt == "json":
        typer.echo(formatter.format_json(result))
    else:
        typer.echo(formatter.format(result))


@app.command()
def layout(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON quote item configuration")
    ],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (or 'all') written to --output-dir",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
) -> None:
    """Lay out the full elevation of a quote item from a configuration file."""
    fmt = _check_format(output_format)
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = LayoutItemCommand().execute(config)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_formats:
        _export_formats(output_formats, output_dir, result.elevation)
        return

    formatter = ElevationSummaryFormatter()
    if fmt == "json":
        text = formatter.format_json(result)
    else:
        text = formatter.format(result)

    if output_file:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output_file}")
    else:
        typer.echo(text)


def _export_formats(output_formats_str: str, output_dir: Path | None, elevation) -> None:
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, elevation)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


if __name__ == "__main__":
    app()
