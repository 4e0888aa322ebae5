"""Typer CLI for lumber cut planning."""

from pathlib import Path
from typing import Annotated

import typer

from lumber_cuts.application import (
    OptimizeCutsCommand,
    build_cut_request,
    parse_board_length,
    parse_cut_lines,
)
from lumber_cuts.application.config import ConfigError, config_to_request, load_config
from lumber_cuts.application.strategies import PackingStrategyFactory
from lumber_cuts.cli.commands import validate_command
from lumber_cuts.domain import CutRequest, CutRequestError, PackingDefaults
from lumber_cuts.infrastructure import CutPlanFormatter, JsonExporter

_DEFAULTS = PackingDefaults()

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="lumber-cuts",
    help="Plan how to cut pieces from stock lumber using as few boards as possible.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _read_cut_text(cuts: str | None, cuts_file: Path | None) -> str:
    """Combine --cuts and --cuts-file into one block of cut lines."""
    blocks: list[str] = []
    if cuts_file is not None:
        try:
            blocks.append(cuts_file.read_text(encoding="utf-8"))
        except OSError as e:
            typer.echo(f"Error: cannot read cuts file {cuts_file}: {e}", err=True)
            raise typer.Exit(code=1)
    if cuts is not None:
        # Semicolons separate lines on the command line
        blocks.append(cuts.replace(";", "\n"))
    return "\n".join(blocks)


def _build_request(
    config_file: Path | None,
    length: str | None,
    margin: float | None,
    kerf: float | None,
    cuts: str | None,
    cuts_file: Path | None,
) -> CutRequest:
    if config_file is not None:
        if length is not None or cuts is not None or cuts_file is not None:
            typer.echo(
                "Error: --config cannot be combined with --length, --cuts or --cuts-file",
                err=True,
            )
            raise typer.Exit(code=1)
        config = load_config(config_file)
        # CLI values override the file's saw settings
        updates = {}
        if margin is not None:
            updates["margin"] = margin
        if kerf is not None:
            updates["kerf"] = kerf
        if updates:
            config = config.model_copy(update=updates)
        return config_to_request(config)

    if length is None:
        typer.echo("Error: either --config or --length is required", err=True)
        raise typer.Exit(code=1)

    return build_cut_request(
        parse_board_length(length),
        _DEFAULTS.margin if margin is None else margin,
        _DEFAULTS.kerf if kerf is None else kerf,
        parse_cut_lines(_read_cut_text(cuts, cuts_file)),
    )


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    length: Annotated[
        str | None,
        typer.Option("--length", "-l", help="Stock board length in whole feet"),
    ] = None,
    margin: Annotated[
        float | None,
        typer.Option("--margin", help="Length measurement margin in inches (default: 0.25)"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw blade width in inches (default: 0.125)"),
    ] = None,
    cuts: Annotated[
        str | None,
        typer.Option(
            "--cuts",
            help="Cut lengths in inches, e.g. 'shelf: 30, 30; side: 40; 10'",
        ),
    ] = None,
    cuts_file: Annotated[
        Path | None,
        typer.Option("--cuts-file", help="File with one cut line per line"),
    ] = None,
    strategy: Annotated[
        str,
        typer.Option("--strategy", "-s", help="Strategy: all, grouped, global"),
    ] = "all",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Compute which cuts go on which board.

    Example:
        lumber-cuts optimize --length 8 --cuts "shelf: 30, 30; side: 40; 10"
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    available = PackingStrategyFactory.available()
    if strategy == "all":
        strategies = available
    elif strategy in available:
        strategies = [strategy]
    else:
        typer.echo(f"Unknown strategy: {strategy}", err=True)
        typer.echo(f"Available strategies: all, {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    try:
        request = _build_request(config_file, length, margin, kerf, cuts, cuts_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except CutRequestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    plan = OptimizeCutsCommand().execute(request, strategies)

    if output_format == "json":
        output = JsonExporter().export(plan)
    else:
        output = CutPlanFormatter().format(plan)

    if output_file is not None:
        output_file.write_text(output + "\n", encoding="utf-8")
        typer.echo(f"Cut plan written to {output_file}")
    else:
        typer.echo(output)


if __name__ == "__main__":
    app()
