# src/papertheme/cli/app.py
"""Command-line interface for papertheme.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import logging

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from rich.text import Text
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install papertheme[cli]"
    ) from e

from papertheme import __version__
from papertheme.colors import is_dark_background
from papertheme.commands import config_cmd, generate, preview
from papertheme.commands.base import CommandResult

app = typer.Typer(
    name="papertheme",
    help="papertheme - Material Design 3 themes for Tailwind CSS from one seed color.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"papertheme {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show errors."),
) -> None:
    """papertheme - Material Design 3 themes for Tailwind CSS."""
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _fail(result: CommandResult) -> None:
    console.print(f"[red]Error: {escape(result.error or '')}[/red]")
    raise typer.Exit(1)


@app.command("generate")
def generate_cmd(
    seed: str = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed color, e.g. '#1976D2' (default: from settings)",
    ),
    hue: float = typer.Option(
        None,
        "--hue",
        help="Seed hue as a fraction of the color wheel, 0.0-1.0 (ignored with --seed)",
    ),
    contrast: float = typer.Option(
        None,
        "--contrast",
        help="Contrast level from -1.0 to 1.0 (default: from settings)",
    ),
    preset: str = typer.Option(
        None,
        "--preset",
        "-p",
        help="Contrast preset: reduced, standard, medium, high (ignored with --contrast)",
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output CSS file (default: theme.css)",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the CSS instead of writing a file",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Generate a Tailwind CSS @theme stylesheet."""
    result = generate.generate(
        seed_color=seed,
        hue=hue,
        contrast=contrast,
        contrast_preset=preset,
        output=output,
        write=not stdout,
        config_path=config_file,
    )

    if not result.success:
        _fail(result)

    if stdout:
        typer.echo(result.css, nl=False)
        return

    if plain:
        typer.echo(f"Wrote {result.variable_count} variables to {result.output_path}")
    else:
        console.print(
            f"[green]Wrote {result.variable_count} variables to {result.output_path}[/green]"
        )
        console.print(
            f"[dim]Seed {result.seed_color}, contrast {result.contrast:.2f}[/dim]"
        )


def _swatch(hex_color: str) -> Text:
    """Hex value rendered on its own color."""
    foreground = "white" if is_dark_background(hex_color) else "black"
    return Text(f" {hex_color} ", style=f"{foreground} on {hex_color}")


@app.command("preview")
def preview_cmd(
    seed: str = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed color, e.g. '#1976D2' (default: from settings)",
    ),
    hue: float = typer.Option(
        None,
        "--hue",
        help="Seed hue as a fraction of the color wheel, 0.0-1.0 (ignored with --seed)",
    ),
    contrast: float = typer.Option(
        None,
        "--contrast",
        help="Contrast level from -1.0 to 1.0 (default: from settings)",
    ),
    preset: str = typer.Option(
        None,
        "--preset",
        "-p",
        help="Contrast preset: reduced, standard, medium, high (ignored with --contrast)",
    ),
    css: bool = typer.Option(
        False,
        "--css",
        help="Print the inline style rule instead of a table",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Show the generated light and dark tokens."""
    result = preview.preview(
        seed_color=seed,
        hue=hue,
        contrast=contrast,
        contrast_preset=preset,
        config_path=config_file,
    )

    if not result.success:
        _fail(result)

    if css:
        typer.echo(result.style_css, nl=False)
        return

    light, dark = result.scheme

    if plain:
        typer.echo(f"Seed {result.seed_color}, contrast {result.contrast:.2f}")
        for (name, light_hex), (_, dark_hex) in zip(light.colors, dark.colors, strict=True):
            typer.echo(f"{name}\t{light_hex}\t{dark_hex}")
        return

    table = Table(title=f"Seed {result.seed_color}, contrast {result.contrast:.2f}")
    table.add_column("Token", style="cyan")
    table.add_column("Light")
    table.add_column("Dark")

    for (name, light_hex), (_, dark_hex) in zip(light.colors, dark.colors, strict=True):
        table.add_row(name, _swatch(light_hex), _swatch(dark_hex))

    console.print(table)


@app.command("config")
def config_cmd_handler(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        _fail(result)

    table = Table(title="papertheme Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: option > env var > yaml settings > default[/dim]")
