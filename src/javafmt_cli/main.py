from pathlib import Path

import typer
from javafmt_style.exceptions import JavaFmtStyleError
from javafmt_style.models import FormatterOptions, StylePreset

from .config import StyleConfig
from .converters import options_to_report

app = typer.Typer(help="javafmt - Select and inspect formatter style presets")


def _resolve(config_file: Path, style: str | None = None, aosp: bool = False) -> FormatterOptions:
    try:
        return StyleConfig(config_file).resolve(style=style, aosp=aosp)
    except JavaFmtStyleError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)


@app.command()
def show(
    style: str = typer.Option(None, "--style", "-s", help="Style preset name"),
    aosp: bool = typer.Option(False, "--aosp", help="Use the AOSP style (overrides --style)"),
    config_file: Path = typer.Option(Path(".javafmt.toml"), help="Path to config file"),
    as_json: bool = typer.Option(False, "--json", help="Print the options as JSON"),
):
    """Show the formatting parameters of a style preset"""
    options = _resolve(config_file, style=style, aosp=aosp)
    report = options_to_report(options)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    typer.echo(f"style: {report.style}")
    for key, value in report.model_dump(exclude={"style"}).items():
        typer.echo(f"  {key} = {value}")


@app.command()
def styles(
    config_file: Path = typer.Option(Path(".javafmt.toml"), help="Path to config file"),
):
    """List the available style presets"""
    # The default is whatever `show` picks without flags
    default = _resolve(config_file).style
    for preset in StylePreset:
        marker = " (default)" if preset is default else ""
        params = preset.parameters
        typer.echo(
            f"{preset.name.lower()}{marker}: indent x{params.indentation_multiplier}, "
            f"width {params.max_line_length}, keep {params.max_preserve_blanks} blank(s)"
        )


if __name__ == "__main__":
    app()
