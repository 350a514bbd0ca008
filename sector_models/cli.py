"""Command-line interface for Sector Models."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config.logging import setup_logging
from .config.settings import Settings
from .resolver.core import ModelResolver
from .resolver.locator import candidate_paths, locate_models_file

app = typer.Typer(
    name="sector-models",
    help="Sector Models - embedding model resolution for memory sectors",
    add_completion=False,
)
console = Console()


def _build_settings(config: Optional[Path], debug: bool) -> Settings:
    settings = Settings()
    if config:
        settings.MODELS_FILE = config
    if debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"
    setup_logging(settings)
    return settings


@app.command("show")
def show_models(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to models.yml"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the mapping as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Show the active sector/provider model mapping."""
    resolver = ModelResolver(_build_settings(config, debug))
    models = resolver.load_models()
    result = resolver.load_result

    if as_json:
        console.print_json(json.dumps(models))
        return

    source = str(result.path) if result.path else "built-in defaults"
    table = Table(title=f"Embedding models ({result.outcome.value}: {source})")
    table.add_column("Sector", style="cyan")
    table.add_column("Provider", style="magenta")
    table.add_column("Model", style="green")
    for sector, providers in models.items():
        for provider, model in providers.items():
            table.add_row(Text(sector), Text(provider), Text(model))
    console.print(table)

    if result.error:
        console.print(result.error, style="red", markup=False, soft_wrap=True)


@app.command("get")
def get_model(
    sector: str = typer.Argument(..., help="Memory sector, e.g. episodic"),
    provider: str = typer.Argument(..., help="Embedding provider, e.g. openai"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to models.yml"
    ),
    explain: bool = typer.Option(False, "--explain", help="Show which fallback step was used"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Resolve the model for a sector and provider."""
    resolver = ModelResolver(_build_settings(config, debug))
    resolution = resolver.resolve(sector, provider)

    if explain:
        console.print(f"{escape(resolution.model)} [dim]({resolution.tier.value})[/dim]")
    else:
        console.print(resolution.model, markup=False, highlight=False, soft_wrap=True)


@app.command("locate")
def locate(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to models.yml"
    ),
) -> None:
    """List candidate models.yml paths and the one that would be used."""
    settings = Settings()
    if config:
        settings.MODELS_FILE = config

    found = locate_models_file(settings)
    for path in candidate_paths(settings):
        marker = "[green]*[/green]" if path == found else " "
        console.print(f"{marker} {escape(str(path))}", highlight=False, soft_wrap=True)

    if found is None:
        console.print("[yellow]No models.yml found, built-in defaults apply[/yellow]")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Sector Models version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
