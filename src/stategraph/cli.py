"""CLI interface for stategraph using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from stategraph import __description__, __version__
from stategraph.automata import FiniteAutomaton
from stategraph.config import LogLevel, OutputFormat, StategraphConfig, load_config
from stategraph.errors import StategraphError
from stategraph.export import DiagramExporter
from stategraph.loader import load_automaton

app = typer.Typer(
    name="stategraph",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _setup_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else _LOG_LEVELS[LogLevel(level).value],
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_settings(config: Path | None, verbose: bool) -> StategraphConfig:
    """Load configuration and install logging, exiting on invalid config."""
    try:
        stategraph_config = load_config(config)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _setup_logging(stategraph_config.logging.level, verbose)
    return stategraph_config


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"stategraph version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """stategraph - Finite-state automaton graphs rendered as textual diagrams."""


@app.command()
def render(
    automaton_file: Annotated[
        Path,
        typer.Argument(help="Automaton document (JSON)")
    ],
    format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format (default: from config, else dot)")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path, relative paths resolve against output.dir (default: stdout)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .stategraph.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Render an automaton document as a diagram."""
    stategraph_config = _load_settings(config, verbose)

    try:
        automaton = load_automaton(automaton_file)
        exporter = DiagramExporter(stategraph_config)
        if out:
            written = exporter.export(automaton, Path(stategraph_config.output.dir) / out, format)
            console.print(f"[green]OK[/green] Diagram written to {written}")
        else:
            typer.echo(exporter.render(automaton, format), nl=False)
    except StategraphError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def analyze(
    automaton_file: Annotated[
        Path,
        typer.Argument(help="Edge-list automaton document (JSON, kind dfa or nfa)")
    ],
    state: Annotated[
        Optional[str],
        typer.Option("--state", "-s", help="Only analyze this state")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .stategraph.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Show reachability and productivity of automaton states."""
    _load_settings(config, verbose)

    try:
        automaton = load_automaton(automaton_file)
    except StategraphError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not isinstance(automaton, FiniteAutomaton):
        err_console.print("[red]Error:[/red] Analysis requires a dfa or nfa document")
        raise typer.Exit(1)

    states = automaton.states
    if state is not None:
        states = [s for s in states if str(s) == state]
        if not states:
            err_console.print(f"[red]Error:[/red] State '{escape(state)}' not found")
            raise typer.Exit(1)

    initial = set(automaton.initial_states)
    final = set(automaton.final_states)

    table = Table(title=f"{type(automaton).__name__} state analysis")
    table.add_column("State", style="cyan")
    table.add_column("Initial")
    table.add_column("Final")
    table.add_column("Reachable")
    table.add_column("Productive")

    for s in states:
        reached = sorted(str(r) for r in automaton.reachable(s))
        table.add_row(
            str(s),
            "yes" if s in initial else "",
            "yes" if s in final else "",
            ", ".join(reached) or "-",
            "[green]yes[/green]" if automaton.is_productive(s) else "[red]no[/red]",
        )

    console.print(table)


@app.command()
def formats() -> None:
    """List available diagram formats."""
    exporter = DiagramExporter(load_config())

    table = Table(title="Diagram formats")
    table.add_column("Format", style="cyan")
    table.add_column("Extension")
    for name, renderer in exporter.renderers.items():
        table.add_row(name, renderer.get_file_extension())
    console.print(table)


if __name__ == "__main__":
    app()
