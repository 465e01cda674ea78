#!/usr/bin/env python3
"""
Dictcase CLI

Command-line host for running text handlers: asks for the dictionary,
input and result file names, resolves a handler from the registry and
runs it.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .constants import DEFAULT_ENCODING, DEFAULT_HANDLER, HANDLER_PATTERN, MAX_FILE_SIZE
from .errors import DictcaseError
from .handlers.registry import HandlerRegistry, default_registry
from .pipeline.orchestrator import ProcessingStats, load_config

console = Console()


def _validate_name(ctx, param, value):
    """Reject blank file names."""
    if value is None or not value.strip():
        raise click.BadParameter("File name must not be blank")
    return value.strip()


@click.group()
@click.version_option(version=__version__)
def cli():
    """Dictcase - upper-case dictionary words and split text into files."""
    pass


@cli.command()
@click.option(
    "--dictionary", "-d",
    prompt="Path to the dictionary file (extension may be omitted)",
    callback=_validate_name,
    help="Word list file, one word per line"
)
@click.option(
    "--input", "-i", "input_path",
    prompt="Path to the text file (extension may be omitted)",
    callback=_validate_name,
    help="Text file to process"
)
@click.option(
    "--output", "-o",
    prompt="Base name of the result files",
    callback=_validate_name,
    help="Result files are named <output>1.txt, <output>2.txt, ..."
)
@click.option(
    "--handler", "-H",
    default=None,
    help=f"Handler to run (default: {DEFAULT_HANDLER}; asks when several exist)"
)
@click.option(
    "--handlers-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Extra directory scanned for *_handler.py modules"
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Custom configuration file"
)
def run(dictionary, input_path, output, handler, handlers_dir, config):
    """Process a text file against a dictionary."""
    try:
        registry = _build_registry(config, handlers_dir)
        if handler is None:
            handler = _select_handler(registry)
        text_handler = registry.create(handler, config_path=config)
    except DictcaseError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    console.print(f"\n[bold]Handler:[/bold] {handler}")
    console.print(f"[bold]Dictionary:[/bold] {dictionary}")
    console.print(f"[bold]Input:[/bold] {input_path}")
    console.print(f"[bold]Output:[/bold] {output}\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing text...", total=None)

        try:
            stats = text_handler.run(dictionary, input_path, output)
        except (DictcaseError, OSError) as e:
            console.print(f"\n[red]Error: {e}[/red]")
            sys.exit(1)

        progress.update(task, completed=True)

    console.print("\n[green]Done![/green]\n")
    if isinstance(stats, ProcessingStats):
        _display_results(stats)


@cli.command()
@click.option(
    "--handlers-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Extra directory scanned for *_handler.py modules"
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Custom configuration file"
)
def handlers(handlers_dir, config):
    """List available handlers."""
    try:
        registry = _build_registry(config, handlers_dir)
    except DictcaseError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    _display_handlers(registry)


@cli.command()
@click.argument("text")
@click.option(
    "--dictionary", "-d",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Word list file, one word per line"
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Custom configuration file"
)
def preview(text, dictionary, config):
    """Show TEXT with dictionary words upper-cased (no files written)."""
    from .filters.case_filter import CaseFilter
    from .loaders.dictionary_loader import load_dictionary

    try:
        io_config = load_config(config).get("io") or {}
        encoding = io_config.get("encoding", DEFAULT_ENCODING)
        words = load_dictionary(
            dictionary,
            max_size=io_config.get("max_file_size", MAX_FILE_SIZE),
            encoding=encoding
        )
        case_filter = CaseFilter(words, encoding=encoding)
    except DictcaseError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    click.echo(case_filter.transform_text(text))
    console.print(f"[dim]{case_filter.count_words(text)} words upper-cased[/dim]")


def _build_registry(config: Optional[str], handlers_dir: Optional[str]) -> HandlerRegistry:
    """Registry with the built-in handler and any configured handler directory."""
    handlers_config = load_config(config).get("handlers", {}) or {}
    directory = handlers_dir or handlers_config.get("directory")
    pattern = handlers_config.get("pattern", HANDLER_PATTERN)
    return default_registry(directory, pattern)


def _select_handler(registry: HandlerRegistry) -> str:
    """Ask the user to pick a handler when more than one is registered."""
    names = registry.names()
    if len(names) == 1:
        return names[0]

    console.print("Select one of the available handlers:")
    _display_handlers(registry)
    choice = click.prompt(
        "Handler number",
        type=click.IntRange(1, len(names))
    )
    return names[choice - 1]


def _display_handlers(registry: HandlerRegistry) -> None:
    """Display registered handlers."""
    table = Table(title="Available Handlers")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Description")

    for i, name in enumerate(registry.names(), 1):
        table.add_row(str(i), name, registry.describe(name))

    console.print(table)


def _display_results(stats: ProcessingStats) -> None:
    """Display processing results."""
    console.print(f"[bold]Dictionary words:[/bold] {stats.dictionary_words:,}")
    console.print(f"[bold]Characters read:[/bold] {stats.characters_read:,}")
    console.print(f"[bold]Words upper-cased:[/bold] {stats.words_replaced:,}\n")

    table = Table(title="Result Files")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Output File")

    for i, path in enumerate(stats.output_files, 1):
        table.add_row(str(i), path)

    console.print(table)
    console.print(f"\n[bold]Total lines:[/bold] {stats.lines_written:,}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
