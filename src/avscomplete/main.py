import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from avscomplete.completion.service import CompletionService
from avscomplete.config import CompletionConfig, load_config
from avscomplete.core.loader import CompletionIndices
from avscomplete.domain.exceptions import VocabularyError
from avscomplete.logger import get_logger, setup_logger

console = Console()

cli = typer.Typer(
    name="avscomplete",
    help="Context-aware completions for AviSynth-style scripts",
    epilog="""
    Examples:
    $ avscomplete complete "x = clip." Tr
    $ avscomplete complete "function Foo(" --json
    $ avscomplete check --vocabulary my_completions.json
    """,
    add_completion=False,
)

_state: dict[str, CompletionConfig] = {}


@cli.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Configure logging from the environment before any command runs."""
    config = load_config()
    setup_logger(log_file=config.log_file, log_level="DEBUG" if debug else config.log_level)
    _state["config"] = config


def _build_service(vocabulary: Optional[Path]) -> CompletionService:
    config = _state.get("config") or load_config()
    path = vocabulary or config.vocabulary_path
    try:
        return CompletionService.from_path(path, config.wiki_base_url)
    except VocabularyError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=2)


@cli.command()
def complete(
    line_prefix: str = typer.Argument(..., help="Text of the line before the typed fragment"),
    typed_prefix: str = typer.Argument("", help="Fragment already typed"),
    vocabulary: Optional[Path] = typer.Option(None, "--vocabulary", "-v", help="Vocabulary JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print editor suggestion dictionaries as JSON"),
):
    """Print the completions for a cursor context."""
    logger = get_logger("cli")
    service = _build_service(vocabulary)
    completions = service.get_completions(line_prefix, typed_prefix)
    logger.debug("complete({!r}, {!r}) -> {}", line_prefix, typed_prefix, completions)

    if as_json:
        payload = None if completions is None else [c.to_suggestion() for c in completions]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if completions is None:
        console.print("[dim]no completions[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Completion")
    table.add_column("Type")
    table.add_column("Returns")
    table.add_column("Description")
    for completion in completions:
        table.add_row(
            escape(completion.insertion),
            completion.kind.value,
            escape(completion.left_label or ""),
            escape(completion.description),
        )
    console.print(table)


@cli.command()
def check(
    vocabulary: Optional[Path] = typer.Option(None, "--vocabulary", "-v", help="Vocabulary JSON file"),
):
    """Build the indices and report definitions that did not load cleanly."""
    service = _build_service(vocabulary)
    indices: CompletionIndices = service.indices

    for name, count in indices.summary().items():
        console.print(f"{name}: {count} entries")

    errors = 0
    for diagnostic in indices.diagnostics:
        style = "red" if diagnostic.is_error else "yellow"
        console.print(
            f"[{style}]{diagnostic.kind.value}[/{style}] "
            f"{escape(diagnostic.collection)}/{escape(diagnostic.name)}: {escape(diagnostic.message)}",
            highlight=False,
        )
        errors += diagnostic.is_error

    if errors:
        console.print(f"[red]{errors} definition(s) did not load cleanly[/red]")
        raise typer.Exit(code=1)
    console.print("[green]vocabulary OK[/green]")


@cli.command()
def playground(
    vocabulary: Optional[Path] = typer.Option(None, "--vocabulary", "-v", help="Vocabulary JSON file"),
):
    """Open an interactive line editor with live completions."""
    from avscomplete.presentation.app import PlaygroundApp

    PlaygroundApp(_build_service(vocabulary)).run()


if __name__ == "__main__":
    cli()
