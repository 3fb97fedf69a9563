"""CLI application using Typer."""

import typer
from rich.console import Console
from rich.table import Table

from arganalyzer.client import AnalysisClient
from arganalyzer.config import get_config
from arganalyzer.errors import AnalysisClientError, get_error_message, to_validation_result
from arganalyzer.utils.logging_config import setup_logging

app = typer.Typer(
    name="arganalyzer",
    help="Analyze arguments, check their validity and spot logical fallacies",
    no_args_is_help=True,
)
console = Console()


def get_client() -> AnalysisClient:
    """Build a client from the current configuration."""
    config = get_config()
    setup_logging(config.log_file, config.log_level, json_logs=config.log_json)
    return AnalysisClient(config)


def _require_text(text: str) -> str:
    if not text.strip():
        console.print("[red]Please enter some text first.[/red]")
        raise typer.Exit(1)
    return text


def _fail(error: Exception) -> None:
    console.print(f"[red]Error: {get_error_message(error)}[/red]")
    raise typer.Exit(1)


@app.command()
def analyze(text: str = typer.Argument(..., help="Argument text to analyze")):
    """Break an argument down into its claim and supporting arguments."""
    text = _require_text(text)
    with get_client() as client:
        try:
            result = client.analyze(text)
        except AnalysisClientError as e:
            _fail(e)

    console.print(f"[bold blue]Main claim:[/bold blue] {result.main_claim}")
    console.print("[bold blue]Supporting arguments:[/bold blue]")
    if result.supporting_arguments:
        for i, argument in enumerate(result.supporting_arguments, 1):
            console.print(f"  {i}. {argument}")
    else:
        console.print("  [dim]none[/dim]")
    console.print(f"[bold blue]Structure:[/bold blue] {result.structure}")
    console.print(f"[bold blue]Strength:[/bold blue] {result.strength}")


@app.command()
def validate(text: str = typer.Argument(..., help="Argument text to validate")):
    """Check whether an argument is logically valid."""
    text = _require_text(text)
    with get_client() as client:
        try:
            result = client.validate(text)
        except AnalysisClientError as e:
            result = to_validation_result(e)

    if result.is_valid:
        console.print("[bold green]Valid argument[/bold green]")
    else:
        console.print("[bold red]Invalid argument[/bold red]")
    console.print(result.analysis)
    console.print(f"[dim]{result.explanation}[/dim]")


@app.command()
def fallacies(text: str = typer.Argument(..., help="Text to check for fallacies")):
    """List the logical fallacies found in a text."""
    text = _require_text(text)
    with get_client() as client:
        try:
            detected = client.detect_fallacies(text)
        except AnalysisClientError as e:
            _fail(e)

    if not detected:
        console.print("[green]No fallacies detected.[/green]")
        return

    table = Table(title=f"Detected Fallacies ({len(detected)})")
    table.add_column("Type", style="cyan")
    table.add_column("Location")
    table.add_column("Description")
    table.add_column("Explanation")

    for fallacy in detected:
        table.add_row(fallacy.type, fallacy.location, fallacy.description, fallacy.explanation)

    console.print(table)


@app.command()
def chat(message: str = typer.Argument(..., help="Message for the assistant")):
    """Ask the assistant a question."""
    message = _require_text(message)
    with get_client() as client:
        try:
            response = client.send_chat_message(message)
        except AnalysisClientError as e:
            _fail(e)

    console.print(f"[dim]{response.timestamp:%Y-%m-%d %H:%M:%S}[/dim]")
    console.print(response.message)


if __name__ == "__main__":
    app()
