"""Terminal rendering of login and upload outcomes."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from docuflow.outcomes import (
    AuthError,
    MissingToken,
    NetworkError,
    Outcome,
    Success,
    ValidationError,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_LOGIN_REQUIRED = 2


def show_success(message: str, console: Console):
    console.print(f"[green]{escape(message)}[/green]")


def show_error(message: str, console: Console):
    console.print(f"[red]{escape(message)}[/red]")


def alert(message: str, console: Console):
    """Modal-style notice for failures the user has to acknowledge."""
    console.print(Panel(escape(message), title="Connection error", border_style="red", expand=False))


def redirect_to_login(message: str, console: Console):
    console.print(f"[yellow]{escape(message)}[/yellow]")
    console.print("Run [bold]docuflow login[/bold] to start a new session.")


def print_uploaded_file(outcome: Success, console: Console):
    """Show the uploaded file with its size in KB."""
    table = Table(title="Uploaded")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_row(escape(outcome.filename or "-"), outcome.size_kb or "-")
    console.print(table)


def render_outcome(outcome: Outcome, console: Console) -> int:
    """
    Print an outcome and return the matching exit code.

    Success and the inline errors share one line each; network failures get
    the blocking panel; a missing token points the user back to login.
    """
    if isinstance(outcome, Success):
        show_success(outcome.message, console)
        if outcome.filename:
            print_uploaded_file(outcome, console)
        return EXIT_OK

    if isinstance(outcome, MissingToken):
        redirect_to_login(outcome.message, console)
        return EXIT_LOGIN_REQUIRED

    if isinstance(outcome, NetworkError):
        alert(outcome.message, console)
        return EXIT_FAILED

    if isinstance(outcome, (AuthError, ValidationError)):
        show_error(outcome.message, console)
        return EXIT_FAILED

    raise TypeError(f"Unknown outcome: {outcome!r}")
