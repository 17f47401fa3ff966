"""CLI entrypoint for the DocuFlow client."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from docuflow.config import ClientConfig, Env, load_client_config
from docuflow.store import FileCredentialStore
from docuflow.views import EXIT_FAILED, EXIT_OK, render_outcome

app = typer.Typer(
    name="docuflow",
    help="Log in to a DocuFlow backend and upload files",
    no_args_is_help=True,
)
console = Console()

# Default config path (relative to package root: src/docuflow/cli.py -> repo root)
PACKAGE_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CLIENT_CONFIG = PACKAGE_ROOT / "configs" / "client.yaml"

EnvOption = Annotated[Env, typer.Option(help="Environment: prod or dev")]
ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Client config path")]


def _load(env: Env, config: Path) -> tuple[ClientConfig, FileCredentialStore]:
    client_config = load_client_config(config, env)
    return client_config, FileCredentialStore.from_config(client_config.store)


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option(envvar="DOCUFLOW_LOG_LEVEL", help="Logging level")
    ] = "WARNING",
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def login(
    username: Annotated[str, typer.Option(prompt=True, help="Account username")],
    password: Annotated[str, typer.Option(prompt=True, hide_input=True, help="Account password")],
    env: EnvOption = "dev",
    config: ConfigOption = DEFAULT_CLIENT_CONFIG,
):
    """Log in and store the session token."""
    from docuflow.api import Authenticator, Credential

    client_config, store = _load(env, config)
    console.print(f"[bold]Logging in to {escape(client_config.base_url)}...[/bold]")

    outcome = Authenticator(store, client_config).authenticate(Credential(username, password))
    code = render_outcome(outcome, console)

    if code == EXIT_OK:
        console.print("Next: [bold]docuflow upload FILE[/bold]")
    raise typer.Exit(code=code)


@app.command()
def upload(
    file: Annotated[Path, typer.Argument(help="File to upload")],
    env: EnvOption = "dev",
    config: ConfigOption = DEFAULT_CLIENT_CONFIG,
):
    """Upload a single file using the stored session token."""
    from docuflow.api import UploadSession

    client_config, store = _load(env, config)
    console.print(f"[bold]Uploading {escape(file.name)} to {escape(client_config.base_url)}...[/bold]")

    outcome = UploadSession(store, client_config).upload(file)
    raise typer.Exit(code=render_outcome(outcome, console))


@app.command()
def logout(
    env: EnvOption = "dev",
    config: ConfigOption = DEFAULT_CLIENT_CONFIG,
):
    """Forget the stored session token."""
    _, store = _load(env, config)
    store.clear()
    console.print("[green]Session closed.[/green]")


@app.command()
def probe(
    env: EnvOption = "dev",
    config: ConfigOption = DEFAULT_CLIENT_CONFIG,
):
    """Check whether the backend answers on its health endpoints."""
    from docuflow.probe import probe_backend

    client_config, _ = _load(env, config)
    console.print(f"[bold]Checking backend at {escape(client_config.base_url)}...[/bold]")

    url = probe_backend(
        client_config.base_url,
        client_config.health_paths,
        timeout=client_config.probe_timeout,
    )
    if url is None:
        console.print(f"[red]Backend not available.[/red] Is it running at {escape(client_config.base_url)}?")
        raise typer.Exit(code=EXIT_FAILED)

    console.print(f"[green]Backend available at {escape(url)}[/green]")


@app.command()
def version():
    """Show version information."""
    from docuflow import __version__

    console.print(f"docuflow version {__version__}")


if __name__ == "__main__":
    app()
