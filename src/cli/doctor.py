"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.api import build_context
from cli.ui_components import print_banner
from core.config import AppSettings, write_user_env_vars
from core.errors import AbiquoError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def load_settings(console: Console) -> AppSettings:
    """Carga la configuración o sale con código 1 si es inválida."""

    try:
        return AppSettings()
    except PydanticValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        console.print("Run `abiquo-d2 doctor setup` or fix the ABIQUO_D2_* variables.")
        raise typer.Exit(code=1) from exc


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """List virtual datacenters as a cheap authenticated round trip."""

    try:
        with build_context(settings) as context:
            vdcs = list(context.cloud_service().list_virtual_datacenters())
        return True, f"{len(vdcs)} virtual datacenters visible"
    except AbiquoError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings(_console)
    print_banner(_console, settings.base_url)

    table = Table(title="abiquo-d2 Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Endpoint", "OK", settings.base_url)
    if settings.has_credentials:
        table.add_row("Credentials", "OK", f"identity={settings.identity}")
    else:
        table.add_row("Credentials", "MISSING", "Run `abiquo-d2 doctor setup`")
    table.add_row("TLS verification", "OK" if settings.verify_tls else "DISABLED", "")

    ok_api, detail_api = _check_api(settings)
    table.add_row("API round trip", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)
    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores endpoint and credentials in the user config .env)."""

    endpoint = typer.prompt("API endpoint", default="https://localhost/api", show_default=True).strip()
    identity = typer.prompt("User").strip()
    credential = typer.prompt("Password", hide_input=True, confirmation_prompt=False).strip()

    if not endpoint or not identity:
        raise typer.BadParameter("endpoint and user are required")

    env_path = write_user_env_vars(
        {
            "ABIQUO_D2_ENDPOINT": endpoint,
            "ABIQUO_D2_IDENTITY": identity,
            "ABIQUO_D2_CREDENTIAL": credential,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
