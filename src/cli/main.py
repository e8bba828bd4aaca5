"""CLI principal (Typer).

La CLI solo parsea argumentos y pinta resultados; toda la lógica vive en
`CloudService` y en los objetos de dominio.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.api import build_context
from adapters.json_exporter import export_json
from cli import doctor
from cli.doctor import load_settings
from cli.ui_components import (
    build_templates_table,
    build_virtual_appliances_table,
    build_virtual_datacenters_table,
    build_virtual_machines_table,
)
from core import predicates
from core.domain.options import VirtualMachineTemplateOptions
from core.domain.wrapper import DomainWrapper
from core.errors import AbiquoError
from core.log import configure_logging
from core.services.cloud_service import CloudService

app = typer.Typer(no_args_is_help=True, help="Abiquo cloud client: virtual datacenters, appliances, VMs, templates.")
vdc_app = typer.Typer(no_args_is_help=True, help="Virtual datacenters.")
vapp_app = typer.Typer(no_args_is_help=True, help="Virtual appliances.")
vm_app = typer.Typer(no_args_is_help=True, help="Virtual machines.")
template_app = typer.Typer(no_args_is_help=True, help="Virtual machine templates.")

app.add_typer(vdc_app, name="vdc")
app.add_typer(vapp_app, name="vapp")
app.add_typer(vm_app, name="vm")
app.add_typer(template_app, name="template")
app.add_typer(doctor.app, name="doctor")

_console = Console()

OutputOption = typer.Option(None, "--output", "-o", help="Write the results as JSON to this path.")
NameOption = typer.Option(None, "--name", "-n", help="Only names containing this text.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log INFO messages."),
    debug: bool = typer.Option(False, "--debug", help="Log DEBUG messages (HTTP requests)."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Structured JSON logs on stderr."),
) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    configure_logging(level=level, json_format=json_logs)


@contextmanager
def _cloud_service() -> Iterator[CloudService]:
    settings = load_settings(_console)
    try:
        with build_context(settings) as context:
            yield context.cloud_service()
    except AbiquoError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _emit(objects: Iterable[DomainWrapper], table: Table, output: Path | None) -> None:
    if output is not None:
        path = export_json(objects=objects, output_path=output)
        _console.print(f"[green]Saved JSON to:[/green] {path}")
        return
    _console.print(table)


def _all_of(*filters):
    active = [f for f in filters if f is not None]
    if not active:
        return None
    return lambda obj: all(f(obj) for f in active)


@vdc_app.command("list")
def list_virtual_datacenters(
    enterprise: int | None = typer.Option(None, "--enterprise", "-e", help="Enterprise ID."),
    name: str | None = NameOption,
    output: Path | None = OutputOption,
) -> None:
    """List virtual datacenters, optionally for one enterprise."""

    name_filter = predicates.name_contains(name) if name else None
    with _cloud_service() as service:
        if enterprise is None:
            vdcs = list(service.list_virtual_datacenters(name_filter))
        else:
            ent = service.get_enterprise(enterprise)
            if ent is None:
                _console.print(f"[yellow]Enterprise {enterprise} not found[/yellow]")
                raise typer.Exit(code=1)
            vdcs = list(service.list_virtual_datacenters_for_enterprise(ent))
            if name_filter is not None:
                vdcs = [vdc for vdc in vdcs if name_filter(vdc)]
    _emit(vdcs, build_virtual_datacenters_table(vdcs), output)


@vdc_app.command("get")
def get_virtual_datacenter(virtual_datacenter_id: int = typer.Argument(..., help="Virtual datacenter ID.")) -> None:
    """Show one virtual datacenter."""

    with _cloud_service() as service:
        vdc = service.get_virtual_datacenter(virtual_datacenter_id)
    if vdc is None:
        _console.print(f"[yellow]Virtual datacenter {virtual_datacenter_id} not found[/yellow]")
        raise typer.Exit(code=1)
    _console.print(build_virtual_datacenters_table([vdc]))


@vapp_app.command("list")
def list_virtual_appliances(name: str | None = NameOption, output: Path | None = OutputOption) -> None:
    """List virtual appliances across all virtual datacenters."""

    name_filter = predicates.name_contains(name) if name else None
    with _cloud_service() as service:
        vapps = list(service.list_virtual_appliances(name_filter))
    _emit(vapps, build_virtual_appliances_table(vapps), output)


@vm_app.command("list")
def list_virtual_machines(
    name: str | None = NameOption,
    state: str | None = typer.Option(None, "--state", "-s", help="Only VMs in this state (e.g. ON, OFF)."),
    output: Path | None = OutputOption,
) -> None:
    """List every virtual machine visible to the user."""

    vm_filter = _all_of(
        predicates.name_contains(name) if name else None,
        predicates.states(state) if state else None,
    )
    with _cloud_service() as service:
        vms = list(service.list_virtual_machines(vm_filter))
    _emit(vms, build_virtual_machines_table(vms), output)


@template_app.command("list")
def list_templates(
    enterprise_id: int = typer.Argument(..., help="Enterprise ID."),
    repository_id: int = typer.Argument(..., help="Datacenter repository ID."),
    hypervisor: str | None = typer.Option(None, "--hypervisor", help="Only templates compatible with this hypervisor."),
    name: str | None = NameOption,
    output: Path | None = OutputOption,
) -> None:
    """List the templates of an enterprise in a datacenter repository."""

    options = VirtualMachineTemplateOptions(hypervisor_type=hypervisor) if hypervisor else None
    name_filter = predicates.name_contains(name) if name else None
    with _cloud_service() as service:
        ent = service.get_enterprise(enterprise_id)
        if ent is None:
            _console.print(f"[yellow]Enterprise {enterprise_id} not found[/yellow]")
            raise typer.Exit(code=1)
        templates = list(ent.list_templates(repository_id, predicate=name_filter, options=options))
    _emit(templates, build_templates_table(templates), output)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
