"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.cloud import VirtualAppliance, VirtualDatacenter, VirtualMachine
from core.domain.templates import VirtualMachineTemplate


def _cell(value: object) -> str:
    return "-" if value is None else str(value)


def print_banner(console: Console, endpoint: str) -> None:
    title = Text("ABIQUO-D2", style="bold cyan")
    subtitle = Text(endpoint, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_virtual_datacenters_table(vdcs: Iterable[VirtualDatacenter]) -> Table:
    table = Table(title="Virtual Datacenters")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Hypervisor", style="magenta")
    table.add_column("Enterprise", style="dim")
    for vdc in vdcs:
        table.add_row(_cell(vdc.id), _cell(vdc.name), _cell(vdc.hypervisor_type), _cell(vdc.enterprise_id))
    return table


def build_virtual_appliances_table(vapps: Iterable[VirtualAppliance]) -> Table:
    table = Table(title="Virtual Appliances")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("State", style="green")
    for vapp in vapps:
        table.add_row(_cell(vapp.id), _cell(vapp.name), _cell(vapp.state))
    return table


def build_virtual_machines_table(vms: Iterable[VirtualMachine]) -> Table:
    table = Table(title="Virtual Machines")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Label", style="white")
    table.add_column("State", style="green")
    table.add_column("CPU", justify="right")
    table.add_column("RAM (MB)", justify="right")
    for vm in vms:
        table.add_row(_cell(vm.id), _cell(vm.name), _cell(vm.label), _cell(vm.state), _cell(vm.cpu), _cell(vm.ram))
    return table


def build_templates_table(templates: Iterable[VirtualMachineTemplate]) -> Table:
    table = Table(title="Virtual Machine Templates")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Disk format", style="magenta")
    table.add_column("Description", style="dim")
    for template in templates:
        table.add_row(
            _cell(template.id),
            _cell(template.name),
            _cell(template.disk_format_type),
            _cell(template.description),
        )
    return table
