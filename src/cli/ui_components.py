"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Las salidas de los demos son texto literal; las tablas y paneles solo
  decoran alrededor.
- Los datos de las fixtures entran en las celdas como `Text`, nunca como markup.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from core.domain.models import DecoratorFixture, TaxRecord
from core.domain.reports import format_price
from patterns.decorator import build_beverage


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("PATTERN DEMOS", style="bold cyan")
    subtitle = Text("Decorator • Strategy • Null Object", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_section(console: Console, title: str) -> None:
    console.print(Rule(title, style="cyan"))


def build_menu_table(fixture: DecoratorFixture) -> Table:
    """Tabla con cada receta, sus ingredientes y su precio."""

    table = Table(title="Coffee House Menu")
    table.add_column("Recipe", style="cyan", no_wrap=True)
    table.add_column("Ingredients", style="white")
    table.add_column("Cost", style="green", justify="right")
    for name, chain in fixture.recipes.items():
        beverage = build_beverage(fixture.base, fixture.condiments, chain)
        table.add_row(Text(name), Text(beverage.description()), Text(format_price(beverage.cost())))
    return table


def build_registry_table(records: Mapping[int, TaxRecord], *, currency: str = "RUB") -> Table:
    table = Table(title="Taxes Registry")
    table.add_column("User ID", style="cyan", justify="right")
    table.add_column("Account", style="white")
    table.add_column(Text(f"Income tax ({currency})"), style="green", justify="right")
    table.add_column(Text(f"Property tax ({currency})"), style="green", justify="right")
    for user_id, record in sorted(records.items()):
        table.add_row(
            Text(str(user_id)),
            Text(record.account),
            Text(str(record.income_tax)),
            Text(str(record.property_tax)),
        )
    return table


def build_variants_table(variants: Mapping[str, str]) -> Table:
    table = Table(title="Null Object variants")
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Behavior", style="white")
    for name, summary in variants.items():
        table.add_row(Text(name), Text(summary))
    return table
