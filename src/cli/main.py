"""CLI principal (Typer).

Cada comando construye sus fixtures, ejecuta un demo y escribe su salida
literal en stdout. Los logs van a stderr (`core.logger`).
"""

from __future__ import annotations

import contextlib
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import (
    build_menu_table,
    build_registry_table,
    build_variants_table,
    print_banner,
    print_section,
)
from core.config import AppSettings
from core.domain.models import DemoFixtures
from core.errors import FixturesError, UnknownComponentError
from core.fixtures import resolve_fixtures
from core.logger import configure_logging
from patterns.decorator import recipe_condiments, run_decorator_demo
from patterns.null_object import VARIANTS, run_null_object_demo
from patterns.strategy import run_strategy_demo

app = typer.Typer(no_args_is_help=True, help="Decorator, Strategy and Null Object pattern demos.")

_err_console = Console(stderr=True)


class VariantName(str, Enum):
    PROBLEM = "problem"
    SOLUTION = "solution"
    PATTERN = "pattern"
    ANTI_PATTERN = "anti-pattern"


class CliState:
    """Estado por invocación: settings, consola y fixtures (cargadas al usarse)."""

    def __init__(self, settings: AppSettings, console: Console, fixtures_path: Path | None) -> None:
        self.settings = settings
        self.console = console
        self._fixtures_path = fixtures_path
        self._fixtures: DemoFixtures | None = None

    @property
    def fixtures(self) -> DemoFixtures:
        if self._fixtures is None:
            try:
                self._fixtures = resolve_fixtures(self.settings, path=self._fixtures_path)
            except FixturesError as exc:
                _err_console.print(str(exc), style="red", markup=False, highlight=False)
                raise typer.Exit(code=1) from exc
        return self._fixtures


@contextlib.contextmanager
def _component_errors() -> Iterator[None]:
    try:
        yield
    except UnknownComponentError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _state(ctx: typer.Context) -> CliState:
    return ctx.find_object(CliState)  # type: ignore[return-value]


@app.callback()
def main(
    ctx: typer.Context,
    fixtures: Optional[Path] = typer.Option(
        None,
        "--fixtures",
        help="JSON file replacing the built-in sample data.",
        dir_okay=False,
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR (logs go to stderr).",
    ),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"Invalid configuration: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=1) from exc

    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    console = Console()
    ctx.obj = CliState(settings=settings, console=console, fixtures_path=fixtures)

    if settings.show_banner and not no_banner:
        print_banner(console)


@app.command()
def decorator(
    ctx: typer.Context,
    recipe: Optional[str] = typer.Option(None, "--recipe", help="Start from a named recipe (see `menu`)."),
    add: Optional[List[str]] = typer.Option(None, "--add", help="Condiment to add; repeatable, applied in order."),
) -> None:
    """Wrap an espresso with condiments and print description and cost."""

    state = _state(ctx)
    fixture = state.fixtures.decorator

    orders = None
    if recipe or add:
        with _component_errors():
            chain = recipe_condiments(fixture.recipes, recipe) if recipe else []
        orders = [chain + list(add or [])]

    with _component_errors():
        run_decorator_demo(fixture, state.console, orders=orders)


@app.command()
def menu(ctx: typer.Context) -> None:
    """Show every recipe with its ingredients and cost."""

    state = _state(ctx)
    state.console.print(build_menu_table(state.fixtures.decorator))


@app.command()
def strategy(
    ctx: typer.Context,
    filter_names: Optional[List[str]] = typer.Option(
        None,
        "--filter",
        help="Filter to apply (sepia, bw, distortion, none); repeatable.",
    ),
) -> None:
    """Switch the filter strategy at runtime and apply it to a test image."""

    state = _state(ctx)
    with _component_errors():
        run_strategy_demo(state.fixtures.strategy, state.console, filters=filter_names or None)


@app.command(name="null-object")
def null_object(
    ctx: typer.Context,
    variant: VariantName = typer.Option(VariantName.PATTERN, "--variant", help="Which variant to run."),
    user_id: Optional[List[int]] = typer.Option(None, "--user-id", help="User to look up; repeatable."),
) -> None:
    """Look users up and print their tax report.

    The `problem` variant crashes on a missing user; that is the point.
    """

    state = _state(ctx)
    run_null_object_demo(
        state.fixtures.null_object,
        state.console,
        variant=variant.value,
        user_ids=user_id or None,
        currency=state.settings.currency,
        debug=state.settings.debug_dump,
    )


@app.command()
def registry(ctx: typer.Context) -> None:
    """Show the taxes registry and the Null Object variants."""

    state = _state(ctx)
    state.console.print(build_registry_table(state.fixtures.null_object.records, currency=state.settings.currency))
    state.console.print(build_variants_table({name: v.summary for name, v in VARIANTS.items()}))


@app.command(name="all")
def run_all(
    ctx: typer.Context,
    variant: VariantName = typer.Option(VariantName.PATTERN, "--variant", help="Null Object variant to run."),
) -> None:
    """Run every demo, one after another."""

    state = _state(ctx)
    fixtures = state.fixtures

    print_section(state.console, "Decorator")
    with _component_errors():
        run_decorator_demo(fixtures.decorator, state.console)

    print_section(state.console, "Strategy")
    with _component_errors():
        run_strategy_demo(fixtures.strategy, state.console)

    print_section(state.console, f"Null Object ({variant.value})")
    run_null_object_demo(
        fixtures.null_object,
        state.console,
        variant=variant.value,
        currency=state.settings.currency,
        debug=state.settings.debug_dump,
    )


def run() -> None:
    app()
