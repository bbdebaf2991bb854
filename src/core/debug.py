"""Volcado de depuración de un resultado de búsqueda.

Equivalent of a `var_dump` between markers: `None`, a real entity and a
null entity must each be recognisable in the output.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.pretty import pretty_repr


def debug_dump(console: Console, value: Any) -> None:
    console.out("DEBUG===>", highlight=False)
    console.out(pretty_repr(value), highlight=False)
    console.out("<===DEBUG", highlight=False)
