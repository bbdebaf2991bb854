"""Errores del proyecto.

The fatal `AttributeError` of the Null Object "problem" variant is not
modelled here on purpose: it is a plain programming error and must reach
the interpreter untouched.
"""

from __future__ import annotations


class DemoError(Exception):
    """Base class for errors raised by the demos and their fixtures."""


class FixturesError(DemoError):
    """A fixtures file could not be read, parsed or validated."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid fixtures file {path}: {reason}")


class UnknownComponentError(DemoError):
    """A condiment, recipe or filter was requested by a name nobody defines."""

    def __init__(self, kind: str, name: str, known: list[str] | None = None) -> None:
        self.kind = kind
        self.name = name
        self.known = sorted(known or [])
        message = f"Unknown {kind}: {name!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)
