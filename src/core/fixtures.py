"""Carga de fixtures (datos de ejemplo) para los demos.

Soporta:
- Fixtures integradas (`default_fixtures`), las mismas en cada ejecución.
- Un JSON local con la misma forma que `DemoFixtures`; cada sección
  (`decorator`, `strategy`, `null_object`) es opcional.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import DemoFixtures
from core.errors import FixturesError

logger = logging.getLogger(__name__)


def default_fixtures() -> DemoFixtures:
    return DemoFixtures()


def load_fixtures(path: Path) -> DemoFixtures:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FixturesError(path, str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FixturesError(path, f"not valid JSON ({exc.msg} at line {exc.lineno})") from exc

    try:
        fixtures = DemoFixtures.model_validate(data)
    except ValidationError as exc:
        raise FixturesError(path, str(exc)) from exc

    logger.debug("Loaded fixtures from %s", path)
    return fixtures


def resolve_fixtures(settings: AppSettings | None = None, *, path: Path | None = None) -> DemoFixtures:
    """Fixtures efectivas.

    Orden:
    1) `path` explícito (flag de la CLI)
    2) `settings.fixtures_path` (env var)
    3) fixtures integradas
    """

    settings = settings or AppSettings()
    chosen = path or settings.fixtures_path
    if chosen is None:
        return default_fixtures()
    return load_fixtures(chosen)
