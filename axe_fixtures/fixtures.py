"""Named fixture registry.

Fixtures are loaded independently, one per test scenario. Modules are imported
on demand so the bulk partial result is only built when that scenario runs.
"""
from __future__ import annotations

import importlib
from typing import Any, Callable, Dict, Optional

from .config import FixtureConfig

FIXTURES: Dict[str, str] = {
    "axe-force-legacy": "axe_fixtures.legacy",
    "axe-large-partial": "axe_fixtures.large_partial",
}

# Fixtures whose adapter takes a FixtureConfig
CONFIGURABLE = {"axe-force-legacy"}


def load_fixture(name: str) -> Callable[..., Any]:
    """Import the fixture module for ``name`` and return its ``install`` adapter."""
    try:
        module_name = FIXTURES[name]
    except KeyError:
        raise KeyError(f"Unknown fixture {name!r}; known fixtures: {', '.join(sorted(FIXTURES))}") from None
    return importlib.import_module(module_name).install


def apply_fixture(name: str, engine: Any, config: Optional[FixtureConfig] = None) -> Any:
    """Apply fixture ``name`` to ``engine``; ``config`` only reaches fixtures that use it."""
    adapter = load_fixture(name)
    if name in CONFIGURABLE:
        return adapter(engine, config)
    return adapter(engine)


__all__ = ["FIXTURES", "CONFIGURABLE", "load_fixture", "apply_fixture"]
