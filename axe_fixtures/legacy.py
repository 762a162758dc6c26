"""Legacy engine shim.

Makes a current engine look like a legacy one: every result is relabelled
with a legacy engine name and the newer entry points (``run_partial`` and
``finish_run``) disappear. The wrapped engine itself is left untouched; callers
get a new ``LegacyEngine`` object to hand to the code under test.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, FrozenSet, Optional

from .call_style import Callback, CompletionCallback, split_call_style
from .config import FixtureConfig

logger = logging.getLogger(__name__)


def relabel(results: Any, name: str) -> None:
    """Overwrite ``testEngine.name`` on a result in place.

    Accepts both JSON-shaped dicts and objects (e.g. ``schema.ScanResult``).
    """
    if isinstance(results, Mapping):
        results["testEngine"]["name"] = name
    else:
        results.testEngine.name = name
    logger.debug("Relabelled scan result engine as %s", name)


def _relabelling(fn: CompletionCallback, name: str) -> CompletionCallback:
    def done(err, results):
        if results:
            relabel(results, name)
        fn(err, results)
    return done


class LegacyEngine:
    """Engine wrapper exposing only the legacy API surface."""

    def __init__(self, engine: Any, legacy_name: str, removed: FrozenSet[str]):
        self._engine = engine
        self.legacy_name = legacy_name
        self.removed = removed

    async def run(self, *args, **kwargs):
        args, style = split_call_style(args)
        if isinstance(style, Callback):
            args = args + (_relabelling(style.fn, self.legacy_name),)
        results = await self._engine.run(*args, **kwargs)
        if results:
            relabel(results, self.legacy_name)
        return results

    def __getattr__(self, name):
        # Only reached for attributes not defined on the wrapper itself.
        # Read through __dict__: copy and pickle call this before __init__ has run
        state = self.__dict__
        if "_engine" not in state:
            raise AttributeError(name)
        if name in state["removed"]:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return getattr(state["_engine"], name)

    def __dir__(self):
        names = set(super().__dir__()) | set(dir(self._engine))
        return sorted(names - self.removed)


def force_legacy(engine: Any, config: Optional[FixtureConfig] = None) -> LegacyEngine:
    cfg = config or FixtureConfig()
    logger.debug(
        "Installing legacy shim (name=%s, removed=%s)",
        cfg.legacy_engine_name,
        ", ".join(cfg.removed_entry_points),
    )
    return LegacyEngine(engine, cfg.legacy_engine_name, frozenset(cfg.removed_entry_points))


# Registry hook, see fixtures.py
install = force_legacy

__all__ = ["LegacyEngine", "force_legacy", "relabel", "install"]
