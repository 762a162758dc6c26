"""Bulk partial-result fixture.

Importing this module builds, once, a partial scan result whose single rule
result carries ``NODE_COUNT`` identical node results. ``run_partial`` hands that
same structure back on every call, so the cost under test is whatever the
consumer does with 200,000 nodes, not the fixture itself.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict

from .schema import (
    CheckResult,
    EnvironmentData,
    NodeDescriptor,
    NodeResult,
    PartialResult,
    RuleResult,
    TestEngine,
    TestEnvironment,
    TestRunner,
)

logger = logging.getLogger(__name__)

NODE_COUNT = 200_000
RULE_ID = "duplicate-id"

NODE_TEMPLATE = NodeResult(
    any=[CheckResult(id=RULE_ID, data="fixture", result=True, relatedNodes=[])],
    all=[],
    none=[],
    node=NodeDescriptor(
        selector=["#fixture"],
        source='<div id="fixture"></div>',
        xpath=['/div[@id="fixture"]'],
        ancestry=["html > body > div:nth-child(1)"],
        nodeIndexes=[11],
    ),
)

ENVIRONMENT = EnvironmentData(
    testEngine=TestEngine(name="axe-core", version="4.6.3"),
    testRunner=TestRunner(name="axe"),
    testEnvironment=TestEnvironment(
        userAgent=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/109.0.0.0 Safari/537.36"
        ),
        windowWidth=1109,
        windowHeight=946,
        orientationAngle=0,
        orientationType="landscape-primary",
    ),
    timestamp="2023-02-01T22:53:38.103Z",
    url="http://localhost:9876/test/playground.html",
)


def node_result() -> Dict[str, Any]:
    """Return a fresh copy of the template node result."""
    return NODE_TEMPLATE.model_dump()


def build_rule_result(count: int = NODE_COUNT) -> Dict[str, Any]:
    rule = RuleResult(id=RULE_ID, impact="serious", pageLevel=False, result="inapplicable").model_dump()
    nodes = rule["nodes"]
    for _ in range(count):
        nodes.append(node_result())
    return rule


def build_partial_result(count: int = NODE_COUNT) -> Dict[str, Any]:
    """Build the JSON-shaped partial result with ``count`` node results."""
    start = time.time()
    partial = PartialResult(environmentData=ENVIRONMENT, frames=[], results=[]).model_dump()
    partial["results"].append(build_rule_result(count))
    logger.debug("Built partial result with %d nodes in %.2fs", count, time.time() - start)
    return partial


PARTIAL_RESULT = build_partial_result()


async def run_partial(*args, **kwargs) -> Dict[str, Any]:
    """Replacement ``run_partial``: ignores its arguments, returns ``PARTIAL_RESULT``."""
    return PARTIAL_RESULT


class LargePartialEngine:
    """Engine wrapper whose ``run_partial`` returns the bulk fixture."""

    def __init__(self, engine: Any):
        self._engine = engine

    async def run_partial(self, *args, **kwargs):
        return await run_partial(*args, **kwargs)

    def __getattr__(self, name):
        # copy and pickle call this before __init__ has run
        engine = self.__dict__.get("_engine")
        if engine is None:
            raise AttributeError(name)
        return getattr(engine, name)


def with_large_partial(engine: Any) -> LargePartialEngine:
    """Wrap ``engine`` so its ``run_partial`` yields the bulk fixture."""
    logger.debug("Installing large partial fixture (%d nodes)", NODE_COUNT)
    return LargePartialEngine(engine)


# Registry hook, see fixtures.py
install = with_large_partial

__all__ = [
    "NODE_COUNT",
    "NODE_TEMPLATE",
    "PARTIAL_RESULT",
    "LargePartialEngine",
    "build_partial_result",
    "build_rule_result",
    "node_result",
    "run_partial",
    "with_large_partial",
    "install",
]
