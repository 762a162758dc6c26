from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Any


class CheckResult(BaseModel):
    id: str
    data: Any = None
    result: bool
    relatedNodes: List[Any] = []


class NodeDescriptor(BaseModel):
    selector: List[str] = []
    source: str
    xpath: List[str] = []
    ancestry: List[str] = []
    nodeIndexes: List[int] = []


class NodeResult(BaseModel):
    any: List[CheckResult] = []
    all: List[CheckResult] = []
    none: List[CheckResult] = []
    node: NodeDescriptor


class RuleResult(BaseModel):
    id: str
    impact: Optional[str]
    pageLevel: bool = False
    result: str  # inapplicable|passed|failed|incomplete
    nodes: List[NodeResult] = []


class TestEngine(BaseModel):
    name: str
    version: str


class TestRunner(BaseModel):
    name: str


class TestEnvironment(BaseModel):
    userAgent: str
    windowWidth: int
    windowHeight: int
    orientationAngle: int
    orientationType: str


class EnvironmentData(BaseModel):
    testEngine: TestEngine
    testRunner: TestRunner
    testEnvironment: TestEnvironment
    # ISO-8601, kept verbatim (not parsed to datetime)
    timestamp: str
    url: str


class PartialResult(BaseModel):
    """One frame's partial scan result, as produced before cross-frame merging."""
    environmentData: EnvironmentData
    frames: List[Any] = []
    results: List[RuleResult] = []


class ScanResult(BaseModel):
    """Result of a full ``run``. Only the engine identity is modelled; the
    remaining keys (violations, passes, url, ...) are carried through as-is."""
    model_config = ConfigDict(extra="allow")

    testEngine: TestEngine
