"""
gate-tree - composable binary decision trees.

Replaces deeply nested conditionals with a tree of small predicates
("classifiers") whose leaves carry the classification.

Quick Start:
    >>> from gate_tree import BranchBuilder, leaf
    >>> tree = (
    ...     BranchBuilder.create()
    ...     .with_classifier(lambda n: n % 2 == 0)
    ...     .when_true(leaf("even"))
    ...     .when_false(leaf("odd"))
    ...     .build()
    ... )
    >>> tree.evaluate(3)
    'odd'
    >>> result, path = tree.scan(3)

For tracing and routing statistics:
    >>> from gate_tree import GateRunner, GateConfig
    >>> runner = GateRunner(tree, GateConfig(trace_decisions=True))
    >>> summary = runner.summarize(range(100))

Key Components:
    - Branch / Terminus: The two tree variants (Gate)
    - BranchBuilder: Validated, fluent construction of a Branch
    - GateRunner: Tree plus configuration (classify, trace, summarize)
    - RoutingAnalyzer: Statistics over many scans

Version: 0.1.0
License: MIT
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from gate_tree.analysis import RoutingAnalyzer
from gate_tree.builder import BranchBuilder, leaf
from gate_tree.config import load_config, save_config
from gate_tree.exceptions import BuildIncomplete, GateError
from gate_tree.gate import Branch, Classifier, Gate, Terminus, is_gate
from gate_tree.runner import GateRunner
from gate_tree.types import (
    BranchStat,
    GateConfig,
    GateKind,
    PathStep,
    RoutingSummary,
    ScanOrder,
    ScanResult,
)

__all__ = [
    "Branch",
    "BranchBuilder",
    "BranchStat",
    "BuildIncomplete",
    "Classifier",
    "Gate",
    "GateConfig",
    "GateError",
    "GateKind",
    "GateRunner",
    "PathStep",
    "RoutingAnalyzer",
    "RoutingSummary",
    "ScanOrder",
    "ScanResult",
    "Terminus",
    "__license__",
    "__version__",
    "is_gate",
    "leaf",
    "load_config",
    "save_config",
]
