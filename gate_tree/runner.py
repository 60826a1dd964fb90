"""
GateRunner - binds one tree to a configuration.

This is the primary entry point for applications that classify with a
gate tree and want tracing and routing statistics alongside.
"""

import logging

from collections.abc import Iterable
from typing import Any

from .analysis import RoutingAnalyzer
from .gate import Gate, is_gate
from .types import GateConfig, RoutingSummary, ScanResult

logger = logging.getLogger(__name__)


class GateRunner:
    """
    Runs inputs through a fixed root gate.

    Usage:
        runner = GateRunner(tree)

        label = runner.classify(150)
        trace = runner.trace(150)
        summary = runner.summarize(range(1000))

    Classifier exceptions propagate unchanged from every method.
    """

    def __init__(self, root: Gate[Any, Any], config: GateConfig | None = None):
        """
        Initialize the runner.

        Args:
            root: Tree to evaluate against
            config: Configuration (built-in defaults if not provided)
        """
        if not is_gate(root):
            raise TypeError(f"root must be a Branch or Terminus, got {type(root).__name__}")

        self.root = root
        self.config = config or GateConfig()

    def classify(self, input_data: Any) -> Any:
        """Classify a single input."""
        return self.root.evaluate(input_data)

    def classify_many(self, inputs: Iterable[Any]) -> list[Any]:
        """Classify each input, preserving input order."""
        return [self.root.evaluate(value) for value in inputs]

    def trace(self, input_data: Any) -> ScanResult:
        """
        Classify an input and record the decisions taken.

        The path is ordered by config.scan_order. With
        config.trace_decisions set, each step is logged at DEBUG.
        """
        result = self.root.scan(input_data, order=self.config.scan_order)

        if self.config.trace_decisions:
            for index, step in enumerate(result.path):
                logger.debug(f"Trace step {index}: {step.direction}")
            logger.debug(f"Trace result: {result.result!r} after {result.depth} decisions")

        return result

    def summarize(self, inputs: Iterable[Any]) -> RoutingSummary | None:
        """
        Summarize how a batch of inputs is routed.

        Returns:
            RoutingSummary or None if fewer than
            config.min_samples_for_summary inputs
        """
        summary = RoutingAnalyzer.summarize(
            self.root,
            inputs,
            min_samples=self.config.min_samples_for_summary,
        )
        if summary is not None:
            logger.info(
                f"Routing summary: samples={summary.sample_count}, "
                f"leaves={summary.leaf_count}, entropy={summary.leaf_entropy:.3f}"
            )
        return summary
