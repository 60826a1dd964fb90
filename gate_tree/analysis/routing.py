"""
Routing statistics for gate trees.

Scans a batch of inputs and reports where they went: which leaves they
reached, how evenly they were spread, and which way every Branch sent
them. Useful for auditing a hand-built tree against real traffic.

Leaf values are used as dictionary keys, so they must be hashable.
Branches are tracked by identity, not equality.

Mathematical Background:
- Leaf entropy: Shannon entropy (nats) of the leaf distribution.
  0.0 when every input reaches the same leaf, ln(k) when inputs are
  spread evenly over k leaves.
"""

from __future__ import annotations

import logging

from collections.abc import Iterable, Mapping
from typing import Any, Final

import numpy as np

from scipy import stats

from ..gate import Gate
from ..types import BranchStat, RoutingSummary, ScanOrder, ScanResult

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_SAMPLES_FOR_SUMMARY: Final[int] = 1


# =============================================================================
# ROUTING ANALYZER
# =============================================================================

class RoutingAnalyzer:
    """
    Stateless routing statistics.

    All methods are static and pure, apart from invoking the tree's
    classifiers in summarize().

    Usage:
        >>> from gate_tree.analysis import RoutingAnalyzer
        >>> summary = RoutingAnalyzer.summarize(tree, range(1000))
        >>> summary.leaf_distribution
    """

    @staticmethod
    def leaf_counts(results: Iterable[Any]) -> dict[Any, int]:
        """
        Count how many results landed on each leaf value.

        Keys appear in first-seen order.
        """
        counts: dict[Any, int] = {}
        for result in results:
            counts[result] = counts.get(result, 0) + 1
        return counts

    @staticmethod
    def leaf_distribution(results: Iterable[Any]) -> dict[Any, float]:
        """
        Fraction of results per leaf value.

        Args:
            results: Classifications, one per input

        Returns:
            Mapping leaf value -> fraction, summing to 1.0 ({} when empty)
        """
        counts = RoutingAnalyzer.leaf_counts(results)
        if not counts:
            return {}

        totals = np.asarray(list(counts.values()), dtype=np.float64)
        fractions = totals / totals.sum()
        return {value: float(f) for value, f in zip(counts, fractions)}

    @staticmethod
    def leaf_entropy(distribution: Mapping[Any, float]) -> float:
        """
        Shannon entropy of a leaf distribution, in nats.

        Mathematical Definition:
            H = -sum(p_i * ln(p_i))

        Returns:
            Entropy value (non-negative), 0.0 for zero or one leaf
        """
        probs = np.asarray(list(distribution.values()), dtype=np.float64)
        if probs.size <= 1 or probs.sum() <= 0:
            return 0.0

        return float(stats.entropy(probs))

    @staticmethod
    def branch_stats(scans: Iterable[ScanResult]) -> tuple[BranchStat, ...]:
        """
        Per-Branch visit counts and outcomes over many scans.

        Scans may be in either order; statistics are listed by first
        visit in root-to-leaf order, so the root comes first.
        """
        gates: dict[int, Any] = {}
        outcomes: dict[int, list[bool]] = {}

        for scan in scans:
            for step in scan.in_order(ScanOrder.ROOT_TO_LEAF).path:
                key = id(step.gate)
                if key not in gates:
                    gates[key] = step.gate
                    outcomes[key] = []
                outcomes[key].append(step.branch)

        result = []
        for key, gate in gates.items():
            decisions = np.asarray(outcomes[key], dtype=bool)
            result.append(BranchStat(
                gate=gate,
                visits=int(decisions.size),
                true_count=int(np.count_nonzero(decisions)),
            ))
        return tuple(result)

    @staticmethod
    def summarize(
        root: Gate[Any, Any],
        inputs: Iterable[Any],
        min_samples: int = MIN_SAMPLES_FOR_SUMMARY,
    ) -> RoutingSummary | None:
        """
        Scan every input through `root` and summarize the routing.

        Args:
            root: Tree to run the inputs through
            inputs: Values to classify
            min_samples: Fewest inputs worth summarizing

        Returns:
            RoutingSummary, or None if fewer than min_samples inputs

        Raises:
            ValueError: If min_samples is below 1
        """
        if min_samples < MIN_SAMPLES_FOR_SUMMARY:
            raise ValueError(
                f"min_samples must be at least {MIN_SAMPLES_FOR_SUMMARY}, got {min_samples}"
            )

        values = list(inputs)
        if len(values) < min_samples:
            logger.debug(
                f"Skipping routing summary: {len(values)} inputs, need {min_samples}"
            )
            return None

        scans = [root.scan(value) for value in values]
        results = [scan.result for scan in scans]
        distribution = RoutingAnalyzer.leaf_distribution(results)

        return RoutingSummary(
            sample_count=len(values),
            leaf_counts=RoutingAnalyzer.leaf_counts(results),
            leaf_distribution=distribution,
            leaf_entropy=RoutingAnalyzer.leaf_entropy(distribution),
            branch_stats=RoutingAnalyzer.branch_stats(scans),
        )
