"""
Core type definitions for gate-tree.

This module defines the records produced by walking a gate tree and the
configuration consumed by the runner.
Design principles:
- Immutable where possible (frozen dataclasses)
- Explicit validation at construction time
- Serialization with explicit to_dict/from_dict methods
- No magic strings - orders and variants are enums

The tree variants themselves live in gate_tree.gate.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Final

if TYPE_CHECKING:
    from .gate import Branch

# =============================================================================
# CONSTANTS
# =============================================================================

LEFT_LABEL: Final[str] = "left"
RIGHT_LABEL: Final[str] = "right"


def _describe_branch(gate: Branch[Any, Any]) -> dict[str, str]:
    """Fixed-size description of a Branch: the kinds of its two children."""
    return {
        LEFT_LABEL: gate.left.kind.value,
        RIGHT_LABEL: gate.right.kind.value,
    }


# =============================================================================
# ENUMS
# =============================================================================

class GateKind(str, Enum):
    """
    The two variants of a gate tree.

    The set is closed: every walk over a tree handles exactly these two.
    """

    BRANCH = "branch"
    """Decision node holding a classifier and two children."""

    TERMINUS = "terminus"
    """Leaf holding a classification result."""

    def __str__(self) -> str:
        return self.value


class ScanOrder(str, Enum):
    """
    Order in which scan() reports the decisions it took.
    """

    ROOT_TO_LEAF = "root_to_leaf"
    """Visit order: the root's decision first, the deepest decision last."""

    LEAF_TO_ROOT = "leaf_to_root"
    """Reverse visit order: the deepest decision first, the root's last."""

    def __str__(self) -> str:
        return self.value


# =============================================================================
# DATA CLASSES - Walk records
# =============================================================================

@dataclass(frozen=True, slots=True)
class PathStep:
    """
    One decision taken while scanning a tree.

    Attributes:
        gate: The Branch whose classifier was applied
        branch: True when the left (true) child was taken, False for the right
    """

    gate: Branch[Any, Any]
    branch: bool

    @property
    def direction(self) -> str:
        """'left' or 'right'."""
        return LEFT_LABEL if self.branch else RIGHT_LABEL

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize for audit output.

        The gate is described by its children's kinds only, so the size
        of each entry does not depend on the depth of the tree.
        """
        return {
            "gate": _describe_branch(self.gate),
            "branch": self.branch,
            "direction": self.direction,
        }


@dataclass(frozen=True, slots=True)
class ScanResult:
    """
    Outcome of Gate.scan(): the classification plus the decisions behind it.

    Unpacks like a pair:
        >>> result, path = gate.scan(12)

    Attributes:
        result: Value of the leaf the walk ended on
        path: Decisions taken, ordered as described by `order`
        order: Ordering of `path`
    """

    result: Any
    path: tuple[PathStep, ...]
    order: ScanOrder = ScanOrder.ROOT_TO_LEAF

    def __iter__(self) -> Iterator[Any]:
        yield self.result
        yield self.path

    @property
    def decisions(self) -> tuple[bool, ...]:
        """Branch outcomes in path order."""
        return tuple(step.branch for step in self.path)

    @property
    def depth(self) -> int:
        """Number of decisions taken before reaching the leaf."""
        return len(self.path)

    def in_order(self, order: ScanOrder) -> ScanResult:
        """Return this result with its path rearranged into `order`."""
        if order == self.order:
            return self
        return ScanResult(
            result=self.result,
            path=tuple(reversed(self.path)),
            order=order,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and audit trails."""
        return {
            "result": str(self.result),
            "order": self.order.value,
            "depth": self.depth,
            "path": [
                {"index": index, **step.to_dict()}
                for index, step in enumerate(self.path)
            ],
        }


# =============================================================================
# DATA CLASSES - Routing statistics
# =============================================================================

@dataclass(frozen=True, slots=True)
class BranchStat:
    """
    How often one Branch was visited and which way it sent its inputs.

    Attributes:
        gate: The Branch being described
        visits: Number of scans that applied this Branch's classifier
        true_count: Number of those scans that went left
    """

    gate: Branch[Any, Any]
    visits: int
    true_count: int

    def __post_init__(self) -> None:
        if not (0 <= self.true_count <= self.visits):
            raise ValueError(
                f"true_count must be between 0 and visits ({self.visits}), "
                f"got {self.true_count}"
            )

    @property
    def false_count(self) -> int:
        return self.visits - self.true_count

    @property
    def true_rate(self) -> float:
        """Fraction of visits that went left (0.0 when never visited)."""
        if self.visits == 0:
            return 0.0
        return self.true_count / self.visits

    def to_dict(self) -> dict[str, Any]:
        return {
            "gate": _describe_branch(self.gate),
            "visits": self.visits,
            "true_count": self.true_count,
            "false_count": self.false_count,
            "true_rate": self.true_rate,
        }


@dataclass(frozen=True, slots=True)
class RoutingSummary:
    """
    Aggregate picture of how a batch of inputs was routed through a tree.

    Attributes:
        sample_count: Number of inputs scanned
        leaf_counts: Leaf value -> number of inputs that ended there
        leaf_distribution: Leaf value -> fraction of inputs
        leaf_entropy: Shannon entropy (nats) of leaf_distribution
        branch_stats: Per-Branch statistics, root first, in first-visit order
    """

    sample_count: int
    leaf_counts: dict[Any, int]
    leaf_distribution: dict[Any, float]
    leaf_entropy: float
    branch_stats: tuple[BranchStat, ...]

    def __post_init__(self) -> None:
        if self.sample_count < 0:
            raise ValueError(f"sample_count must be non-negative, got {self.sample_count}")

    @property
    def leaf_count(self) -> int:
        """Number of distinct leaves reached."""
        return len(self.leaf_counts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary. Leaf values are stringified."""
        return {
            "sample_count": self.sample_count,
            "leaf_counts": {str(k): v for k, v in self.leaf_counts.items()},
            "leaf_distribution": {str(k): v for k, v in self.leaf_distribution.items()},
            "leaf_entropy": self.leaf_entropy,
            "branch_stats": [s.to_dict() for s in self.branch_stats],
        }


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass(frozen=True, slots=True)
class GateConfig:
    """
    Runner configuration.

    Only affects how GateRunner reports on a tree; trees themselves
    carry no configuration.

    Attributes:
        scan_order: Path order returned by GateRunner.trace()
        trace_decisions: Log each decision step at DEBUG when tracing
        min_samples_for_summary: Inputs required before summarize() reports
    """

    MIN_SAMPLES: ClassVar[int] = 1

    scan_order: ScanOrder = ScanOrder.ROOT_TO_LEAF
    trace_decisions: bool = False
    min_samples_for_summary: int = 1

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.scan_order, ScanOrder):
            raise ValueError(f"scan_order must be a ScanOrder, got {self.scan_order!r}")

        if self.min_samples_for_summary < self.MIN_SAMPLES:
            raise ValueError(
                f"min_samples_for_summary must be at least {self.MIN_SAMPLES}, "
                f"got {self.min_samples_for_summary}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "scan_order": self.scan_order.value,
            "trace_decisions": self.trace_decisions,
            "min_samples_for_summary": self.min_samples_for_summary,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GateConfig:
        """
        Create configuration from dictionary.

        Args:
            data: Dictionary with configuration fields.

        Returns:
            GateConfig instance.
        """
        if "scan_order" in data and isinstance(data["scan_order"], str):
            data = data.copy()
            data["scan_order"] = ScanOrder(data["scan_order"])

        return cls(**data)
