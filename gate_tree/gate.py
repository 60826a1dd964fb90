"""
Gate - a binary decision tree that classifies an input.

A gate is one of exactly two variants:

    Branch(classifier, left, right)
        Applies `classifier` to the input. A truthy result descends into
        `left`, a falsy one into `right`.

    Terminus(value)
        Ends the walk; `value` is the classification.

The variant set is closed. Both classes share a private base that refuses
any further subclasses, so every walk only ever has two cases to handle,
and anything else reaching a walk is reported as a TypeError.

Trees are frozen dataclasses and are never modified after construction,
so one tree can be evaluated from many threads as long as its classifiers
can. Evaluation is an explicit loop; tree depth is not limited by the
interpreter's recursion limit.

Usage:
    >>> from gate_tree import BranchBuilder, Terminus
    >>> parity = (
    ...     BranchBuilder.create()
    ...     .with_classifier(lambda n: n % 2 == 0)
    ...     .when_true(Terminus("even"))
    ...     .when_false(Terminus("odd"))
    ...     .build()
    ... )
    >>> parity.evaluate(4)
    'even'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar, Union

from .types import GateKind, PathStep, ScanOrder, ScanResult

C = TypeVar("C")
T = TypeVar("T")

# A classification function: input -> bool.
Classifier = Callable[[T], bool]

_VARIANTS = frozenset({"Branch", "Terminus"})


class _GateBase(Generic[C, T]):
    """Operations shared by both variants. Not part of the public API."""

    __slots__ = ()

    kind: ClassVar[GateKind]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError(
                f"Gate variants are closed to extension; cannot define {cls.__qualname__}"
            )

    @property
    def is_terminal(self) -> bool:
        return self.kind is GateKind.TERMINUS

    def step(self, input_data: T) -> Gate[C, T]:
        """
        Descend a single level.

        A Branch returns the child its classifier selects; a Terminus
        returns itself, so stepping past a leaf is a no-op.
        """
        if isinstance(self, Terminus):
            return self
        child, _ = _descend(self, input_data)
        return child

    def evaluate(self, input_data: T) -> C:
        """
        Run `input_data` through the tree and return the leaf's value.

        Exceptions raised by a classifier propagate unchanged; the tree
        is left as it was and can be evaluated again.
        """
        gate: Any = self
        while not isinstance(gate, Terminus):
            gate, _ = _descend(gate, input_data)
        return gate.value

    def scan(
        self,
        input_data: T,
        order: ScanOrder = ScanOrder.ROOT_TO_LEAF,
    ) -> ScanResult:
        """
        Run `input_data` through the tree, recording every decision taken.

        Args:
            input_data: Value to classify
            order: ROOT_TO_LEAF (default) lists the root's decision first;
                LEAF_TO_ROOT lists the deepest decision first

        Returns:
            ScanResult with the leaf value and one PathStep per Branch visited
        """
        path: list[PathStep] = []
        gate: Any = self
        while not isinstance(gate, Terminus):
            visited = gate
            gate, taken = _descend(visited, input_data)
            path.append(PathStep(gate=visited, branch=taken))

        result = ScanResult(result=gate.value, path=tuple(path))
        return result.in_order(order)


@dataclass(frozen=True, slots=True, eq=False)
class Branch(_GateBase[C, T]):
    """
    Decision node.

    Branches compare and hash by identity, so equality checks never walk
    the subtree.

    Attributes:
        classifier: Predicate applied to the input
        left: Gate taken when the classifier returns True
        right: Gate taken when the classifier returns False
    """

    kind: ClassVar[GateKind] = GateKind.BRANCH

    classifier: Classifier[T] = field(repr=False)
    left: Gate[C, T]
    right: Gate[C, T]

    def __post_init__(self) -> None:
        if not callable(self.classifier):
            raise TypeError(f"classifier must be callable, got {type(self.classifier).__name__}")
        for name in ("left", "right"):
            child = getattr(self, name)
            if not isinstance(child, _GateBase):
                raise TypeError(
                    f"{name} must be a Branch or Terminus, got {type(child).__name__}"
                )

    @property
    def value(self) -> None:
        """
        A Branch carries no classification.

        A Terminus may hold None as well; use is_terminal to tell them apart.
        """
        return None


@dataclass(frozen=True, slots=True)
class Terminus(_GateBase[C, T]):
    """
    Leaf node holding the classification `value`.

    A Terminus is its own left and right child. `value` may itself be
    None, which is indistinguishable from a Branch's absent value; check
    is_terminal rather than `value is None`.
    """

    kind: ClassVar[GateKind] = GateKind.TERMINUS

    value: C

    @property
    def left(self) -> Terminus[C, T]:
        return self

    @property
    def right(self) -> Terminus[C, T]:
        return self


Gate = Union[Branch[C, T], Terminus[C, T]]


def _descend(gate: Any, input_data: Any) -> tuple[Any, bool]:
    """Apply one Branch's classifier; return the chosen child and the outcome."""
    if isinstance(gate, Branch):
        taken = bool(gate.classifier(input_data))
        return (gate.left if taken else gate.right), taken
    raise TypeError(f"Not a gate variant: {type(gate).__name__}")


def is_gate(obj: Any) -> bool:
    """True if `obj` is a Branch or a Terminus."""
    return isinstance(obj, _GateBase)
