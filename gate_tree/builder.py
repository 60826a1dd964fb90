"""
BranchBuilder - staged construction of a single Branch.

Each setter overwrites one slot and returns the builder, so a whole tree
reads top-down while being assembled bottom-up:

    >>> tree = (
    ...     BranchBuilder.create()
    ...     .with_classifier(lambda n: n % 2 == 0)
    ...     .when_true(leaf("even"))
    ...     .when_false(leaf("odd"))
    ...     .build()
    ... )

build() is the only place a missing slot is reported.
"""

from __future__ import annotations

import logging

from typing import Generic, TypeVar

from .exceptions import BuildIncomplete
from .gate import Branch, Classifier, Gate, Terminus

logger = logging.getLogger(__name__)

C = TypeVar("C")
T = TypeVar("T")


def leaf(value: C) -> Terminus[C, T]:
    """Wrap a classification value in a Terminus."""
    return Terminus(value)


class BranchBuilder(Generic[C, T]):
    """
    Mutable holder for the three parts of a Branch.

    Not thread-safe. The builder is not consumed by build(): it can be
    modified and built again, each build() returning an independent Branch.
    """

    def __init__(self) -> None:
        self._classifier: Classifier[T] | None = None
        self._left: Gate[C, T] | None = None
        self._right: Gate[C, T] | None = None

    @classmethod
    def create(cls) -> BranchBuilder[C, T]:
        """Return a fresh builder with every slot unset."""
        return cls()

    def with_classifier(self, classifier: Classifier[T]) -> BranchBuilder[C, T]:
        """
        Set the predicate applied to the input.

        Args:
            classifier: Function input -> bool

        Returns:
            This builder
        """
        self._classifier = classifier
        return self

    def when_true(self, left: Gate[C, T]) -> BranchBuilder[C, T]:
        """
        Set the gate taken when the classifier returns True.

        Args:
            left: Subtree for the true outcome

        Returns:
            This builder
        """
        self._left = left
        return self

    def when_false(self, right: Gate[C, T]) -> BranchBuilder[C, T]:
        """
        Set the gate taken when the classifier returns False.

        Args:
            right: Subtree for the false outcome

        Returns:
            This builder
        """
        self._right = right
        return self

    @property
    def missing(self) -> tuple[str, ...]:
        """Names of the slots still unset, in (classifier, left, right) order."""
        slots = (
            ("classifier", self._classifier),
            ("left", self._left),
            ("right", self._right),
        )
        return tuple(name for name, value in slots if value is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def build(self) -> Branch[C, T]:
        """
        Assemble the Branch.

        Returns:
            A new immutable Branch built from the current slots

        Raises:
            BuildIncomplete: If the classifier or either child is unset
            TypeError: If the classifier is not callable or a child is not
                a Branch or Terminus
        """
        missing = self.missing
        if missing:
            raise BuildIncomplete(missing)

        branch: Branch[C, T] = Branch(
            classifier=self._classifier,
            left=self._left,
            right=self._right,
        )
        logger.debug(f"Built Branch: left={branch.left.kind}, right={branch.right.kind}")
        return branch
