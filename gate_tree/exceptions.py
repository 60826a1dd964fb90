"""
Exceptions raised by gate-tree.

Classifier failures are not wrapped: whatever a caller-supplied
classifier raises reaches the caller of evaluate()/scan() untouched.
"""

from __future__ import annotations


class GateError(Exception):
    """Base class for errors raised by the library itself."""


class BuildIncomplete(GateError):
    """
    A BranchBuilder was asked to build() before every slot was set.

    Attributes:
        missing: Names of the unset slots, in ("classifier", "left", "right") order
    """

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            f"Branch must contain classifier, left, and right; "
            f"missing: {', '.join(self.missing)}"
        )
