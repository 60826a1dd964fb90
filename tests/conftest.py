"""
Shared trees for the gate-tree tests.
"""

from enum import Enum

import pytest

from gate_tree import BranchBuilder, Terminus


class Parity(str, Enum):
    EVEN_GREATER_THAN_100 = "even->100"
    EVEN_AT_MOST_100 = "even-<=100"
    ODD_LESS_THAN_100 = "odd-<100"
    ODD_AT_LEAST_100 = "odd->=100"


class Aliquot(str, Enum):
    DEFICIENT = "deficient"
    ABUNDANT = "abundant"
    PERFECT = "perfect"


def expected_parity(n: int) -> Parity:
    """The nested-conditional version of the parity tree."""
    if n % 2 == 0:
        if n > 100:
            return Parity.EVEN_GREATER_THAN_100
        return Parity.EVEN_AT_MOST_100
    if n < 100:
        return Parity.ODD_LESS_THAN_100
    return Parity.ODD_AT_LEAST_100


def aliquot(n: int) -> int:
    return sum(d for d in range(1, n) if n % d == 0)


def deficient(n: int) -> bool:
    return aliquot(n) < n


def abundant(n: int) -> bool:
    return aliquot(n) > n


@pytest.fixture
def parity_tree():
    """Three-level tree: n % 2 == 0, then n > 100 or n < 100."""
    return (
        BranchBuilder.create()
        .with_classifier(lambda n: n % 2 == 0)
        .when_true(
            BranchBuilder.create()
            .with_classifier(lambda n: n > 100)
            .when_true(Terminus(Parity.EVEN_GREATER_THAN_100))
            .when_false(Terminus(Parity.EVEN_AT_MOST_100))
            .build()
        )
        .when_false(
            BranchBuilder.create()
            .with_classifier(lambda n: n < 100)
            .when_true(Terminus(Parity.ODD_LESS_THAN_100))
            .when_false(Terminus(Parity.ODD_AT_LEAST_100))
            .build()
        )
        .build()
    )


@pytest.fixture
def aliquot_tree():
    """Two-level tree: deficient, else abundant, else perfect."""
    return (
        BranchBuilder.create()
        .with_classifier(deficient)
        .when_true(Terminus(Aliquot.DEFICIENT))
        .when_false(
            BranchBuilder.create()
            .with_classifier(abundant)
            .when_true(Terminus(Aliquot.ABUNDANT))
            .when_false(Terminus(Aliquot.PERFECT))
            .build()
        )
        .build()
    )
