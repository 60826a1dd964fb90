"""
Tests for BranchBuilder.
"""

import itertools

import pytest

from gate_tree import Branch, BranchBuilder, BuildIncomplete, GateError, Terminus, leaf


def is_positive(n: int) -> bool:
    return n > 0


SLOTS = ("classifier", "left", "right")


def configure(classifier: bool, left: bool, right: bool) -> BranchBuilder:
    """Builder with only the requested slots set."""
    builder = BranchBuilder.create()
    if classifier:
        builder.with_classifier(is_positive)
    if left:
        builder.when_true(Terminus("positive"))
    if right:
        builder.when_false(Terminus("not positive"))
    return builder


INCOMPLETE = [
    combo for combo in itertools.product([True, False], repeat=3) if not all(combo)
]


class TestBuild:
    """Tests for build() validation."""

    @pytest.mark.parametrize("combo", INCOMPLETE)
    def test_incomplete_configurations_fail(self, combo):
        """Any unset slot makes build() fail, naming what is missing."""
        builder = configure(*combo)
        expected_missing = tuple(name for name, is_set in zip(SLOTS, combo) if not is_set)

        with pytest.raises(BuildIncomplete) as exc_info:
            builder.build()

        assert exc_info.value.missing == expected_missing
        for name in expected_missing:
            assert name in str(exc_info.value)

    def test_classifier_only_fails(self):
        """A classifier with no children cannot be built."""
        builder = BranchBuilder.create().with_classifier(is_positive)
        with pytest.raises(BuildIncomplete, match="left, right"):
            builder.build()

    def test_non_gate_child_raises_type_error(self):
        """A complete builder with a malformed child fails at build() with TypeError."""
        builder = (
            BranchBuilder.create()
            .with_classifier(is_positive)
            .when_true("positive")
            .when_false(Terminus("not positive"))
        )
        assert builder.is_complete

        with pytest.raises(TypeError, match="left"):
            builder.build()

    def test_non_callable_classifier_raises_type_error(self):
        builder = configure(False, True, True).with_classifier(42)
        with pytest.raises(TypeError, match="callable"):
            builder.build()

    def test_build_incomplete_is_gate_error(self):
        with pytest.raises(GateError):
            BranchBuilder.create().build()

    def test_complete_configuration_builds(self):
        """With all three slots set, build() returns a matching Branch."""
        yes, no = Terminus("positive"), Terminus("not positive")
        branch = (
            BranchBuilder.create()
            .with_classifier(is_positive)
            .when_true(yes)
            .when_false(no)
            .build()
        )

        assert isinstance(branch, Branch)
        assert branch.classifier is is_positive
        assert branch.left is yes
        assert branch.right is no
        assert branch.evaluate(5) == "positive"
        assert branch.evaluate(-5) == "not positive"

    def test_recover_after_failure(self):
        """Fixing the builder after BuildIncomplete lets build() succeed."""
        builder = configure(True, True, False)
        with pytest.raises(BuildIncomplete):
            builder.build()

        builder.when_false(Terminus("not positive"))
        assert builder.build().evaluate(0) == "not positive"

    def test_branch_children_can_be_branches(self):
        inner = configure(True, True, True).build()
        outer = (
            BranchBuilder.create()
            .with_classifier(lambda n: n % 2 == 0)
            .when_true(inner)
            .when_false(leaf("odd"))
            .build()
        )
        assert outer.left is inner
        assert outer.evaluate(4) == "positive"
        assert outer.evaluate(-4) == "not positive"
        assert outer.evaluate(3) == "odd"


class TestSetters:
    """Tests for the fluent setters."""

    def test_setters_return_same_builder(self):
        builder = BranchBuilder.create()
        assert builder.with_classifier(is_positive) is builder
        assert builder.when_true(Terminus(1)) is builder
        assert builder.when_false(Terminus(2)) is builder

    def test_setters_overwrite(self):
        """The last value set wins."""
        second = Terminus("second")
        branch = (
            BranchBuilder.create()
            .with_classifier(lambda n: False)
            .with_classifier(is_positive)
            .when_true(Terminus("first"))
            .when_true(second)
            .when_false(Terminus("no"))
            .build()
        )
        assert branch.classifier is is_positive
        assert branch.left is second

    def test_missing_tracks_slots(self):
        builder = BranchBuilder.create()
        assert builder.missing == SLOTS
        assert not builder.is_complete

        builder.when_false(Terminus(0))
        assert builder.missing == ("classifier", "left")

        builder.with_classifier(is_positive).when_true(Terminus(1))
        assert builder.missing == ()
        assert builder.is_complete

    def test_create_returns_fresh_builders(self):
        first = BranchBuilder.create().with_classifier(is_positive)
        second = BranchBuilder.create()
        assert first is not second
        assert second.missing == SLOTS


class TestRebuild:
    """Tests for building more than once from one builder."""

    def test_rebuild_produces_independent_nodes(self):
        """Mutating after build() does not affect nodes already built."""
        original_left = Terminus("positive")
        builder = (
            BranchBuilder.create()
            .with_classifier(is_positive)
            .when_true(original_left)
            .when_false(Terminus("not positive"))
        )
        first = builder.build()

        replacement = Terminus("replaced")
        second = builder.when_true(replacement).build()

        assert first is not second
        assert first.left is original_left
        assert second.left is replacement
        assert first.evaluate(1) == "positive"
        assert second.evaluate(1) == "replaced"

    def test_leaf_helper(self):
        node = leaf("value")
        assert isinstance(node, Terminus)
        assert node.value == "value"
