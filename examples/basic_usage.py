"""
Example: replacing nested conditionals with a gate tree.

This example demonstrates:
1. Building a tree bottom-up with BranchBuilder
2. Classifying inputs with evaluate()
3. Auditing a decision with scan()
4. Summarizing routing over a batch with GateRunner
"""

import logging

from dataclasses import dataclass

from gate_tree import BranchBuilder, GateConfig, GateRunner, ScanOrder, leaf


@dataclass
class Order:
    weight_kg: float
    international: bool


def build_shipping_tree():
    domestic = (
        BranchBuilder.create()
        .with_classifier(lambda o: o.weight_kg > 20)
        .when_true(leaf("freight"))
        .when_false(leaf("standard"))
        .build()
    )
    return (
        BranchBuilder.create()
        .with_classifier(lambda o: o.international)
        .when_true(leaf("customs"))
        .when_false(domestic)
        .build()
    )


def main():
    logging.basicConfig(level=logging.DEBUG)

    tree = build_shipping_tree()
    orders = [
        Order(2.5, False),
        Order(35.0, False),
        Order(1.0, True),
        Order(12.0, False),
    ]

    print("=== Classifying ===")
    for order in orders:
        print(f"  {order} -> {tree.evaluate(order)}")

    print("\n=== Auditing one decision ===")
    result, path = tree.scan(orders[1])
    for step in path:
        print(f"  took {step.direction}")
    print(f"  result: {result}")

    print("\n=== Routing summary ===")
    runner = GateRunner(tree, GateConfig(scan_order=ScanOrder.ROOT_TO_LEAF, trace_decisions=True))
    runner.trace(orders[0])
    summary = runner.summarize(orders)
    for label, share in summary.leaf_distribution.items():
        print(f"  {label}: {share:.0%}")
    print(f"  entropy: {summary.leaf_entropy:.3f}")


if __name__ == "__main__":
    main()
