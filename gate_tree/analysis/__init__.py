"""
Routing analysis for gate-tree.

Aggregates many scans into statistics about how a tree routes its inputs.
"""

from .routing import RoutingAnalyzer

__all__ = ["RoutingAnalyzer"]
