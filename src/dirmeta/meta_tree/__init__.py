"""Metadata tree construction with depth limits, filtering and size totals.

This package provides the node type, the recursive tree builder, the directory size
aggregator and the MetaTree class tying them together.
"""
