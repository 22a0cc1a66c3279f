"""Graph primitives and helpers.

This package provides the weighted multi-directed graph type `EdgeGraph` and
the edge-list text reader/writer in `io`.
"""
