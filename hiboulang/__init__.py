"""Interaction terms for sequence diagrams: syntax, pruning, lifeline elimination, frontiers and execution."""

__version__ = "0.1.0"

__all__ = [
    "action",
    "eliminate",
    "execute",
    "frontier",
    "general_context",
    "interaction",
    "palette",
    "position",
    "prune",
    "trace_action",
]