"""Exceptions raised by the link graph."""


class GraphInvariantError(RuntimeError):
    """An edge references a node that is not part of the graph.

    This indicates a logic defect in graph construction, not a transient
    condition, so callers should not retry.
    """
