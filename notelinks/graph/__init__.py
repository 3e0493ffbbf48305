"""Link graph construction and component labelling."""

from notelinks.graph.builder import build_graph
from notelinks.graph.components import identify_components

__all__ = [
    "build_graph",
    "identify_components",
]
