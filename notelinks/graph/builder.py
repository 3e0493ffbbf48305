"""Building link graphs from indexed outbound links."""

import time
from typing import Mapping

from loguru import logger

from notelinks.domain.graph import GraphEdge, GraphVertex, LinkGraph
from notelinks.errors import GraphInvariantError

from .components import identify_components


def build_graph(outbound_by_path: Mapping[str, list[str]]) -> LinkGraph:
    """Build the complete link graph from a snapshot of the link index.

    Nodes are created in the order sources appear in the mapping, each source
    followed by any of its targets not seen before. Since component numbering
    follows node order, the same insertion sequence always yields the same
    graph.

    Args:
        outbound_by_path: Resolved outbound links keyed by source path, in insertion order

    Returns:
        LinkGraph with isolate flags and component labels set

    Raises:
        GraphInvariantError: If a link ends up referencing an unknown node
    """
    start_time = time.perf_counter()

    graph = LinkGraph()
    vertices: dict[str, GraphVertex] = {}

    def upsert_vertex(path: str) -> None:
        if path not in vertices:
            vertex = GraphVertex.for_path(path)
            vertices[path] = vertex
            graph.nodes.append(vertex)

    for file, outbound in outbound_by_path.items():
        upsert_vertex(file)
        for target in outbound:
            graph.links.append(GraphEdge(source=file, target=target, weight=1))
            upsert_vertex(target)

    # Now that we have all links, we can calculate the isolates
    sources = {link.source for link in graph.links}
    targets = {link.target for link in graph.links}
    for endpoint in sources | targets:
        if endpoint not in vertices:
            raise GraphInvariantError(f"Link references unknown node: {endpoint}")
        vertices[endpoint].isolate = False

    graph.components = identify_components(graph)

    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"Graph constructed in {round(duration_ms)}ms. Graph contains {len(graph.nodes)} nodes, "
        f"{len(graph.links)} arcs and {len(graph.components)} components."
    )
    return graph
