"""Connected component labelling over the undirected link graph."""

from notelinks.domain.graph import UNASSIGNED_COMPONENT, GraphVertex, LinkGraph
from notelinks.errors import GraphInvariantError


def identify_components(graph: LinkGraph) -> list[str]:
    """Label every node with its connected component.

    Links are treated as undirected. Components are numbered from 1 in the
    order their first node appears in ``graph.nodes``; nodes without links get
    a component of their own. Nodes are updated in place.

    Args:
        graph: Graph whose nodes are labelled

    Returns:
        Component identifiers in order of discovery

    Raises:
        GraphInvariantError: If a link references a node that is not in the graph
    """
    vertices = {node.id: node for node in graph.nodes}
    adjacency = _undirected_adjacency(graph, vertices)

    components: list[str] = []
    for node in graph.nodes:
        if node.component != UNASSIGNED_COMPONENT:
            continue

        component = f"Component {len(components) + 1}"
        components.append(component)
        _label_reachable(node, component, vertices, adjacency)

    return components


def _undirected_adjacency(
    graph: LinkGraph, vertices: dict[str, GraphVertex]
) -> dict[str, list[str]]:
    """Map every node id to the ids at the opposite end of its links, in link order."""
    adjacency: dict[str, list[str]] = {node_id: [] for node_id in vertices}

    for link in graph.links:
        for endpoint in (link.source, link.target):
            if endpoint not in vertices:
                raise GraphInvariantError(f"Link references unknown node: {endpoint}")

        adjacency[link.source].append(link.target)
        adjacency[link.target].append(link.source)

    return adjacency


def _label_reachable(
    start: GraphVertex,
    component: str,
    vertices: dict[str, GraphVertex],
    adjacency: dict[str, list[str]],
) -> None:
    """Depth-first search from ``start`` with an explicit stack."""
    stack = [start.id]
    while stack:
        node = vertices[stack.pop()]
        if node.component != UNASSIGNED_COMPONENT:
            continue

        node.component = component
        # Reversed so neighbours are visited in link order
        stack.extend(
            neighbour
            for neighbour in reversed(adjacency[node.id])
            if vertices[neighbour].component == UNASSIGNED_COMPONENT
        )
