"""Tests for link graph construction."""

from notelinks.domain.graph import UNASSIGNED_COMPONENT
from notelinks.graph import build_graph


def test_empty_index_builds_empty_graph() -> None:
    """Test that an empty index yields an empty graph."""
    graph = build_graph({})

    assert graph.nodes == []
    assert graph.links == []
    assert graph.components == []


def test_nodes_are_labelled_with_file_name() -> None:
    """Test that node labels are the terminal path segment."""
    graph = build_graph({"/notes/folder/Note One.md": []})

    assert graph.nodes[0].id == "/notes/folder/Note One.md"
    assert graph.nodes[0].label == "Note One.md"


def test_edges_keep_order_duplicates_and_weight() -> None:
    """Test that edges mirror the outbound lists, duplicates and self loops included."""
    graph = build_graph({"a.md": ["b.md", "b.md", "a.md"]})

    assert [(link.source, link.target, link.weight) for link in graph.links] == [
        ("a.md", "b.md", 1),
        ("a.md", "b.md", 1),
        ("a.md", "a.md", 1),
    ]


def test_targets_without_reports_become_nodes() -> None:
    """Test that a target never reported as a source still gets a node."""
    graph = build_graph({"a.md": ["b.md"], "c.md": []})

    assert [node.id for node in graph.nodes] == ["a.md", "b.md", "c.md"]
    assert {node.id for node in graph.nodes} >= {link.target for link in graph.links}


def test_nodes_are_unique() -> None:
    """Test that a node referenced several times is created once."""
    graph = build_graph({"a.md": ["b.md"], "b.md": ["a.md"], "c.md": ["b.md"]})

    assert [node.id for node in graph.nodes] == ["a.md", "b.md", "c.md"]


def test_isolate_flags() -> None:
    """Test that only nodes without any incident link are isolates."""
    graph = build_graph({"a.md": ["b.md"], "c.md": [], "d.md": ["d.md"]})

    isolates = {node.id: node.isolate for node in graph.nodes}
    assert isolates == {"a.md": False, "b.md": False, "c.md": True, "d.md": False}


def test_every_node_gets_a_component() -> None:
    """Test that labelling leaves no node unassigned."""
    graph = build_graph({"a.md": ["b.md"], "c.md": [], "d.md": ["e.md"]})

    assert graph.components == ["Component 1", "Component 2", "Component 3"]
    assert all(node.component != UNASSIGNED_COMPONENT for node in graph.nodes)
    assert {node.component for node in graph.nodes} == set(graph.components)


def test_same_insertion_order_gives_identical_graph() -> None:
    """Test that building twice from the same index is byte-identical."""
    index = {"c.md": ["d.md"], "a.md": ["b.md"], "e.md": []}

    assert build_graph(index).model_dump_json() == build_graph(dict(index)).model_dump_json()


def test_insertion_order_drives_component_numbering() -> None:
    """Test that the first reported source seeds the first component."""
    first = build_graph({"a.md": ["b.md"], "c.md": ["d.md"]})
    second = build_graph({"c.md": ["d.md"], "a.md": ["b.md"]})

    first_components = {node.id: node.component for node in first.nodes}
    second_components = {node.id: node.component for node in second.nodes}
    assert first_components["a.md"] == "Component 1"
    assert second_components["a.md"] == "Component 2"
