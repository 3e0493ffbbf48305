"""Link graph domain models."""

from pathlib import PurePath

from pydantic import BaseModel

UNASSIGNED_COMPONENT = "unassigned"


class GraphVertex(BaseModel):
    """A document in the link graph."""

    id: str
    label: str
    component: str = UNASSIGNED_COMPONENT
    isolate: bool = True

    @classmethod
    def for_path(cls, path: str) -> "GraphVertex":
        """Create an unlabelled vertex named after the terminal path segment."""
        return cls(id=path, label=PurePath(path).name or path)


class GraphEdge(BaseModel):
    """A directed link between two documents."""

    source: str
    target: str
    weight: float = 1  # unweighted for now


class LinkGraph(BaseModel):
    """Represents the complete link graph for all indexed documents."""

    nodes: list[GraphVertex] = []
    links: list[GraphEdge] = []
    components: list[str] = []  # in order of discovery
