from .node import Node
from .edge import Edge
from .way import Way, WayTags
from .search_result import SearchResult
from .graph_snapshot import Graph, GraphSnapshot

__all__ = ["Node", "Edge", "Way", "WayTags", "SearchResult", "Graph", "GraphSnapshot"]
