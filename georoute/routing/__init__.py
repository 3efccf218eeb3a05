from .graph_report import check_graph, to_networkx
from .route_service import RouteService

__all__ = ["check_graph", "to_networkx", "RouteService"]
