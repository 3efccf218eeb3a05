from .graph_loader import GraphLoader

__all__ = ["GraphLoader"]
