from .best_first import BestFirstSearch
from .astar import AStar
from .dijkstra import Dijkstra
from .greedy_best_first import GreedyBestFirst
from .registry import AlgorithmRegistry, PathfindingAlgorithm, default_registry

__all__ = [
    "BestFirstSearch",
    "AStar",
    "Dijkstra",
    "GreedyBestFirst",
    "AlgorithmRegistry",
    "PathfindingAlgorithm",
    "default_registry",
]
