from .node_snapper import CandidateLookup, NodeSnapper

__all__ = ["CandidateLookup", "NodeSnapper"]
