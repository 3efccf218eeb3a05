'''
georoute: roteamento sobre a malha viária extraída do OpenStreetMap.

Fluxo: OSM -> MapIngester -> GraphStore (CSV) -> GraphLoader -> busca
(A*, Dijkstra, Greedy) e snapping de coordenadas para nós do grafo.
'''

__version__ = "0.1.0"
