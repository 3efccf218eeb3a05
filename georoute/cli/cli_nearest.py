from georoute.routing import RouteService

def cli_nearest(service: RouteService, lat: float, lon: float) -> int:
    '''
    Imprime o nó escolhido pelo snapping para (lat, lon) e o nó mais
    próximo em linha reta. Convenção: lat, lon em graus decimais.
    '''

    snapshot = service.snapshot()
    best = service.snapper.best_endpoint_for(lat, lon, snapshot.nodes, snapshot.graph)
    if best is None:
        print("Nenhum nó do grafo perto do ponto")
        return 1
    nearest = service.snapper.nearest_node_for(lat, lon, snapshot.nodes)
    print(f"snap={best} nearest={nearest}")
    return 0
