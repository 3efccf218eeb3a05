from georoute.routing import RouteService

def cli_stats(service: RouteService) -> int:
    '''
    Carrega o grafo e imprime estatísticas básicas: |V|, |E| e nós isolados.
    '''

    stats = service.graph_stats()
    if not stats["success"]:
        print(f"Erro: {stats['message']}")
        return 1
    print(f"RoadGraph |V|={stats['total_nodes']} |E|={stats['total_edges']:g} "
          f"conectados={stats['connected_nodes']} isolados={stats['isolated_nodes']}")
    return 0
