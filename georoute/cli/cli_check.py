from georoute.routing import RouteService

def cli_check(service: RouteService) -> int:
    '''
    Imprime o diagnóstico de conectividade do grafo (componentes, graus,
    arestas inválidas e recomendações).
    '''

    report = service.check_graph()
    if not report["success"]:
        print(f"Erro: {report['message']}")
        return 1
    print(f"Nós: {report['total_nodes']} | Arestas dirigidas: {report['total_edges']}")
    print(f"Conectados: {report['connected_nodes']} | Isolados: {report['isolated_nodes']}")
    print("Distribuição de graus (maiores primeiro):")
    for degree, count in report["degree_distribution"]:
        print(f"  grau {degree}: {count} nós")
    print(f"Componentes: {report['component_count']} | maiores: {report['largest_components']}")
    print(f"Maior componente: {report['largest_component_share']:.2%} dos nós conectados")
    print(f"Arestas inválidas: {report['invalid_edges']}")
    for warning in report["warnings"]:
        print(f"AVISO: {warning}")
    return 0
