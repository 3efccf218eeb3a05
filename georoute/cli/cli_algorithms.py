from georoute.routing import RouteService

def cli_algorithms(service: RouteService) -> int:
    for name in service.list_algorithms():
        algorithm = service.registry.get(name)
        note = "" if getattr(algorithm, "optimal", True) else " (aproximado)"
        print(f"{name}{note}")
    return 0
