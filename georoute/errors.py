'''
Hierarquia de erros do georoute.

Erros de consulta (InvalidInput, NodeNotFound, AlgorithmNotRegistered,
NoPathFound, StoreError) são convertidos em respostas estruturadas pelo
RouteService. IngestionError e InvalidAlgorithmError são fatais.
'''


class GeoRouteError(Exception):
    '''Base de todos os erros do pacote.'''

    kind = "georoute_error"


class InvalidInput(GeoRouteError, ValueError):
    '''Especificação de origem/destino ausente ou malformada.'''

    kind = "invalid_input"


class NodeNotFound(GeoRouteError, LookupError):
    kind = "node_not_found"


class AlgorithmNotRegistered(GeoRouteError, LookupError):
    kind = "algorithm_not_registered"


class InvalidAlgorithmError(GeoRouteError, TypeError):
    '''Tentativa de registrar algo sem name/find_path.'''

    kind = "invalid_algorithm"


class NoPathFound(GeoRouteError):
    '''Busca esgotou a fronteira (ou o limite de iterações) sem chegar ao destino.'''

    kind = "no_path_found"


class IngestionError(GeoRouteError):
    '''Dados de mapa ausentes ou malformados; aborta a importação inteira.'''

    kind = "ingestion_error"


class StoreError(GeoRouteError):
    kind = "store_error"


class GraphNotLoadedError(GeoRouteError):
    kind = "graph_not_loaded"
