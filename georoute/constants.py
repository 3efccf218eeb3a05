# Constantes globais
EARTH_RADIUS_KM: float = 6371.0

# Tipos de via aceitos na importação (highway)
ALLOWED_HIGHWAYS = {
    "motorway", "trunk", "primary", "secondary", "tertiary",
    "unclassified", "residential", "living_street", "service", "road",
    "primary_link", "secondary_link", "tertiary_link",
}
FORBIDDEN_ACCESS = {"private", "no"}
ONEWAY_FORWARD = {"yes", "true", "1"}
ONEWAY_REVERSE = "-1"

# Velocidades médias por tipo de via (km/h) usadas no custo de tempo das arestas
SPEED_LIMITS_KMH = {
    "motorway":       80,
    "trunk":          70,
    "primary":        60,
    "primary_link":   60,
    "secondary":      50,
    "secondary_link": 50,
    "tertiary":       40,
    "tertiary_link":  40,
    "unclassified":   30,
    "residential":    30,
    "road":           30,
    "service":        20,
    "living_street":  10,
}
DEFAULT_SPEED_KMH: float = 20.0

# Prioridade de via para o snapping (maior = preferida)
HIGHWAY_PRIORITY = {
    "motorway": 5, "trunk": 5,
    "primary": 4,
    "secondary": 3,
    "tertiary": 2,
    "residential": 1, "unclassified": 1, "living_street": 1, "service": 1, "road": 1,
    # vias de pedestre: só usadas como último recurso
    "pedestrian": 0, "footway": 0, "path": 0, "steps": 0, "track": 0,
}

# Segmentos mais curtos que isso (km) são pontos duplicados e não viram aresta
MIN_SEGMENT_KM: float = 0.001

MAX_SEARCH_ITERATIONS: int = 200_000
DEFAULT_SNAP_CANDIDATES: int = 10
DEFAULT_ALGORITHM: str = "astar"

# Arquivos do GraphStore
NODES_FILE = "nodes.csv"
EDGES_FILE = "edges.csv"
WAYS_FILE = "ways.csv"
NODE_COLUMNS = ["osmid", "y", "x"]
EDGE_COLUMNS = ["u", "v", "distance", "cost", "highway", "way_id"]
WAY_COLUMNS = ["id", "nodes", "tags"]
WAY_NODES_SEPARATOR = ";"

DATA_DIR_ENV = "GEOROUTE_DATA_DIR"
DEFAULT_DATA_DIR = "data"
