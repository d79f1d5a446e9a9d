# Constantes globais
EARTH_RADIUS_M: float = 6_371_000.0

# Somente vias de veículos, sem 'service': evita calçadões e vias internas o máximo possível.
ALLOWED_HIGHWAY_TYPES = frozenset({
    "motorway", "trunk", "primary", "secondary", "tertiary",
    "unclassified", "residential", "living_street",
    "motorway_link", "trunk_link", "primary_link", "secondary_link", "tertiary_link",
})

# Elementos do XML do OSM
NODE_ELEMENT = "node"
WAY_ELEMENT = "way"
ND_ELEMENT = "nd"
TAG_ELEMENT = "tag"

# Chaves de tag
HIGHWAY_KEY = "highway"
MAXSPEED_KEY = "maxspeed"
NAME_KEY = "name"

WAY_TAG_KEYS = (HIGHWAY_KEY, MAXSPEED_KEY, NAME_KEY)
