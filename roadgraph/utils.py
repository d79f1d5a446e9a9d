import math

from .constantes import EARTH_RADIUS_M


def compute_haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    '''
    Distância de grande círculo entre dois pontos WGS84, em metros.

    Parâmetros
    ----------
    lat1, lon1 : ponto A (graus decimais)
    lat2, lon2 : ponto B (graus decimais)

    Retorno
    -------
    float : distância sobre uma esfera de raio EARTH_RADIUS_M
    '''
    sin_dlat = math.sin(math.radians(lat2 - lat1) / 2)
    sin_dlon = math.sin(math.radians(lon2 - lon1) / 2)
    h = sin_dlat ** 2 + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * sin_dlon ** 2

    # atan2 é estável para pontos quase antipodais, onde h arredonda para além de 1
    h = min(h, 1.0)
    return 2.0 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))
