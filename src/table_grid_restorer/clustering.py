# src/table_grid_restorer/clustering.py
from __future__ import annotations
import logging
from typing import Iterable, List

import numpy as np

log = logging.getLogger(__name__)


def cluster_coordinates(coords: Iterable[float], threshold: float) -> List[float]:
    """Agrupa coordenadas cercanas y devuelve el promedio de cada grupo.

    El agrupamiento es encadenado: cada valor se compara con el último valor
    añadido al grupo actual (no con su media), así que un grupo puede abarcar
    más que `threshold` si los valores forman una cadena de vecinos cercanos.
    """
    values = sorted(float(c) for c in coords)
    if not values:
        return []

    centers: List[float] = []
    current = [values[0]]
    for value in values[1:]:
        if value - current[-1] <= threshold:
            current.append(value)
        else:
            centers.append(float(np.mean(current)))
            current = [value]
    centers.append(float(np.mean(current)))

    log.debug("%d coordenadas agrupadas en %d líneas (umbral=%s)", len(values), len(centers), threshold)
    return centers
