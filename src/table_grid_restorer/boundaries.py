# src/table_grid_restorer/boundaries.py
from __future__ import annotations
import logging
from typing import List, Sequence

log = logging.getLogger(__name__)


def is_strictly_increasing(lines: Sequence[float]) -> bool:
    return all(a < b for a, b in zip(lines, lines[1:]))


def ensure_boundaries(lines: Sequence[float],
                      boundary_min: float,
                      boundary_max: float,
                      threshold: float
                      ) -> List[float]:
    """
    Garantiza que los límites de la tabla sean la primera y la última línea.

    - Si la línea extrema está a <= threshold del límite, se ajusta al valor exacto.
    - Si no, el límite se inserta como una línea nueva.
    No modifica `lines`; devuelve una lista nueva.
    """
    if not lines:
        return [boundary_min, boundary_max]

    result = list(lines)

    if abs(result[0] - boundary_min) > threshold:
        result.insert(0, boundary_min)
    else:
        result[0] = boundary_min

    if len(result) == 1 or abs(result[-1] - boundary_max) > threshold:
        # una única línea ya ajustada al mínimo no puede ser también el máximo
        result.append(boundary_max)
    else:
        result[-1] = boundary_max

    if not is_strictly_increasing(result):
        # detecciones fuera del límite de la tabla
        log.warning("Las líneas de la rejilla no son estrictamente crecientes tras ajustar límites "
                    "[%s, %s]: %s", boundary_min, boundary_max, result)
    return result
