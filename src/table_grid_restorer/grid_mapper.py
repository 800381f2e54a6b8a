# src/table_grid_restorer/grid_mapper.py
from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

import numpy as np

from .structures import AlignedCell, Box

log = logging.getLogger(__name__)


def find_closest_line_index(lines: Sequence[float], coord: float) -> int:
    """Índice de la línea más cercana a `coord`. En empates gana el índice menor."""
    if len(lines) == 0:
        return 0
    dists = np.abs(np.asarray(lines, dtype=float) - coord)
    return int(np.argmin(dists))


def _resolve_span(start: int, end: int, n_lines: int) -> Tuple[int, int]:
    """Normaliza un rango de índices para que abarque al menos una celda."""
    # rango invertido (end < start): se colapsa y cae en la regla de span cero
    end = max(end, start)
    if end == start:
        if start >= n_lines - 1 and n_lines >= 2:
            # ambos bordes en la última línea: se toma la última celda
            start, end = n_lines - 2, n_lines - 1
        else:
            end = start + 1
    return start, end


def map_cell_to_grid(box: Box,
                     row_lines: Sequence[float],
                     col_lines: Sequence[float]
                     ) -> AlignedCell:
    col_start, col_end = _resolve_span(
        find_closest_line_index(col_lines, box.x1),
        find_closest_line_index(col_lines, box.x2),
        len(col_lines),
    )
    row_start, row_end = _resolve_span(
        find_closest_line_index(row_lines, box.y1),
        find_closest_line_index(row_lines, box.y2),
        len(row_lines),
    )

    return AlignedCell(
        x1=col_lines[col_start],
        y1=row_lines[row_start],
        x2=col_lines[col_end],
        y2=row_lines[row_end],
        row_start=row_start,
        row_end=row_end,
        col_start=col_start,
        col_end=col_end,
        row_span=row_end - row_start,
        col_span=col_end - col_start,
        confidence=box.score,
    )


def map_cells_to_grid(cells: Sequence[Box],
                      row_lines: Sequence[float],
                      col_lines: Sequence[float]
                      ) -> List[AlignedCell]:
    """Alinea cada celda a la rejilla, conservando el orden de entrada."""
    aligned = [map_cell_to_grid(box, row_lines, col_lines) for box in cells]
    log.debug("%d celdas alineadas a una rejilla de %d x %d líneas",
              len(aligned), len(row_lines), len(col_lines))
    return aligned
