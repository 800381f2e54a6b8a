from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .boundaries import ensure_boundaries
from .clustering import cluster_coordinates
from .config import RestorationConfig
from .exporters import cells_to_csv, structure_to_json
from .grid_mapper import map_cells_to_grid
from .parser import boundary_from_cells, load_detections
from .structures import Box, TableStructure

log = logging.getLogger(__name__)


def _cells_csv_path(json_path: str) -> Path:
    path = Path(json_path)
    return path.with_name(f"{path.stem}.cells.csv")


def restore_table_structure(
    cells: Sequence[Box],
    table_boundary: Box,
    cluster_threshold: float,
) -> TableStructure:
    """
    Reconstruye la rejilla de la tabla a partir de las celdas detectadas.

    1. Agrupa las coordenadas x (x1, x2) e y (y1, y2) en líneas.
    2. Asegura que los límites de la tabla sean la primera/última línea de cada eje.
    3. Alinea cada celda a sus líneas más cercanas y calcula su span.

    Sin celdas devuelve una estructura vacía, sin consultar `table_boundary`.
    """
    if not cells:
        return TableStructure()

    x_coords: List[float] = []
    y_coords: List[float] = []
    for cell in cells:
        x_coords.extend((cell.x1, cell.x2))
        y_coords.extend((cell.y1, cell.y2))

    col_lines = ensure_boundaries(
        cluster_coordinates(x_coords, cluster_threshold),
        table_boundary.x1, table_boundary.x2, cluster_threshold,
    )
    row_lines = ensure_boundaries(
        cluster_coordinates(y_coords, cluster_threshold),
        table_boundary.y1, table_boundary.y2, cluster_threshold,
    )
    log.debug("Rejilla: %d líneas de fila, %d líneas de columna", len(row_lines), len(col_lines))

    return TableStructure(
        row_lines=row_lines,
        col_lines=col_lines,
        cells=map_cells_to_grid(cells, row_lines, col_lines),
    )


def restore_file(
    input_path: str,
    output_path: Optional[str] = None,
    *,
    config: Optional[RestorationConfig] = None,
    table_boundary: Optional[Box] = None,
    csv_path: Optional[str] = None,
) -> TableStructure:
    """
    Pipeline completo: lee detecciones, restaura la rejilla y exporta a JSON/CSV.
    Un `table_boundary` explícito tiene prioridad sobre el del archivo.
    """
    config = config or RestorationConfig()

    log.info("Leyendo detecciones desde: %s", input_path)
    cells, file_boundary = load_detections(input_path)

    if config.min_confidence is not None:
        kept = [c for c in cells if c.score >= config.min_confidence]
        if len(kept) < len(cells):
            log.warning("Se descartaron %d celdas con score < %s",
                        len(cells) - len(kept), config.min_confidence)
        cells = kept

    if not cells:
        log.warning("No hay celdas para restaurar. Se generará una estructura vacía.")
        structure = TableStructure()
    else:
        boundary = table_boundary or file_boundary
        if boundary is None:
            boundary = boundary_from_cells(cells)
            log.info("No se indicó límite de tabla; se usa el box envolvente: %s", boundary)
        structure = restore_table_structure(cells, boundary, config.cluster_threshold)
    log.info("Rejilla restaurada: %d filas x %d columnas, %d celdas (%d fusionadas)",
             structure.n_rows, structure.n_cols, len(structure.cells), len(structure.merged_cells()))

    if output_path:
        structure_to_json(structure, output_path)
        log.info("JSON escrito en: %s", output_path)
        if config.write_cells_csv and csv_path is None:
            csv_path = str(_cells_csv_path(output_path))
    if csv_path:
        cells_to_csv(structure, csv_path)
        log.info("CSV de celdas escrito en: %s", csv_path)

    return structure
