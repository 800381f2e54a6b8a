# src/table_grid_restorer/parser.py
from __future__ import annotations
import csv
import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from .structures import AlignedCell, Box, TableStructure, parse_box

log = logging.getLogger(__name__)

BOUNDARY_KEYS = ("table_boundary", "boundary")


def boundary_from_cells(cells: Sequence[Box]) -> Optional[Box]:
    """Box envolvente de todas las celdas (para cuando no se indica el límite de la tabla)."""
    if not cells:
        return None
    return Box(
        x1=min(c.x1 for c in cells),
        y1=min(c.y1 for c in cells),
        x2=max(c.x2 for c in cells),
        y2=max(c.y2 for c in cells),
    )


def _load_json(path: Path) -> Tuple[List[Box], Optional[Box]]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data: Any = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"JSON inválido en {path}: {exc}") from exc

    boundary = None
    if isinstance(data, dict):
        raw_cells = data.get("cells", [])
        for key in BOUNDARY_KEYS:
            if data.get(key) is not None:
                boundary = parse_box(data[key])
                break
    elif isinstance(data, list):
        raw_cells = data
    else:
        raise ValueError(f"Formato JSON no soportado en {path}: se esperaba un objeto o una lista")

    if not isinstance(raw_cells, list):
        raise ValueError(f"'cells' debe ser una lista en {path}")
    return [parse_box(c) for c in raw_cells], boundary


def _load_csv(path: Path) -> Tuple[List[Box], Optional[Box]]:
    """
    Columnas: x1,y1,x2,y2[,score][,kind]. Una fila con kind=boundary
    define el límite de la tabla.
    """
    cells: List[Box] = []
    boundary = None
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for i, row in enumerate(reader, start=2):
            kind = (row.pop("kind", None) or "cell").strip().lower()
            row = {k.strip(): v for k, v in row.items() if k and v not in (None, "")}
            try:
                box = parse_box(row)
            except ValueError as exc:
                raise ValueError(f"{path}, línea {i}: {exc}") from exc
            if kind == "boundary":
                boundary = box
            else:
                cells.append(box)
    return cells, boundary


def load_detections(path: str) -> Tuple[List[Box], Optional[Box]]:
    """Lee las celdas detectadas y, si existe, el límite de la tabla desde JSON o CSV."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    suffix = p.suffix.lower()
    if suffix == ".json":
        cells, boundary = _load_json(p)
    elif suffix == ".csv":
        cells, boundary = _load_csv(p)
    else:
        raise ValueError(f"Extensión no soportada: {p.suffix!r} (use .json o .csv)")

    log.info("Se leyeron %d celdas desde %s (límite de tabla: %s)",
             len(cells), path, "sí" if boundary else "no")
    return cells, boundary


def load_structure(path: str) -> TableStructure:
    """Lee un TableStructure previamente exportado con `structure_to_json`."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    try:
        return TableStructure(
            row_lines=[float(v) for v in data.get("row_lines", [])],
            col_lines=[float(v) for v in data.get("col_lines", [])],
            cells=[AlignedCell(**c) for c in data.get("cells", [])],
        )
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"Estructura inválida en {path}: {exc}") from exc
