# src/table_grid_restorer/exporters.py
from __future__ import annotations
from pathlib import Path
from typing import List
import csv
import json

from .structures import TableStructure

CELL_COLUMNS = [
    "index", "row_start", "row_end", "col_start", "col_end",
    "row_span", "col_span", "x1", "y1", "x2", "y2", "confidence",
]


def _ensure_parent_dir(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def structure_to_json(structure: TableStructure, json_path: str) -> None:
    _ensure_parent_dir(json_path)
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(structure.to_dict(), f, indent=2)


def cells_to_csv(structure: TableStructure, csv_path: str) -> None:
    """Una fila por celda alineada, en el mismo orden que la entrada."""
    _ensure_parent_dir(csv_path)
    with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
        w = csv.writer(f)
        w.writerow(CELL_COLUMNS)
        for i, c in enumerate(structure.cells):
            w.writerow([i, c.row_start, c.row_end, c.col_start, c.col_end,
                        c.row_span, c.col_span, c.x1, c.y1, c.x2, c.y2, c.confidence])


def format_summary(structure: TableStructure, sample: int = 10) -> str:
    """Resumen legible: dimensiones de la rejilla, líneas, muestra de celdas y celdas fusionadas."""
    out: List[str] = ["=== Estructura de la rejilla ==="]
    out.append(f"Filas: {len(structure.row_lines)} líneas")
    out.append(f"Columnas: {len(structure.col_lines)} líneas")
    out.append(f"Dimensiones: {structure.n_rows} filas x {structure.n_cols} columnas")
    out.append("")

    out.append("Líneas de fila (y):")
    out.extend(f"  Fila {i}: {y:.2f}" for i, y in enumerate(structure.row_lines))
    out.append("Líneas de columna (x):")
    out.extend(f"  Col {i}: {x:.2f}" for i, x in enumerate(structure.col_lines))
    out.append("")

    merged = structure.merged_cells()
    out.append(f"Total de celdas: {len(structure.cells)}")
    out.append(f"Celdas fusionadas: {len(merged)}")

    shown = structure.cells[:max(0, sample)]
    if shown:
        out.append("")
        out.append(f"Muestra de celdas (primeras {len(shown)}):")
        for i, c in enumerate(shown, start=1):
            out.append(f"Celda {i}: [{c.row_start}:{c.row_end}, {c.col_start}:{c.col_end}] "
                       f"span {c.row_span} x {c.col_span} "
                       f"bbox [{c.x1:.2f}, {c.y1:.2f}, {c.x2:.2f}, {c.y2:.2f}] "
                       f"conf {c.confidence:.2f}")

    if merged:
        out.append("")
        out.append("=== Celdas fusionadas ===")
        for n, (i, c) in enumerate(merged, start=1):
            out.append(f"Fusionada {n} (celda original {i + 1}): [{c.row_start}:{c.row_end}, "
                       f"{c.col_start}:{c.col_end}] {c.row_span} filas x {c.col_span} columnas")

    return "\n".join(out)
