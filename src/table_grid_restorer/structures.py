# src/table_grid_restorer/structures.py
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

_COORD_KEYS = ("x1", "y1", "x2", "y2")


@dataclass(frozen=True)
class Box:
    """Bounding box detectado (x1, y1, x2, y2) con su score de confianza."""
    x1: float
    y1: float
    x2: float
    y2: float
    score: float = 0.0


@dataclass(frozen=True)
class AlignedCell:
    """Celda alineada a la rejilla. Rangos semiabiertos [start, end)."""
    x1: float
    y1: float
    x2: float
    y2: float
    row_start: int
    row_end: int
    col_start: int
    col_end: int
    row_span: int
    col_span: int
    confidence: float

    @property
    def is_merged(self) -> bool:
        return self.row_span > 1 or self.col_span > 1


@dataclass
class TableStructure:
    """Resultado de la restauración: líneas de la rejilla y celdas alineadas."""
    row_lines: List[float] = field(default_factory=list)
    col_lines: List[float] = field(default_factory=list)
    cells: List[AlignedCell] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        return max(0, len(self.row_lines) - 1)

    @property
    def n_cols(self) -> int:
        return max(0, len(self.col_lines) - 1)

    @property
    def is_empty(self) -> bool:
        return not self.cells and not self.row_lines and not self.col_lines

    def merged_cells(self) -> List[Tuple[int, AlignedCell]]:
        """Devuelve (índice original, celda) de las celdas que abarcan más de una fila/columna."""
        return [(i, c) for i, c in enumerate(self.cells) if c.is_merged]

    def to_dict(self) -> Dict[str, object]:
        return {
            "row_lines": list(self.row_lines),
            "col_lines": list(self.col_lines),
            "n_rows": self.n_rows,
            "n_cols": self.n_cols,
            "cells": [asdict(c) for c in self.cells],
        }


def parse_box(values: Union[Mapping[str, Any], Sequence[Any]]) -> Box:
    """
    Construye un Box desde un dict ({x1, y1, x2, y2, score|confidence})
    o desde una secuencia [x1, y1, x2, y2(, score)].
    """
    if isinstance(values, Mapping):
        missing = [k for k in _COORD_KEYS if k not in values]
        if missing:
            raise ValueError(f"Faltan coordenadas en el box: {missing}")
        coords = [values[k] for k in _COORD_KEYS]
        score = values.get("score", values.get("confidence", 0.0))
    else:
        seq = list(values)
        if len(seq) not in (4, 5):
            raise ValueError("El box debe tener 4 coordenadas y, opcionalmente, un score")
        coords = seq[:4]
        score = seq[4] if len(seq) == 5 else 0.0

    try:
        x1, y1, x2, y2 = (float(v) for v in coords)
        return Box(x1=x1, y1=y1, x2=x2, y2=y2, score=float(score if score is not None else 0.0))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Box inválido: {values!r}") from exc
