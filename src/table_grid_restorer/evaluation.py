from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import numpy as np
import pandas as pd

from .structures import TableStructure

POSITION_COLUMNS = ["row_start", "row_end", "col_start", "col_end"]
SPAN_COLUMNS = ["row_span", "col_span"]
BBOX_COLUMNS = ["x1", "y1", "x2", "y2"]


@dataclass
class StructureEvaluation:
    position_accuracy: float
    span_accuracy: float
    bbox_mse: float
    bbox_rmse: float
    total_cells: int
    matched_cells: int
    predicted_cells: int

    def to_dict(self) -> Dict[str, object]:
        # NaN no es JSON válido
        return {
            key: None if isinstance(value, float) and np.isnan(value) else value
            for key, value in self.__dict__.items()
        }


def _read_reference(path: str) -> pd.DataFrame:
    df = pd.read_csv(path, encoding="utf-8-sig")
    missing = [c for c in POSITION_COLUMNS + SPAN_COLUMNS + BBOX_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Faltan columnas en la referencia {path}: {missing}")
    return df


def _structure_frame(structure: TableStructure) -> pd.DataFrame:
    columns = POSITION_COLUMNS + SPAN_COLUMNS + BBOX_COLUMNS
    return pd.DataFrame(
        [[getattr(c, col) for col in columns] for c in structure.cells],
        columns=columns,
    )


def evaluate_structure(predicted: TableStructure, reference_csv: str) -> StructureEvaluation:
    """
    Compara celda a celda (por orden) la estructura predicha contra una
    referencia en el formato de `cells_to_csv`. Las celdas sobrantes o
    faltantes cuentan como no coincidentes.
    """
    df_ref = _read_reference(reference_csv)
    df_pred = _structure_frame(predicted)

    total_cells = len(df_ref)
    length = min(total_cells, len(df_pred))
    ref = df_ref.iloc[:length]
    pred = df_pred.iloc[:length]

    if length:
        pos_match = (ref[POSITION_COLUMNS].to_numpy() == pred[POSITION_COLUMNS].to_numpy()).all(axis=1)
        span_match = (ref[SPAN_COLUMNS].to_numpy() == pred[SPAN_COLUMNS].to_numpy()).all(axis=1)
        errors = pred[BBOX_COLUMNS].to_numpy(dtype=float) - ref[BBOX_COLUMNS].to_numpy(dtype=float)
        bbox_mse = float(np.mean(errors ** 2))
    else:
        pos_match = np.zeros(0, dtype=bool)
        span_match = np.zeros(0, dtype=bool)
        bbox_mse = float("nan")

    denom = max(total_cells, len(df_pred))
    matched = int(pos_match.sum())
    return StructureEvaluation(
        position_accuracy=matched / denom if denom else 0.0,
        span_accuracy=int(span_match.sum()) / denom if denom else 0.0,
        bbox_mse=bbox_mse,
        bbox_rmse=float(np.sqrt(bbox_mse)),
        total_cells=total_cells,
        matched_cells=matched,
        predicted_cells=len(df_pred),
    )


def write_report(evaluation: StructureEvaluation, output_path: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["Metric", "Value", "N"])
        writer.writerow(["position_accuracy", f"{evaluation.position_accuracy:.4f}", evaluation.total_cells])
        writer.writerow(["span_accuracy", f"{evaluation.span_accuracy:.4f}", evaluation.total_cells])
        writer.writerow(["bbox_mse", f"{evaluation.bbox_mse:.6f}", evaluation.total_cells])
        writer.writerow(["bbox_rmse", f"{evaluation.bbox_rmse:.6f}", evaluation.total_cells])
