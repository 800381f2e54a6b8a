"""Configuración de la restauración de rejillas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CLUSTER_THRESHOLD = 2.0

ENV_CLUSTER_THRESHOLD = "TABLE_GRID_CLUSTER_THRESHOLD"
ENV_MIN_CONFIDENCE = "TABLE_GRID_MIN_CONFIDENCE"


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} debe ser numérico, se recibió {raw!r}") from exc


@dataclass
class RestorationConfig:
    """Parámetros de ejecución del pipeline de restauración.

    Attributes:
        cluster_threshold: Distancia máxima (en unidades de los boxes) para
            fusionar dos coordenadas en una misma línea.
        min_confidence: Si se indica, las detecciones con score menor se
            descartan antes de restaurar (solo en el pipeline de archivos).
        write_cells_csv: Escribir además el CSV de celdas junto al JSON.
    """

    cluster_threshold: float = DEFAULT_CLUSTER_THRESHOLD
    min_confidence: Optional[float] = None
    write_cells_csv: bool = True

    @classmethod
    def from_env(cls) -> "RestorationConfig":
        threshold = _env_float(ENV_CLUSTER_THRESHOLD)
        return cls(
            cluster_threshold=DEFAULT_CLUSTER_THRESHOLD if threshold is None else threshold,
            min_confidence=_env_float(ENV_MIN_CONFIDENCE),
        )


__all__ = ["DEFAULT_CLUSTER_THRESHOLD", "RestorationConfig"]
