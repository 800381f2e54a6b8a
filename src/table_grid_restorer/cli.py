from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import RestorationConfig
from .exporters import format_summary
from .main import restore_file
from .structures import Box

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Restaura la rejilla de una tabla a partir de celdas detectadas (JSON o CSV)."
    )
    parser.add_argument("input_path", type=str, help="Archivo .json o .csv con las celdas detectadas")
    parser.add_argument("--output", type=str, help="Ruta del JSON de salida con la estructura restaurada")
    parser.add_argument("--csv", type=str, help="Ruta opcional del CSV de celdas alineadas")
    parser.add_argument("--boundary", type=float, nargs=4, metavar=("X1", "Y1", "X2", "Y2"),
                        help="Límite de la tabla: x1 y1 x2 y2 (tiene prioridad sobre el del archivo)")
    parser.add_argument("--threshold", type=float,
                        help="Umbral de agrupamiento de coordenadas (default: 2.0 o $TABLE_GRID_CLUSTER_THRESHOLD)")
    parser.add_argument("--min-confidence", type=float, help="Descarta detecciones con score menor")
    parser.add_argument("--no-cells-csv", action="store_true",
                        help="No escribir el CSV de celdas junto al JSON de salida")
    parser.add_argument("--summary", action="store_true", help="Imprime un resumen de la rejilla")
    parser.add_argument("--loglevel", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Nivel de verbosidad del log (default: INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        config = RestorationConfig.from_env()
        if args.threshold is not None:
            config.cluster_threshold = args.threshold
        if args.min_confidence is not None:
            config.min_confidence = args.min_confidence
        if args.no_cells_csv:
            config.write_cells_csv = False

        boundary = Box(*args.boundary) if args.boundary else None
        structure = restore_file(
            args.input_path,
            args.output,
            config=config,
            table_boundary=boundary,
            csv_path=args.csv,
        )
    except FileNotFoundError:
        log.error("Error: No se encontró el archivo de entrada: %s", args.input_path)
        return 1
    except Exception as e:
        log.error("Ocurrió un error inesperado: %s", e, exc_info=True)
        return 1

    if args.summary:
        print(format_summary(structure))
    log.info("✔ Proceso completado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
