from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from .evaluation import evaluate_structure, write_report
from .parser import load_structure

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Evalúa una estructura restaurada contra un CSV de referencia (posición, span, error de bbox)."
    )
    parser.add_argument("--predicted", required=True, help="JSON generado por table-grid-restore.")
    parser.add_argument("--reference", required=True, help="CSV de celdas de referencia (ground truth).")
    parser.add_argument("--report", help="Ruta opcional para guardar un reporte CSV con las métricas.")
    parser.add_argument("--json", help="Ruta opcional para guardar métricas en JSON.")
    parser.add_argument("--loglevel", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    evaluation = evaluate_structure(load_structure(args.predicted), args.reference)

    log.info("Position accuracy: %.4f (%d/%d)", evaluation.position_accuracy,
             evaluation.matched_cells, evaluation.total_cells)
    log.info("Span accuracy: %.4f", evaluation.span_accuracy)
    log.info("BBox -> MSE: %.6f RMSE: %.6f", evaluation.bbox_mse, evaluation.bbox_rmse)

    if args.report:
        write_report(evaluation, args.report)
        log.info("Reporte CSV guardado en %s", args.report)

    if args.json:
        Path(args.json).parent.mkdir(parents=True, exist_ok=True)
        with open(args.json, "w", encoding="utf-8") as fh:
            json.dump(evaluation.to_dict(), fh, indent=2)
        log.info("Reporte JSON guardado en %s", args.json)


if __name__ == "__main__":
    main()
