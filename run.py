# run.py
from __future__ import annotations
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent / "src"))
from importlib import import_module
restore_cli = import_module("table_grid_restorer.cli")

# El logging se configura en cli.py según --loglevel.

if __name__ == "__main__":
    sys.exit(restore_cli.main())
