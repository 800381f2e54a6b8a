"""Shared fixtures: detections taken from a real table-detection run."""

from __future__ import annotations

from typing import List

import pytest

from table_grid_restorer.structures import Box

DETECTED_CELLS = [
    (456.44, 268.89, 615.14, 287.33, 0.82), (266.45, 268.86, 456.69, 287.12, 0.82),
    (265.27, 119.50, 454.09, 139.63, 0.82), (457.27, 287.21, 616.66, 305.49, 0.82),
    (267.59, 286.98, 457.12, 305.28, 0.82), (264.04, 250.25, 456.26, 268.88, 0.82),
    (453.75, 119.56, 613.97, 139.45, 0.82), (263.28, 231.66, 454.82, 250.41, 0.82),
    (456.03, 250.16, 616.44, 268.84, 0.81), (256.32, 92.20, 453.58, 119.81, 0.81),
    (19.57, 119.84, 268.35, 139.97, 0.81), (454.63, 231.52, 615.49, 250.24, 0.81),
    (19.21, 268.77, 274.57, 287.22, 0.81), (267.05, 305.25, 455.82, 324.34, 0.81),
    (19.46, 250.16, 272.71, 268.78, 0.81), (453.28, 92.32, 614.71, 119.74, 0.81),
    (455.73, 305.49, 620.12, 324.30, 0.81), (453.81, 139.34, 614.48, 158.31, 0.80),
    (19.59, 287.12, 274.21, 305.35, 0.80), (614.85, 119.02, 728.94, 139.07, 0.80),
    (19.18, 231.92, 275.26, 250.37, 0.80), (616.54, 287.05, 729.10, 305.30, 0.80),
    (263.64, 212.71, 453.86, 231.60, 0.80), (616.59, 268.65, 729.54, 287.05, 0.80),
    (617.04, 249.84, 729.83, 268.50, 0.79), (269.64, 139.41, 454.76, 158.34, 0.79),
    (19.97, 305.24, 274.73, 324.25, 0.79), (454.82, 324.04, 621.31, 344.52, 0.79),
    (616.66, 231.46, 729.12, 249.94, 0.79), (268.94, 324.02, 454.84, 345.19, 0.79),
    (264.59, 194.41, 455.32, 212.91, 0.79), (621.20, 305.38, 729.14, 323.84, 0.78),
    (19.73, 92.72, 261.12, 120.11, 0.78), (19.57, 139.88, 270.51, 158.80, 0.78),
    (454.88, 194.69, 615.82, 212.88, 0.77), (266.20, 175.42, 455.25, 194.50, 0.77),
    (20.88, 323.95, 274.15, 346.56, 0.77), (20.07, 176.74, 269.70, 194.61, 0.77),
    (614.91, 139.02, 729.68, 157.92, 0.77), (614.86, 60.38, 727.41, 91.85, 0.77),
    (20.64, 194.71, 268.55, 213.08, 0.75), (248.24, 61.15, 453.89, 91.44, 0.75),
    (453.61, 61.94, 613.45, 91.64, 0.75), (622.46, 323.70, 728.52, 344.30, 0.75),
    (19.93, 212.89, 271.63, 231.74, 0.73), (454.22, 212.66, 615.78, 231.23, 0.73),
    (455.15, 175.75, 616.30, 194.59, 0.73), (19.67, 158.92, 269.28, 176.87, 0.69),
    (613.84, 92.42, 728.26, 119.03, 0.68), (616.32, 158.08, 730.83, 175.77, 0.68),
    (21.63, 60.20, 249.90, 91.47, 0.66), (616.23, 175.75, 730.20, 194.02, 0.64),
    (616.27, 210.71, 728.64, 231.40, 0.50), (269.68, 158.29, 454.27, 175.95, 0.47),
    (455.34, 158.47, 615.72, 175.77, 0.41), (616.88, 193.91, 729.81, 212.28, 0.41),
]

DETECTED_BOUNDARY = Box(17.13, 55.46, 737.41, 359.02, 0.98)


@pytest.fixture
def detected_cells() -> List[Box]:
    return [Box(*values) for values in DETECTED_CELLS]


@pytest.fixture
def detected_boundary() -> Box:
    return DETECTED_BOUNDARY


@pytest.fixture
def two_cell_row() -> List[Box]:
    """Two side-by-side cells in a single row."""
    return [
        Box(x1=0, y1=0, x2=50, y2=20, score=0.9),
        Box(x1=50, y1=0, x2=100, y2=20, score=0.8),
    ]


@pytest.fixture
def merged_header_table() -> List[Box]:
    """A header cell spanning two columns above two body cells."""
    return [
        Box(x1=0, y1=0, x2=100, y2=10, score=0.95),
        Box(x1=0, y1=10, x2=50, y2=20, score=0.7),
        Box(x1=50, y1=10, x2=100, y2=20, score=0.6),
    ]
