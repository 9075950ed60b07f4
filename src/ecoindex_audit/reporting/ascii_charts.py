# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly gauges and value formatting.

These functions return Rich-markup strings that render in the terminal
via the Rich library.
"""

from __future__ import annotations

from ecoindex_audit.scoring.thresholds import score_to_color, score_to_grade

_BYTE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def score_gauge(index: float, width: int = 20) -> str:
    """Large visual gauge with color coding.

    The bar is clamped to 0-100 but the printed value is the raw index.

    Returns something like: [green]████████████████░░░░[/] 82.4/100 [green]A[/]
    """
    clamped = max(0.0, min(100.0, index))
    filled = int(clamped / 100 * width)
    empty = width - filled

    color = score_to_color(index)
    bar = "█" * filled + "░" * empty
    grade = score_to_grade(index)
    return f"[{color}]{bar}[/] {index:.1f}/100 [{color}]{grade}[/]"


def format_bytes(size: float) -> str:
    """Human-readable byte count, e.g. ``1.5 MiB``."""
    value = float(size)
    for unit in _BYTE_UNITS:
        if abs(value) < 1024 or unit == _BYTE_UNITS[-1]:
            if unit == "B":
                return f"{value:,.0f} {unit}"
            return f"{value:,.1f} {unit}"
        value /= 1024
    return f"{value:,.1f} {_BYTE_UNITS[-1]}"
