# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Reference quantile tables and quantile interpolation.

Each table holds 21 ascending breakpoints calibrated on the ecoindex.fr
reference sample (https://github.com/cnumr/GreenIT-Analysis). The first
breakpoint is always 0 and the last is an extreme upper bound.
"""

from __future__ import annotations

from collections.abc import Sequence

# ---------------------------------------------------------------------------
# Reference distributions
# ---------------------------------------------------------------------------

QUANTILES_DOM: tuple[float, ...] = (
    0, 47, 75, 159, 233, 298, 358, 417, 476, 537, 603,
    674, 753, 843, 949, 1076, 1237, 1459, 1801, 2479, 594601,
)

QUANTILES_REQUESTS: tuple[float, ...] = (
    0, 2, 15, 25, 34, 42, 49, 56, 63, 70, 78,
    86, 95, 105, 117, 130, 147, 170, 205, 281, 3920,
)

# Megabytes
QUANTILES_SIZE: tuple[float, ...] = (
    0, 1.37, 144.7, 319.53, 479.46, 631.97, 783.38, 937.91, 1098.62, 1265.47, 1448.32,
    1648.27, 1876.08, 2142.06, 2465.37, 2866.31, 3401.59, 4155.73, 5400.08, 8037.54, 223212.26,
)


def compute_quantile(quantiles: Sequence[float], value: float) -> float:
    """Return the interpolated quantile position of *value* in *quantiles*.

    The integer part is the zero-based bucket the value falls into and the
    fractional part its linear position within that bucket. A value equal
    to a breakpoint starts the bucket whose lower edge it is. Values at or
    above the last breakpoint saturate to ``len(quantiles) - 1``.

    Consecutive equal breakpoints are not guarded against: a value that
    lands in such a zero-width bucket raises ``ZeroDivisionError``.
    """
    for i in range(1, len(quantiles)):
        if value < quantiles[i]:
            return i - 1 + (value - quantiles[i - 1]) / (quantiles[i] - quantiles[i - 1])
    return len(quantiles) - 1
