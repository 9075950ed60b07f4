# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Grade thresholds and color mappings.

Thresholds are exclusive lower bounds: an index exactly on a threshold
falls into the next lower grade.
"""

from ecoindex_audit.data.models import Grade

# ---------------------------------------------------------------------------
# Grade thresholds (index -> letter grade)
# ---------------------------------------------------------------------------
GRADE_A_ABOVE = 80
GRADE_B_ABOVE = 70
GRADE_C_ABOVE = 55
GRADE_D_ABOVE = 40
GRADE_E_ABOVE = 25
GRADE_F_ABOVE = 10
# 10 and below = G

# ---------------------------------------------------------------------------
# Color thresholds
# ---------------------------------------------------------------------------
GREEN_ABOVE = GRADE_B_ABOVE
YELLOW_ABOVE = GRADE_D_ABOVE
# 40 and below = Red


def score_to_grade(index: float) -> str:
    """Convert an EcoIndex to a letter grade string.

    Returns one of 'A' through 'G'.
    """
    if index > GRADE_A_ABOVE:
        return Grade.A.value
    if index > GRADE_B_ABOVE:
        return Grade.B.value
    if index > GRADE_C_ABOVE:
        return Grade.C.value
    if index > GRADE_D_ABOVE:
        return Grade.D.value
    if index > GRADE_E_ABOVE:
        return Grade.E.value
    if index > GRADE_F_ABOVE:
        return Grade.F.value
    return Grade.G.value


def score_to_color(index: float) -> str:
    """Convert an EcoIndex to a color string.

    Returns 'green', 'yellow', or 'red', consistent with ``Grade.color``.
    """
    if index > GREEN_ABOVE:
        return "green"
    if index > YELLOW_ABOVE:
        return "yellow"
    return "red"
