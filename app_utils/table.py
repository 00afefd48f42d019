"""Weight sequence and protein range table.

All rounding goes through `round_half_up` (halves go up, like the browser's
Math.round), so weights and gram bounds agree on boundary values such as 62.5.
"""

import math

import numpy as np

from app_utils.config import RANGE_UNIT, WEIGHT_HEADER


def round_half_up(x) -> int:
    return int(np.floor(float(x) + 0.5))


def clamp(n, low, high):
    return min(max(n, low), high)


def to_number(value, fallback):
    try:
        n = float(value)
    except (TypeError, ValueError):
        return fallback
    return n if math.isfinite(n) else fallback


def generate_weights(min_weight, max_weight, row_count):
    """Evenly spaced weights from min to max, rounded to whole kilograms.

    Rounding is applied per element, so close bounds can repeat a value
    (50..52 over 6 rows gives 50, 50, 51, 51, 52, 52). Repeats are kept.
    """
    if row_count <= 1:
        return [round_half_up(min_weight)]
    # linspace pins the last point to max_weight exactly
    points = np.linspace(float(min_weight), float(max_weight), int(row_count))
    return [int(w) for w in np.floor(points + 0.5)]


def format_range(g_min, g_max) -> str:
    return f"{round_half_up(g_min)} – {round_half_up(g_max)} {RANGE_UNIT}"


def build_table(weights, selected_goals):
    header = [WEIGHT_HEADER] + [g.label for g in selected_goals]
    body = [
        [w] + [format_range(w * g.min, w * g.max) for g in selected_goals]
        for w in weights
    ]
    return [header] + body
