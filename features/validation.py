import math
import numbers

from app_utils.config import MAX_PLAUSIBLE_WEIGHT, MAX_ROWS, MIN_ROWS

NOT_A_NUMBER = "Certains champs ne sont pas des nombres valides."
NOT_POSITIVE = "Les poids doivent être strictement positifs."
MIN_NOT_BELOW_MAX = "Le poids minimum doit être inférieur au poids maximum."
TOO_FEW_ROWS = f"Le nombre de lignes doit être ≥ {MIN_ROWS}."
TOO_MANY_ROWS = f"Le nombre de lignes doit être ≤ {MAX_ROWS} (pour garder le tableau lisible)."
NO_GOAL = "Sélectionne au moins un objectif."
WEIGHT_TOO_HIGH = f"Poids très élevé (> {MAX_PLAUSIBLE_WEIGHT} kg). Vérifie la saisie."


def is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_whole_number(value) -> bool:
    # 6 and 6.0 count, 2.5 does not
    return is_finite_number(value) and float(value).is_integer()


def validate(params) -> list:
    """Return every problem with `params`, in display order. Never raises.

    Any non-numeric field (or a fractional row count) stops the numeric
    checks, the rest are all reported.
    """
    numeric = (params.min_weight, params.max_weight, params.row_count)
    if not all(is_finite_number(v) for v in numeric) or not is_whole_number(params.row_count):
        return [NOT_A_NUMBER]

    errors = []
    if params.min_weight <= 0 or params.max_weight <= 0:
        errors.append(NOT_POSITIVE)
    if params.min_weight >= params.max_weight:
        errors.append(MIN_NOT_BELOW_MAX)
    if params.row_count < MIN_ROWS:
        errors.append(TOO_FEW_ROWS)
    if params.row_count > MAX_ROWS:
        errors.append(TOO_MANY_ROWS)
    if not params.selection:
        errors.append(NO_GOAL)
    if params.min_weight > MAX_PLAUSIBLE_WEIGHT or params.max_weight > MAX_PLAUSIBLE_WEIGHT:
        errors.append(WEIGHT_TOO_HIGH)
    return errors
