from dataclasses import dataclass

from app_utils.export import cell_text


@dataclass(frozen=True)
class GoalDefinition:
    key: str
    label: str
    min: float  # g/kg/day
    max: float


GOALS = (
    GoalDefinition("sedentaire", "Sédentaire", 0.8, 1.0),
    GoalDefinition("endurance", "Endurance", 1.2, 1.6),
    GoalDefinition("conservation", "Conservation de la masse musculaire", 1.6, 1.8),
    GoalDefinition("prise", "Prise de masse musculaire", 1.8, 2.2),
)

GOAL_KEYS = tuple(g.key for g in GOALS)


def toggle_goal(selection, key):
    """Return a new selection with `key` flipped. Unknown keys are ignored."""
    current = frozenset(selection)
    if key not in GOAL_KEYS:
        return current
    if key in current:
        return current - {key}
    return current | {key}


def selected_goals(selection):
    # catalog order, whatever order the selection came in
    return tuple(g for g in GOALS if g.key in selection)


def goal_hint(goal: GoalDefinition) -> str:
    return f"({cell_text(goal.min)}–{cell_text(goal.max)} g/kg/j)"
