from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import pandas as pd

from app_utils.config import (
    DEFAULT_MAX_WEIGHT,
    DEFAULT_MIN_WEIGHT,
    DEFAULT_ROWS,
    DEFAULT_SELECTION,
    WEIGHT_HEADER,
)
from app_utils.goals import GoalDefinition, selected_goals
from app_utils.table import build_table, generate_weights
from features.validation import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parameters:
    min_weight: float
    max_weight: float
    row_count: int
    selection: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class Plan:
    violations: List[str]
    weights: List[int]
    goals: Tuple[GoalDefinition, ...]
    table: List[list]

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def body(self) -> List[list]:
        return self.table[1:]


def default_parameters() -> Parameters:
    return Parameters(DEFAULT_MIN_WEIGHT, DEFAULT_MAX_WEIGHT, DEFAULT_ROWS, DEFAULT_SELECTION)


def plan(params: Parameters) -> Plan:
    """Validate `params` and, when they are valid, build the protein table.

    Invalid parameters give an empty table and the list of messages to show.
    """
    goals = selected_goals(params.selection)
    violations = validate(params)
    if violations:
        return Plan(violations=violations, weights=[], goals=goals, table=[])

    weights = generate_weights(params.min_weight, params.max_weight, int(params.row_count))
    table = build_table(weights, goals)
    logger.debug("Built %d rows for goals %s", len(weights), [g.key for g in goals])
    return Plan(violations=[], weights=weights, goals=goals, table=table)


def table_frame(p: Plan) -> pd.DataFrame:
    if not p.table:
        return pd.DataFrame(columns=[WEIGHT_HEADER])
    header, body = p.table[0], p.table[1:]
    return pd.DataFrame(body, columns=header)
