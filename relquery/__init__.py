"""
relquery: an embedded, in-memory relational query evaluator.
"""
from .core import RenderSettings, DEFAULT_SETTINGS
from .core.models import Record, Relation, MISSING
from .processor import (QueryError, ConditionSyntaxError, InvalidComparisonOperand,
                        InconsistentColumnType, QueryConfigurationError)
from .processor.query_builder import QueryBuilder
from .processor.conditions import ConditionEvaluator, evaluate_condition

__version__ = "1.0.0"

__all__ = [
    "RenderSettings",
    "DEFAULT_SETTINGS",
    "Record",
    "Relation",
    "MISSING",
    "QueryBuilder",
    "ConditionEvaluator",
    "evaluate_condition",
    "QueryError",
    "ConditionSyntaxError",
    "InvalidComparisonOperand",
    "InconsistentColumnType",
    "QueryConfigurationError",
]
