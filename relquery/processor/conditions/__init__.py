from .condition_parser import ConditionParser
from .condition import (ConditionNode, EmptyCondition, LiteralCondition,
                        SimpleCondition, ComplexCondition)
from .condition_evaluator import ConditionEvaluator, evaluate_condition

__all__ = [
    "ConditionParser",
    "ConditionNode",
    "EmptyCondition",
    "LiteralCondition",
    "SimpleCondition",
    "ComplexCondition",
    "ConditionEvaluator",
    "evaluate_condition",
]
