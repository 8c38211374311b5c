from typing import Dict, Optional

from relquery.core.models import Record
from .condition import ConditionNode
from .condition_parser import ConditionParser


class ConditionEvaluator:
    """
    Evaluates condition text against single rows. Parsed trees are cached
    per expression, since the same clause is checked against every row.
    """

    def __init__(self):
        self.parser = ConditionParser()
        self._cache: Dict[str, ConditionNode] = {}

    def parse(self, condition_str: Optional[str]) -> ConditionNode:
        key = condition_str or ""
        node = self._cache.get(key)
        if node is None:
            node = self.parser.parse(condition_str)
            self._cache[key] = node
        return node

    def evaluate(self, row: Record, condition_str: Optional[str]) -> bool:
        return self.parse(condition_str).evaluate(row)


def evaluate_condition(row: Record, condition_str: Optional[str]) -> bool:
    return ConditionEvaluator().evaluate(row, condition_str)
