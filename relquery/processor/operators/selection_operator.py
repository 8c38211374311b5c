import logging
from typing import Optional

from relquery.core.models import Record, Relation
from ..conditions import ConditionEvaluator

logger = logging.getLogger(__name__)


class SelectionOperator:
    """
    Staged row filter used while rows are being acquired.

    A condition that compares a field missing from the relation's schema
    against a literal is not enforced yet: the row passes, and a later
    stage that does hold the field applies it.
    """

    def __init__(self, evaluator: Optional[ConditionEvaluator] = None):
        self.evaluator = evaluator or ConditionEvaluator()

    def is_enforceable(self, relation: Relation, condition: Optional[str]) -> bool:
        if condition is None:
            return False
        enforceable = relation.contains_columns_in_expression(condition)
        if not enforceable:
            logger.debug(f"Deferring condition {condition!r}: fields not in schema {relation.fields}")
        return enforceable

    def accepts(self, row: Record, condition: Optional[str], enforceable: bool) -> bool:
        if condition is None or not enforceable:
            return True
        return self.evaluator.evaluate(row, condition)
