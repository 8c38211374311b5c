from abc import ABC, abstractmethod
from typing import List

from relquery.core.models import Record
from ..exceptions import InvalidComparisonOperand
from ..utils import is_integer, is_number, is_string, unquote


class ConditionNode(ABC):
    @abstractmethod
    def evaluate(self, row: Record) -> bool:
        """
            Evaluate the condition against a given row.
        """
        raise NotImplementedError


class EmptyCondition(ConditionNode):
    """A blank condition; it never filters anything out."""

    def evaluate(self, row: Record) -> bool:
        return True

    def __repr__(self):
        return "EmptyCondition()"


class LiteralCondition(ConditionNode):
    """
    A bare operand standing on its own, e.g. the `1` in `1 OR a = 2`.
    Only the text `1` is true.
    """

    def __init__(self, text: str):
        self.text = text
        self.value = text == "1"

    def evaluate(self, row: Record) -> bool:
        return self.value

    def __repr__(self):
        return f"LiteralCondition({self.text!r})"


class SimpleCondition(ConditionNode):
    def __init__(self, left: str, op: str, right: str):
        self.left = left
        self.op = op
        self.right = right

    def evaluate(self, row: Record) -> bool:
        val_left = self._resolve(self.left, row)
        val_right = self._resolve(self.right, row)

        if self.op == "=":
            return val_left == val_right
        if self.op == ">":
            return self._as_integer(val_left) > self._as_integer(val_right)
        if self.op == "<":
            return self._as_integer(val_left) < self._as_integer(val_right)

        raise ValueError(f"Unsupported operator {self.op}")

    def _resolve(self, operand: str, row: Record) -> str:
        if is_string(operand):
            return unquote(operand)
        if is_number(operand):
            return operand
        return row.get_text(operand)

    def _as_integer(self, value: str) -> int:
        if not is_integer(value):
            raise InvalidComparisonOperand(self.op, value)
        return int(value.strip())

    def __repr__(self):
        return f"SimpleCondition({self.left!r}, {self.op!r}, {self.right!r})"


class ComplexCondition(ConditionNode):
    def __init__(self, op: str, children: List[ConditionNode]):
        self.op = op.upper()
        self.children = children

    def evaluate(self, row: Record) -> bool:
        if self.op == 'AND':
            return all(child.evaluate(row) for child in self.children)
        if self.op == 'OR':
            return any(child.evaluate(row) for child in self.children)
        return False

    def __repr__(self):
        return f"ComplexCondition({self.op!r}, {self.children!r})"
