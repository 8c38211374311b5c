import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from relquery.core.models import Record
from relquery.processor.conditions import ConditionEvaluator, evaluate_condition
from relquery.processor.exceptions import ConditionSyntaxError, InvalidComparisonOperand


def create_unaliased_row() -> Record:
    return Record({"column0": "0", "column1": "1", "column2": "2"})


def create_aliased_row() -> Record:
    return Record({"a.column": "0", "b.column": "1", "c.column": "2"})


def create_name_row() -> Record:
    return Record({"a.column": "Bob", "b.column": "Garry", "c.column": "Dave"})


def test_blank_condition_is_true():
    evaluator = ConditionEvaluator()
    row = create_unaliased_row()

    assert evaluator.evaluate(row, None)
    assert evaluator.evaluate(row, "")
    assert evaluator.evaluate(row, "   ")


def test_unaliased_equality():
    row = create_unaliased_row()

    assert evaluate_condition(row, "column0 = 0")
    assert evaluate_condition(row, "column1 = 1")
    assert evaluate_condition(row, "column2 = 2")
    assert not evaluate_condition(row, "column2 = 3")


def test_aliased_comparators():
    row = create_aliased_row()

    assert evaluate_condition(row, "a.column = 0")
    assert evaluate_condition(row, "b.column < 2")
    assert evaluate_condition(row, "c.column > 1")
    assert not evaluate_condition(row, "c.column < 1")


def test_comparison_without_spaces():
    row = create_aliased_row()

    assert evaluate_condition(row, "a.column=0")
    assert evaluate_condition(row, "c.column>1 AND b.column<2")


def test_field_to_field_comparison():
    row = Record({"a.id": "5", "b.ref": "5", "b.other": "7"})

    assert evaluate_condition(row, "b.ref = a.id")
    assert not evaluate_condition(row, "b.other = a.id")
    assert evaluate_condition(row, "b.other > a.id")


def test_multiple_and_operations():
    row = create_aliased_row()

    assert evaluate_condition(row, "a.column = 0 AND b.column = 1 AND c.column = 2")
    assert not evaluate_condition(row, "a.column = 0 AND b.column = 1 AND c.column = 3")


def test_multiple_or_operations():
    row = create_aliased_row()

    assert evaluate_condition(row, "a.column = 0 OR b.column = 0 OR c.column = 0")
    assert not evaluate_condition(row, "a.column = 9 OR b.column = 9 OR c.column = 9")


def test_and_binds_tighter_than_or():
    row = create_aliased_row()

    assert evaluate_condition(row, "1 OR a.column = 999 AND b.column = 999 AND c.column = 2")
    assert evaluate_condition(row, "1 OR a=999 AND b=999")


def test_parentheses_bind_tightest():
    row = create_aliased_row()

    assert not evaluate_condition(row, "a.column = 999 AND b.column = 999 AND (c.column = 2 OR 1)")
    assert not evaluate_condition(row, "(a=999 AND b=999 AND (c=2 OR 1))")


def test_nested_parentheses():
    row = create_aliased_row()

    condition = ("((a.column = 999 AND b.column = 999 AND c.column = 2) OR 1) "
                 "AND ((1 AND 1) OR (0 AND 1)) AND ((1 AND 1) AND (0 OR 1))")
    assert evaluate_condition(row, condition)


def test_keywords_are_case_insensitive():
    row = create_aliased_row()

    assert evaluate_condition(row, "a.column = 0 and b.column = 1")
    assert evaluate_condition(row, "a.column = 5 Or b.column = 1")


def test_bare_literals():
    row = create_aliased_row()

    assert evaluate_condition(row, "1")
    assert evaluate_condition(row, "(1)")
    assert not evaluate_condition(row, "0")
    assert not evaluate_condition(row, "2")


def test_string_comparison_is_case_sensitive():
    row = create_name_row()

    assert not evaluate_condition(row, 'a.column = "BOB"')
    assert not evaluate_condition(row, 'b.column = "garry"')
    assert evaluate_condition(row, 'c.column = "Dave"')
    assert evaluate_condition(row, "c.column = 'Dave'")


def test_quoted_literal_with_spaces():
    row = Record({"s.last_name": "Von Welden"})

    assert evaluate_condition(row, "s.last_name = 'Von Welden'")


def test_missing_field_resolves_to_null_text():
    row = create_aliased_row()

    assert evaluate_condition(row, "z.column = 'null'")
    assert not evaluate_condition(row, "z.column = 0")


def test_equality_compares_numbers_as_text():
    row = Record({"a": "3"})

    assert evaluate_condition(row, "a = 3")
    assert not evaluate_condition(row, "a = 3.0")


def test_negative_numbers_in_ordering():
    row = Record({"a": "-5"})

    assert evaluate_condition(row, "a < -1")
    assert evaluate_condition(row, "a > -10")


def test_ordering_requires_integer_text():
    row = create_name_row()

    with pytest.raises(InvalidComparisonOperand) as exc_info:
        evaluate_condition(row, "a.column > 1")
    assert exc_info.value.operator == ">"
    assert exc_info.value.operand == "Bob"


def test_ordering_rejects_decimals():
    row = Record({"a": "2.5"})

    with pytest.raises(InvalidComparisonOperand):
        evaluate_condition(row, "a < 3")


def test_malformed_condition_raises():
    row = create_aliased_row()

    with pytest.raises(ConditionSyntaxError):
        evaluate_condition(row, "(a.column = 0")
    with pytest.raises(ConditionSyntaxError):
        evaluate_condition(row, "a.column = 0 AND")
    with pytest.raises(ConditionSyntaxError):
        evaluate_condition(row, "a.column = 'unterminated")


def test_evaluator_caches_parsed_conditions():
    evaluator = ConditionEvaluator()

    first = evaluator.parse("a.column = 0")
    second = evaluator.parse("a.column = 0")

    assert first is second
    assert evaluator.evaluate(create_aliased_row(), "a.column = 0")
