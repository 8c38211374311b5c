import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from relquery.core.models import Record, Relation
from relquery.processor import QueryProcessor
from relquery.processor.query_builder import QueryBuilder
from relquery.processor.exceptions import InvalidComparisonOperand


def _make_relation(fields, data) -> Relation:
    return Relation.from_values(fields, data)


def setup_test_environment():
    students = _make_relation(
        ["pk", "first_name", "last_name", "age"],
        [
            ["1", "Ann", "Lee", "11"],
            ["2", "Bob", "Ray", "14"],
            ["3", "Cid", "Poe", "12"],
        ],
    )
    memberships = _make_relation(
        ["student_fk", "definition_class_fk"],
        [["1", "10"], ["2", "10"], ["3", "11"], ["1", "11"]],
    )
    classes = _make_relation(["pk", "name"], [["10", "Maths"], ["11", "Art"]])
    return students, memberships, classes


def test_execute_select_join_where_order_by():
    students, memberships, classes = setup_test_environment()

    results = (QueryBuilder()
               .select(["s.pk", "s.first_name", "s.age", "cd.name"])
               .from_(students, "s")
               .join(memberships, "cm").on("cm.student_fk = s.pk")
               .join(classes, "cd").on("cd.pk = cm.definition_class_fk")
               .where("s.age < 13")
               .order_by("cd.name ASC")
               .execute())

    expected = ("[s.pk]    [s.first_name]    [s.age]    [cd.name]\n"
                "1         Ann               11         Art\n"
                "3         Cid               12         Art\n"
                "1         Ann               11         Maths\n")

    assert results.to_display_string() == expected


def test_execute_clause_order_does_not_matter():
    students, memberships, classes = setup_test_environment()

    first = (QueryBuilder()
             .select(["s.pk", "cd.name"])
             .from_(students, "s")
             .join(memberships, "cm").on("cm.student_fk = s.pk")
             .join(classes, "cd").on("cd.pk = cm.definition_class_fk")
             .order_by("s.pk DESC")
             .execute())
    second = (QueryBuilder()
              .order_by("s.pk DESC")
              .join(memberships, "cm").on("cm.student_fk = s.pk")
              .join(classes, "cd").on("cd.pk = cm.definition_class_fk")
              .from_(students, "s")
              .select(["s.pk", "cd.name"])
              .execute())

    assert first == second
    assert [row.get("s.pk") for row in first] == ["3", "2", "1", "1"]


def test_execute_without_select_keeps_every_field():
    students, memberships, _ = setup_test_environment()

    results = (QueryBuilder()
               .from_(students, "s")
               .join(memberships, "cm").on("cm.student_fk = s.pk")
               .execute())

    assert results.fields == [
        "s.pk", "s.first_name", "s.last_name", "s.age", "cm.student_fk", "cm.definition_class_fk"
    ]
    assert results.row_count() == 4


def test_execute_where_applies_at_every_stage():
    students, memberships, classes = setup_test_environment()

    # cd.name only exists after the last join; earlier stages defer the check
    results = (QueryBuilder()
               .select(["s.first_name"])
               .from_(students, "s")
               .join(memberships, "cm").on("cm.student_fk = s.pk")
               .join(classes, "cd").on("cd.pk = cm.definition_class_fk")
               .where("cd.name = 'Maths'")
               .execute())

    assert [row.get("s.first_name") for row in results] == ["Ann", "Bob"]


def test_execute_from_only():
    students, _, _ = setup_test_environment()

    results = QueryBuilder().from_(students, "s").where("s.pk = 2").execute()

    assert results.to_csv() == "s.pk,s.first_name,s.last_name,s.age\n2,Bob,Ray,14\n"


def test_execute_literal_rows_into_target():
    target = Relation(["column0", "column1", "column2"])

    results = (QueryBuilder()
               .insert_into(target, ["column0", "column1", "column2"])
               .values(["0", "1", "2", "3", "4", "5"])
               .execute())

    assert results.to_csv() == "column0,column1,column2\n0,1,2\n3,4,5\n"
    assert target == results
    # the target owns its own rows
    assert target.row(0) is not results.row(0)


def test_execute_insert_select_into_target():
    students, _, _ = setup_test_environment()
    target = Relation(["s.pk", "s.first_name"])

    results = (QueryBuilder()
               .insert_into(target, ["s.pk", "s.first_name"])
               .select(["s.pk", "s.first_name"])
               .from_(students, "s")
               .where("s.age > 11")
               .execute())

    assert results.row_count() == 2
    assert target.to_csv() == "s.pk,s.first_name\n2,Bob\n3,Cid\n"


def test_execute_empty_builder_returns_empty_relation():
    results = QueryBuilder().execute()

    assert results.row_count() == 0
    assert results.field_count() == 0


def test_execute_propagates_comparison_errors():
    students, _, _ = setup_test_environment()

    with pytest.raises(InvalidComparisonOperand):
        QueryBuilder().from_(students, "s").where("s.first_name > 1").execute()


def test_processor_can_run_a_builder_directly():
    relation = Relation(["v"])
    relation.add_row(Record({"v": "b"}))
    relation.add_row(Record({"v": "a"}))

    processor = QueryProcessor()
    results = processor.execute(QueryBuilder().from_(relation, "r").order_by("r.v ASC"))

    assert [row.get("r.v") for row in results] == ["a", "b"]


def test_execute_where_on_decimal_from_later_join():
    items = _make_relation(["id"], [["1"], ["2"]])
    prices = _make_relation(["id", "price"], [["1", "3.5"], ["2", "4.0"]])

    # b.price only exists after the join, so the source stage defers the check
    results = (QueryBuilder()
               .select(["a.id", "b.price"])
               .from_(items, "a")
               .join(prices, "b").on("b.id = a.id")
               .where("b.price = 3.5")
               .execute())

    assert results.to_csv() == "a.id,b.price\n1,3.5\n"
