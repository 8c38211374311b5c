from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from relquery.core.models import JoinClause, Record, Relation
from .exceptions import QueryConfigurationError


@dataclass(frozen=True)
class QueryBuilder:
    """
    Immutable fluent query description.

    Each clause method returns a new builder, so a partially configured
    query can be reused as the base of several others:

        results = (QueryBuilder()
                   .select(["s.pk", "cd.name"])
                   .from_(students, "s")
                   .join(memberships, "cm").on("cm.student_fk = s.pk")
                   .join(classes, "cd").on("cd.pk = cm.definition_class_fk")
                   .where("s.age < 13")
                   .order_by("cd.name ASC")
                   .execute())

    Clauses may be given in any order; `execute()` always runs the same
    pipeline (see QueryProcessor).
    """
    insert_target: Optional[Relation] = None
    insert_columns: Optional[Tuple[str, ...]] = None
    staged_rows: Tuple[Tuple[str, ...], ...] = ()
    selected_columns: Optional[Tuple[str, ...]] = None
    source_relation: Optional[Relation] = None
    source_alias: Optional[str] = None
    where_clause: Optional[str] = None
    join_clauses: Tuple[JoinClause, ...] = ()
    sort_order: Optional[str] = None

    # ---- clauses ----

    def insert_into(self, target: Relation, columns: Sequence[str]) -> "QueryBuilder":
        return replace(self, insert_target=target, insert_columns=tuple(columns))

    def values(self, values: Sequence[str]) -> "QueryBuilder":
        """
        Stage literal rows. `values` is a flat, row-major list split into rows
        as wide as the insert column list; a trailing partial row is dropped.
        """
        if not self.insert_columns:
            raise QueryConfigurationError("values() requires insert_into() with at least one column")

        width = len(self.insert_columns)
        row_count = len(values) // width
        rows = tuple(tuple(values[y * width:(y + 1) * width]) for y in range(row_count))
        return replace(self, staged_rows=self.staged_rows + rows)

    def select(self, columns: Sequence[str]) -> "QueryBuilder":
        return replace(self, selected_columns=tuple(columns))

    def from_(self, relation: Relation, alias: Optional[str]) -> "QueryBuilder":
        return replace(self, source_relation=relation, source_alias=alias)

    def where(self, condition: Optional[str]) -> "QueryBuilder":
        return replace(self, where_clause=condition)

    def join(self, relation: Relation, alias: Optional[str]) -> "QueryBuilder":
        return replace(self, join_clauses=self.join_clauses + (JoinClause(relation, alias),))

    def on(self, condition: Optional[str]) -> "QueryBuilder":
        if not self.join_clauses:
            raise QueryConfigurationError("on() must follow join()")

        last = self.join_clauses[-1]
        if last.on is not None:
            raise QueryConfigurationError(f"Join with alias '{last.alias}' already has an ON clause")

        return replace(self, join_clauses=self.join_clauses[:-1] + (replace(last, on=condition),))

    def order_by(self, order: Optional[str]) -> "QueryBuilder":
        return replace(self, sort_order=order)

    # ---- execution ----

    def staged_relation(self) -> Relation:
        """The insert columns and literal rows staged through values()."""
        relation = Relation(self.insert_columns or ())
        for values in self.staged_rows:
            relation.add_row(Record(dict(zip(self.insert_columns, values))))
        return relation

    def execute(self) -> Relation:
        from .processor import QueryProcessor
        return QueryProcessor().execute(self)

    def __str__(self):
        text = ""

        if self.insert_target is not None:
            text += f"INSERT INTO [anonymous table] ({', '.join(self.insert_columns or ())})\n"

        if self.staged_rows:
            lines = ",\n    ".join(", ".join(row) for row in self.staged_rows)
            text += f"VALUES (\n    {lines}\n)\n"

        if self.selected_columns is not None:
            text += f"SELECT {', '.join(self.selected_columns)}\n"

        if self.source_relation is not None:
            text += f'FROM [anonymous table] AS "{self.source_alias}"\n'

        for join in self.join_clauses:
            text += f'JOIN [anonymous table] AS "{join.alias}"\n'
            if join.on is not None:
                text += f"    ON {join.on}\n"

        if self.where_clause is not None:
            text += f"WHERE {self.where_clause}\n"

        if self.sort_order is not None:
            text += f"ORDER BY {self.sort_order}\n"

        return text
