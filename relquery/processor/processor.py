from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from relquery.core.models import OrderBy, Relation
from .operators import (
    SelectionOperator,
    ProjectionOperator,
    JoinOperator,
    SortOperator,
    InsertOperator,
)

if TYPE_CHECKING:
    from .query_builder import QueryBuilder

logger = logging.getLogger(__name__)

"""
Runs a configured query through the fixed pipeline:
source insert -> joins -> projection -> sort -> copy into the insert target.
"""
class QueryProcessor:

    def __init__(self):
        # one selection operator, so parsed conditions are shared across stages
        self.selection_operator = SelectionOperator()
        self.insert_operator = InsertOperator(self.selection_operator)
        self.join_operator = JoinOperator(self.selection_operator)
        self.projection_operator = ProjectionOperator()
        self.sort_operator = SortOperator()

    def execute(self, query: QueryBuilder) -> Relation:
        """
        Execute the query. Every stage whose clause was never configured is skipped.
        """
        if query.source_relation is not None:
            result = self._acquire(query)
        else:
            result = query.staged_relation()

        order_by = OrderBy.parse(query.sort_order)
        if order_by is not None:
            self.sort_operator.execute(result, order_by)
            logger.debug(f"Sorted {result.row_count()} rows by {order_by.field_name} {order_by.direction}")

        if query.insert_target is not None:
            self._copy_into(query.insert_target, result)

        return result

    def _acquire(self, query: QueryBuilder) -> Relation:
        result = Relation()
        self.insert_operator.execute(result, query.source_relation, query.source_alias, query.where_clause)
        logger.debug(f"Source stage produced {result.row_count()} rows")

        for join in query.join_clauses:
            # rows already carry qualified names, so the left side takes no alias
            result = self.join_operator.execute(
                result, None, join.relation, join.alias, query.where_clause, join.on
            )
            logger.debug(f"Join with alias {join.alias!r} produced {result.row_count()} rows")

        if query.selected_columns is not None:
            result = self.projection_operator.execute(result, query.selected_columns)

        return result

    def _copy_into(self, target: Relation, result: Relation) -> None:
        # no re-aliasing; the target's schema stays as its owner defined it
        for row in result:
            target.add_row(row.copy())
        logger.debug(f"Copied {result.row_count()} rows into insert target")
