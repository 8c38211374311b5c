from __future__ import annotations

import logging
from typing import Optional

from relquery.core.models import Record, Relation
from ..utils import add_alias
from .selection_operator import SelectionOperator

logger = logging.getLogger(__name__)


class JoinOperator:
    def __init__(self, selection: Optional[SelectionOperator] = None):
        self.selection = selection or SelectionOperator()

    def execute(
        self,
        outer_relation: Relation,
        outer_alias: Optional[str],
        inner_relation: Relation,
        inner_alias: Optional[str],
        where: Optional[str] = None,
        on: Optional[str] = None,
    ) -> Relation:
        combined_fields = (
            outer_relation.with_alias_added(outer_alias)
            + inner_relation.with_alias_added(inner_alias)
        )
        result = Relation(combined_fields, settings=outer_relation.settings)

        enforce_where = self.selection.is_enforceable(result, where)
        enforce_on = self.selection.is_enforceable(result, on)

        for outer_row in outer_relation:
            for inner_row in inner_relation:
                merged_row = self._merge_rows(outer_row, outer_alias, inner_row, inner_alias)
                if (self.selection.accepts(merged_row, where, enforce_where)
                        and self.selection.accepts(merged_row, on, enforce_on)):
                    result.add_row(merged_row)

        logger.debug(
            f"Joined {outer_relation.row_count()} x {inner_relation.row_count()} rows "
            f"into {result.row_count()} rows"
        )
        return result

    def _merge_rows(
        self,
        outer_row: Record,
        outer_alias: Optional[str],
        inner_row: Record,
        inner_alias: Optional[str],
    ) -> Record:
        merged = Record()
        self._inject_row(merged, outer_row, outer_alias)
        self._inject_row(merged, inner_row, inner_alias)
        return merged

    def _inject_row(self, target: Record, row: Record, alias: Optional[str]) -> None:
        for key, value in row:
            target.set(add_alias(key, alias), value)
