import logging
from typing import Optional

from relquery.core.models import Record, Relation
from .selection_operator import SelectionOperator

logger = logging.getLogger(__name__)


class InsertOperator:
    def __init__(self, selection: Optional[SelectionOperator] = None):
        self.selection = selection or SelectionOperator()

    def execute(self, target: Relation, source: Relation, alias: Optional[str],
                where: Optional[str] = None) -> int:
        """
        Copy every qualifying row of `source` into `target` under `alias`.
        Values are read by unaliased name and stored by aliased name.
        Returns the number of rows appended.
        """
        lookup_fields = source.with_alias_stripped()
        aliased_fields = source.with_alias_added(alias)

        for name in aliased_fields:
            target.add_field(name)

        enforce_where = self.selection.is_enforceable(target, where)

        inserted = 0
        for row in source:
            new_row = self._build_row(row, lookup_fields, aliased_fields)
            if self.selection.accepts(new_row, where, enforce_where):
                target.add_row(new_row)
                inserted += 1

        logger.debug(f"Inserted {inserted} of {source.row_count()} rows under alias {alias!r}")
        return inserted

    def _build_row(self, row: Record, lookup_fields, aliased_fields) -> Record:
        new_row = Record()
        for lookup, aliased in zip(lookup_fields, aliased_fields):
            if lookup in row:
                new_row.set(aliased, row.get(lookup))
        return new_row
