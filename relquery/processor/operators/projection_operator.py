from __future__ import annotations

from typing import Sequence

from relquery.core.models import Record, Relation


class ProjectionOperator:
    def execute(self, relation: Relation, ordered_names: Sequence[str]) -> Relation:
        """
        Build a new relation whose schema is exactly `ordered_names`, in that
        order, holding copies of every row narrowed to those fields.
        """
        projected = Relation(ordered_names, settings=relation.settings)
        for row in relation:
            projected.add_row(self._project_row(row, ordered_names))
        return projected

    def _project_row(self, row: Record, ordered_names: Sequence[str]) -> Record:
        projected = Record()
        for name in ordered_names:
            if name in row:
                projected.set(name, row.get(name))
        return projected
