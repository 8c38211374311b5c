from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config import RenderSettings, DEFAULT_SETTINGS
from .record import Record
from relquery.processor.utils import add_aliases, strip_aliases, columns_referenced_in_expression

logger = logging.getLogger(__name__)


class Relation:
    """
    A table: an ordered, duplicate-free list of field names plus an ordered
    list of rows.

    The schema only drives display and CSV column order. A row may hold
    fields the schema does not list, or lack fields it does list; those
    render as `null`.
    """

    def __init__(self, fields: Optional[Iterable[str]] = None, settings: RenderSettings = DEFAULT_SETTINGS):
        self._fields: List[str] = []
        self._rows: List[Record] = []
        self.settings = settings

        for name in fields or []:
            self.add_field(name)

    # ---- schema and rows ----

    @property
    def fields(self) -> List[str]:
        return list(self._fields)

    @property
    def rows(self) -> List[Record]:
        return list(self._rows)

    def add_field(self, name: str) -> None:
        if name not in self._fields:
            self._fields.append(name)

    def add_row(self, row: Record) -> None:
        self._rows.append(row)

    def row(self, index: int) -> Record:
        return self._rows[index]

    def row_count(self) -> int:
        return len(self._rows)

    def field_count(self) -> int:
        return len(self._fields)

    def with_alias_stripped(self) -> List[str]:
        return strip_aliases(self._fields)

    def with_alias_added(self, alias: Optional[str]) -> List[str]:
        return add_aliases(self._fields, alias)

    def contains_columns_in_expression(self, expression: Optional[str]) -> bool:
        """
        True when every field compared against a literal in `expression` is
        in the schema. A missing or blank expression trivially qualifies.
        """
        return columns_referenced_in_expression(expression).issubset(self._fields)

    # ---- import / export ----

    @classmethod
    def from_values(cls, fields: Sequence[str], rows: Iterable[Sequence[str]],
                    settings: RenderSettings = DEFAULT_SETTINGS) -> "Relation":
        relation = cls(settings=settings)
        relation.load(fields, rows)
        return relation

    def load(self, fields: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        for name in fields:
            self.add_field(name)

        for values in rows:
            record = Record()
            for name, value in zip(fields, values):
                record.set(name, value)
            self.add_row(record)

    def export(self) -> Tuple[List[str], List[List[str]]]:
        fields = self.fields
        data = [[row.get_text(name, self.settings) for name in fields] for row in self._rows]
        return fields, data

    # ---- query operations ----

    @staticmethod
    def project_fields(relation: "Relation", ordered_names: Sequence[str]) -> "Relation":
        from relquery.processor.operators import ProjectionOperator
        return ProjectionOperator().execute(relation, ordered_names)

    def join(self, left_alias: Optional[str], right: "Relation", right_alias: Optional[str],
             where: Optional[str] = None, on: Optional[str] = None) -> "Relation":
        from relquery.processor.operators import JoinOperator
        return JoinOperator().execute(self, left_alias, right, right_alias, where, on)

    def insert(self, source: "Relation", alias: Optional[str], where: Optional[str] = None) -> None:
        from relquery.processor.operators import InsertOperator
        InsertOperator().execute(self, source, alias, where)

    def sort(self, field_name: str, direction: Optional[str] = None) -> None:
        from relquery.processor.operators import SortOperator
        self._rows = SortOperator().sort(self._rows, field_name, direction)

    # ---- rendering ----

    def to_display_string(self) -> str:
        gap = " " * self.settings.header_gap
        lines = ["".join(f"[{name}]{gap}" for name in self._fields).strip()]

        for index, row in enumerate(self._rows):
            rendered = row.render_ordered(self._fields, self.settings)
            if not rendered:
                logger.warning(f"Row {index} has no renderable content; omitted from display")
                continue
            lines.append(rendered)

        return "\n".join(lines) + "\n"

    def to_csv(self) -> str:
        delimiter = self.settings.delimiter
        text = ""
        if self._fields:
            text = delimiter.join(self._fields) + "\n"

        for row in self._rows:
            rendered = row.render_csv(self._fields, self.settings)
            if rendered:
                text += rendered + "\n"
        return text

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"Relation(fields={self._fields!r}, rows={len(self._rows)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        if self.field_count() != other.field_count():
            return False
        return self.to_display_string() == other.to_display_string()

    __hash__ = None  # mutable

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._rows))

    def __len__(self) -> int:
        return len(self._rows)
