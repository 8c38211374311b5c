from __future__ import annotations

from typing import List, Optional, Union

from relquery.core.models import OrderBy, Record, Relation
from ..exceptions import InconsistentColumnType, InvalidComparisonOperand
from ..utils import is_integer, is_number


class SortOperator:
    def execute(self, relation: Relation, order_by: Union[OrderBy, str, None]) -> Relation:
        if isinstance(order_by, str) or order_by is None:
            order_by = OrderBy.parse(order_by)
        if order_by is None:
            return relation

        relation.sort(order_by.field_name, order_by.direction)
        return relation

    def sort(self, rows: List[Record], field_name: str, direction: Optional[str]) -> List[Record]:
        """
        Stable sort by one field. Integer compare when every value is
        numeric, ordinal string compare when none is.
        """
        descending = self._is_descending(direction)
        values = [row.get_text(field_name) for row in rows]
        numeric = self._column_is_numeric(field_name, values)

        keys = [self._build_sort_key(value, numeric) for value in values]
        order = sorted(range(len(rows)), key=lambda index: keys[index], reverse=descending)
        return [rows[index] for index in order]

    def _is_descending(self, direction: Optional[str]) -> bool:
        return direction is not None and direction.lower() == "desc"

    def _column_is_numeric(self, field_name: str, values: List[str]) -> bool:
        flags = {is_number(value) for value in values}
        if len(flags) > 1:
            raise InconsistentColumnType(field_name)
        return flags == {True}

    def _build_sort_key(self, value: str, numeric: bool):
        if not numeric:
            return value
        if not is_integer(value):
            raise InvalidComparisonOperand("ORDER BY", value)
        return int(value.strip())
