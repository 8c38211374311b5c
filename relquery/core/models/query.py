from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .relation import Relation


@dataclass(frozen=True)
class JoinClause:
    relation: "Relation"
    alias: Optional[str]
    on: Optional[str] = None


@dataclass(frozen=True)
class OrderBy:
    field_name: str
    direction: str

    @classmethod
    def parse(cls, order: Optional[str]) -> Optional["OrderBy"]:
        """
        Split "<field> <ASC|DESC>" on the first space. Blank text, or text
        without a space, yields None.
        """
        if not order:
            return None
        space_index = order.find(" ")
        if space_index == -1:
            return None
        return cls(order[:space_index], order[space_index + 1:])
