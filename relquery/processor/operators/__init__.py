from .selection_operator import SelectionOperator
from .projection_operator import ProjectionOperator
from .join_operator import JoinOperator
from .insert_operator import InsertOperator
from .sort_operator import SortOperator

__all__ = [
    "SelectionOperator",
    "ProjectionOperator",
    "JoinOperator",
    "InsertOperator",
    "SortOperator",
    ]
