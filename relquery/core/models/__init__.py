from .record import Record, MISSING, Value
from .relation import Relation
from .query import JoinClause, OrderBy

__all__ = [
    # Rows
    "Record",
    "MISSING",
    "Value",

    # Tables
    "Relation",

    # Query clauses
    "JoinClause",
    "OrderBy",
]
