from .exceptions import (QueryError, ConditionSyntaxError, InvalidComparisonOperand,
                         InconsistentColumnType, QueryConfigurationError)

__all__ = ["QueryBuilder", "QueryProcessor", "QueryError", "ConditionSyntaxError",
           "InvalidComparisonOperand", "InconsistentColumnType", "QueryConfigurationError"]


def __getattr__(name: str):
    if name == "QueryBuilder":
        from .query_builder import QueryBuilder as _QueryBuilder
        return _QueryBuilder
    if name == "QueryProcessor":
        from .processor import QueryProcessor as _QueryProcessor
        return _QueryProcessor
    raise AttributeError(f"module 'relquery.processor' has no attribute '{name}'")
