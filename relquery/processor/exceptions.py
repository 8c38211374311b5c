from typing import Optional


class QueryError(Exception):
    """
    Base class for every error raised while building or running a query.
    """


class ConditionSyntaxError(QueryError):
    """
    Exception raised when a condition expression cannot be parsed.
    """

    def __init__(self, expression: str, message: str):
        self.expression = expression
        super().__init__(message)

    def __str__(self):
        return f"ConditionSyntaxError(expression={self.expression!r}): {super().__str__()}"


class InvalidComparisonOperand(QueryError):
    """
    Exception raised when `<` or `>` is applied to text that is not integer-valued.
    """

    def __init__(self, operator: str, operand: str, message: Optional[str] = None):
        self.operator = operator
        self.operand = operand

        if message is None:
            message = f"Operator '{operator}' requires integer operands, got '{operand}'"

        super().__init__(message)


class InconsistentColumnType(QueryError):
    """
    Exception raised when a sort column mixes numeric and non-numeric values.
    """

    def __init__(self, field_name: str, message: Optional[str] = None):
        self.field_name = field_name

        if message is None:
            message = f"Column '{field_name}' mixes numeric and non-numeric values"

        super().__init__(message)


class QueryConfigurationError(QueryError):
    """
    Exception raised when builder clauses are combined in an unusable way.
    """
