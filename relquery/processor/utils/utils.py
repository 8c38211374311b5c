import re
from typing import Iterable, List, Optional, Set

_NUMBER_PATTERN = re.compile(r"^\s*-?\d*\.?\d+\s*$")
_INTEGER_PATTERN = re.compile(r"^\s*-?\d+\s*$")
_QUOTES = ("'", '"')

# <name> <op> <literal>, literal being a quoted string or a bare number
_LITERAL_COMPARISON_PATTERN = re.compile(
    r"(?<![^\s()])([^\s()<=>'\"\d][^\s()<=>'\"]*)\s*[<=>]\s*(?:'[^']*'|\"[^\"]*\"|-?\d+(?:\.\d+)?)(?![^\s()])"
)


def is_number(value: str) -> bool:
    return _NUMBER_PATTERN.match(value) is not None


def is_integer(value: str) -> bool:
    return _INTEGER_PATTERN.match(value) is not None


def is_string(value: str) -> bool:
    # first and last characters are quotes, not necessarily the same one
    if not value:
        return False
    return value[0] in _QUOTES and value[-1] in _QUOTES


def unquote(value: str) -> str:
    if len(value) >= 2 and is_string(value):
        return value[1:-1]
    return value


def strip_alias(field_name: str) -> str:
    if "." in field_name:
        return field_name.split(".", 1)[1]
    return field_name


def add_alias(field_name: str, alias: Optional[str]) -> str:
    # an existing alias is never overwritten
    if alias is None or "." in field_name:
        return field_name
    return f"{alias}.{field_name}"


def strip_aliases(field_names: Iterable[str]) -> List[str]:
    return [strip_alias(name) for name in field_names]


def add_aliases(field_names: Iterable[str], alias: Optional[str]) -> List[str]:
    return [add_alias(name, alias) for name in field_names]


def columns_referenced_in_expression(expression: Optional[str]) -> Set[str]:
    """
    Collect the left-hand names of every `name op literal` comparison.

    Shallow on purpose: AND/OR and parentheses are not understood and
    field-to-field comparisons are not reported.
    """
    if not expression:
        return set()
    return {match.group(1) for match in _LITERAL_COMPARISON_PATTERN.finditer(expression)}
