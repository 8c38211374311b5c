from .utils import (is_number, is_integer, is_string, unquote, strip_alias, add_alias,
                    strip_aliases, add_aliases, columns_referenced_in_expression)

__all__ = ["is_number", "is_integer", "is_string", "unquote", "strip_alias", "add_alias",
           "strip_aliases", "add_aliases", "columns_referenced_in_expression"]
