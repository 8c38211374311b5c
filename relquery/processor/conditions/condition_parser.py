import re
from typing import List, Optional

from .condition import (ConditionNode, ComplexCondition, EmptyCondition,
                        LiteralCondition, SimpleCondition)
from ..exceptions import ConditionSyntaxError

_TOKEN_PATTERN = re.compile(
    r"\s*(?:('[^']*')|(\"[^\"]*\")|([()])|([<=>])|([^\s()<=>'\"]+))"
)
_OPERATORS = ("=", "<", ">")
_KEYWORDS = ("AND", "OR")


class ConditionParser:
    """
    Recursive-descent parser for where/on condition text.

    Precedence, highest first: parentheses, AND, OR. Comparisons
    (`=`, `<`, `>`) and bare operands are the leaves.
    """

    def __init__(self):
        self.tokens: List[str] = []
        self.current = 0
        self.text = ""

    def parse(self, condition_str: Optional[str]) -> ConditionNode:
        if condition_str is None or not condition_str.strip():
            return EmptyCondition()

        self.text = condition_str
        self.tokens = self._tokenize(condition_str)
        self.current = 0

        result = self._parse_expression()

        if self.current < len(self.tokens):
            self._fail(f"Unexpected token at end: {self.tokens[self.current]}")

        return result

    def _tokenize(self, text: str) -> List[str]:
        tokens = []
        position = 0
        stripped_end = len(text.rstrip())
        while position < stripped_end:
            match = _TOKEN_PATTERN.match(text, position)
            if match is None or match.end() == position:
                self._fail(f"Unterminated string literal at position {position}")
            tokens.append(match.group(0).strip())
            position = match.end()
        return tokens

    def _current_token(self) -> Optional[str]:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _advance(self):
        self.current += 1

    def _check_keyword(self, keyword: str) -> bool:
        current = self._current_token()
        return current is not None and current.upper() == keyword

    def _expect(self, expected_token: str) -> str:
        current = self._current_token()
        if current != expected_token:
            found = f"'{current}'" if current is not None else "end of input"
            self._fail(f"Expected '{expected_token}', found {found}")
        self._advance()
        return expected_token

    def _fail(self, message: str):
        raise ConditionSyntaxError(self.text, message)

    # --- Recursive Descent ---

    # <expression> ::= <term> { OR <term> }
    def _parse_expression(self) -> ConditionNode:
        nodes = [self._parse_term()]

        while self._check_keyword('OR'):
            self._advance()
            nodes.append(self._parse_term())

        if len(nodes) == 1:
            return nodes[0]

        return ComplexCondition('OR', nodes)

    # <term> ::= <factor> { AND <factor> }
    def _parse_term(self) -> ConditionNode:
        nodes = [self._parse_factor()]

        while self._check_keyword('AND'):
            self._advance()
            nodes.append(self._parse_factor())

        if len(nodes) == 1:
            return nodes[0]

        return ComplexCondition('AND', nodes)

    # <factor> ::= ( <expression> ) | <comparison> | <operand>
    def _parse_factor(self) -> ConditionNode:
        if self._current_token() == '(':
            self._advance()
            node = self._parse_expression()
            self._expect(')')
            return node

        left = self._parse_operand()
        if self._current_token() not in _OPERATORS:
            return LiteralCondition(left)

        op = self._current_token()
        self._advance()
        right = self._parse_operand()
        return SimpleCondition(left, op, right)

    def _parse_operand(self) -> str:
        token = self._current_token()
        if token is None:
            self._fail("Expected operand, found end of input")
        if token in ('(', ')') or token in _OPERATORS or token.upper() in _KEYWORDS:
            self._fail(f"Expected operand, found '{token}'")
        self._advance()
        return token
