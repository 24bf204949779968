"""Infix to postfix conversion and bracket balance checking."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from itertools import pairwise

NEGATE = "~"
PRECEDENCE = {"~": 5, "^": 4, "/": 3, "%": 3, "*": 2, "+": 1, "-": 1, "(": 0}

_TOKEN_RE = re.compile(r"[0-9]+|[()^/%*+\-]")
_CLOSERS = {")": "(", "]": "[", "}": "{"}


class InvalidExpressionError(ValueError):
    """Raised when an infix expression is malformed."""


class TokenKind(Enum):
    OPERAND = auto()
    OPERATOR = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()


@dataclass(frozen=True)
class Token:
    """One lexical element of an infix expression."""

    kind: TokenKind
    value: int | str

    @property
    def is_unary(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.value == NEGATE

    @property
    def is_binary(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.value != NEGATE


def _lex(text: str) -> Token:
    if text.isdigit():
        return Token(TokenKind.OPERAND, int(text))
    if text == "(":
        return Token(TokenKind.LEFT_PAREN, text)
    if text == ")":
        return Token(TokenKind.RIGHT_PAREN, text)
    return Token(TokenKind.OPERATOR, text)


def tokenize(expression: str) -> list[Token]:
    """Split *expression* into tokens, ignoring any other characters.

    A '-' that follows an operator or '(' becomes unary negation ('~'), as
    does a leading '-' directly followed by a number.
    """
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(expression):
        token = _lex(match.group())
        if (
            token.kind is TokenKind.OPERATOR
            and token.value == "-"
            and tokens
            and tokens[-1].kind in (TokenKind.OPERATOR, TokenKind.LEFT_PAREN)
        ):
            token = Token(TokenKind.OPERATOR, NEGATE)
        tokens.append(token)
    if (
        len(tokens) >= 2
        and tokens[0].kind is TokenKind.OPERATOR
        and tokens[0].value == "-"
        and tokens[1].kind is TokenKind.OPERAND
    ):
        tokens[0] = Token(TokenKind.OPERATOR, NEGATE)
    return tokens


def _may_follow(current: Token, following: Token) -> bool:
    if current.kind in (TokenKind.OPERAND, TokenKind.RIGHT_PAREN):
        return not (
            following.kind in (TokenKind.OPERAND, TokenKind.LEFT_PAREN)
            or following.is_unary
        )
    if current.kind is TokenKind.OPERATOR:
        return current.is_unary or not (
            following.kind is TokenKind.RIGHT_PAREN or following.is_binary
        )
    return not (following.is_binary or following.kind is TokenKind.RIGHT_PAREN)


def _validate(tokens: list[Token]) -> None:
    if not tokens:
        raise InvalidExpressionError("empty expression")
    if tokens[0].is_binary:
        raise InvalidExpressionError("expression starts with a binary operator")
    last = tokens[-1]
    if last.kind in (TokenKind.OPERATOR, TokenKind.LEFT_PAREN):
        raise InvalidExpressionError("expression ends with an operator or '('")
    for current, following in pairwise(tokens):
        if not _may_follow(current, following):
            raise InvalidExpressionError(
                f"{following.value!r} cannot follow {current.value!r}"
            )
    depth = 0
    for token in tokens:
        if token.kind is TokenKind.LEFT_PAREN:
            depth += 1
        elif token.kind is TokenKind.RIGHT_PAREN:
            depth -= 1
            if depth < 0:
                raise InvalidExpressionError("unbalanced parentheses")
    if depth:
        raise InvalidExpressionError("unbalanced parentheses")


def infix_to_postfix(expression: str) -> str:
    """Convert an integer infix expression to space-separated postfix.

    Unary minus is written as '~'. Raises InvalidExpressionError for a
    malformed or unbalanced expression.
    """
    tokens = tokenize(expression)
    _validate(tokens)
    output: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if token.kind is TokenKind.OPERAND:
            output.append(str(token.value))
        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append("(")
        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack:
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            operator = str(token.value)
            rank = PRECEDENCE[operator]
            if stack and rank <= PRECEDENCE[stack[-1]]:
                while stack and rank < PRECEDENCE[stack[-1]]:
                    output.append(stack.pop())
                if stack and rank == PRECEDENCE[stack[-1]] and operator != "^":
                    output.append(stack.pop())
            stack.append(operator)
    output.extend(reversed(stack))
    return " ".join(output)


def is_balanced(expression: str) -> bool:
    """Return whether the (), [] and {} brackets of *expression* balance.

    A closing bracket with nothing open makes the expression unbalanced; one
    that does not match the innermost open bracket is skipped.
    """
    stack: list[str] = []
    stray_closer = False
    for char in expression:
        if char in "([{":
            stack.append(char)
        elif char in _CLOSERS:
            if not stack:
                stray_closer = True
            elif stack[-1] == _CLOSERS[char]:
                stack.pop()
    return not stack and not stray_closer