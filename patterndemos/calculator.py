"""Interpreter: an integer calculator that builds and evaluates an expression tree."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

_OPERATORS = frozenset("+-*/")
_DIGITS = frozenset("0123456789")


class Expression(ABC):
    """A node of the expression tree."""

    @abstractmethod
    def interpret(self) -> int:
        """Return the node's integer value."""


@dataclass(frozen=True)
class NumberExpression(Expression):
    """A literal number."""

    value: int

    def interpret(self) -> int:
        return self.value


@dataclass(frozen=True)
class AddExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


@dataclass(frozen=True)
class SubtractExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


@dataclass(frozen=True)
class MultiplyExpression(Expression):
    left: Expression
    right: Expression

    def interpret(self) -> int:
        return self.left.interpret() * self.right.interpret()


@dataclass(frozen=True)
class DivideExpression(Expression):
    """Integer division truncating toward zero; division by zero gives 0."""

    left: Expression
    right: Expression

    def interpret(self) -> int:
        divisor = self.right.interpret()
        if divisor == 0:
            return 0
        dividend = self.left.interpret()
        quotient = abs(dividend) // abs(divisor)
        return quotient if (dividend < 0) == (divisor < 0) else -quotient


def tokenize(expression: str) -> list[str]:
    """Split text into digit runs and operators.

    Spaces and operators end a number; any other character is ignored.
    """
    tokens: list[str] = []
    current = ""
    for char in expression:
        if char == " " or char in _OPERATORS:
            if current:
                tokens.append(current)
                current = ""
            if char in _OPERATORS:
                tokens.append(char)
        elif char in _DIGITS:
            current += char
    if current:
        tokens.append(current)
    return tokens


def _is_number(token: str) -> bool:
    return bool(token) and all(char in _DIGITS for char in token)


class _Parser:
    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens = tokens
        self._index = 0

    def _peek(self) -> str | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def add_subtract(self) -> Expression:
        left = self.multiply_divide()
        while (op := self._peek()) in ("+", "-"):
            self._index += 1
            right = self.multiply_divide()
            kind = AddExpression if op == "+" else SubtractExpression
            left = kind(left, right)
        return left

    def multiply_divide(self) -> Expression:
        left = self.number()
        while (op := self._peek()) in ("*", "/"):
            self._index += 1
            right = self.number()
            kind = MultiplyExpression if op == "*" else DivideExpression
            left = kind(left, right)
        return left

    def number(self) -> Expression:
        token = self._peek()
        if token is None:
            return NumberExpression(0)
        self._index += 1
        return NumberExpression(int(token) if _is_number(token) else 0)


def parse(tokens: Sequence[str]) -> Expression:
    """Build an expression tree; '*' and '/' bind tighter than '+' and '-'.

    A missing or non-numeric operand counts as 0.
    """
    return _Parser(tokens).add_subtract()


class Calculator:
    """Evaluates arithmetic text by tokenizing, parsing and interpreting it."""

    def evaluate(self, expression: str) -> int:
        tokens = tokenize(expression)
        print("Tokens: " + "".join(f"[{token}] " for token in tokens))
        return parse(tokens).interpret()


_DEMO = (
    ("3 + 5", "8"),
    ("10 - 4", "6"),
    ("4 * 5", "20"),
    ("20 / 4", "5"),
    ("3 + 5 * 2", "13 (not 16!)"),
    ("10 + 20 * 3 - 5", "65"),
    ("100 / 10 + 5 * 2", "20"),
    ("20 - 5 - 3", "12"),
)


def main(argv=None) -> int:
    """Evaluate a series of sample expressions."""
    calc = Calculator()
    rule = "=" * 40
    print(rule)
    print("   SIMPLE CALCULATOR (Interpreter Pattern)")
    print(rule + "\n")
    for number, (text, expected) in enumerate(_DEMO, start=1):
        print(f"Test {number}: {text}")
        print(f"Result: {calc.evaluate(text)}")
        print(f"Expected: {expected}\n")
    print(rule)
    return 0


if __name__ == "__main__":
    sys.exit(main())