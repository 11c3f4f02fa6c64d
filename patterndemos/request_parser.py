"""Interpreter: turning a customer's request into a department and an action."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

# Checked in order; the first rule with a matching keyword wins.
_RULES: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("phone", "laptop", "computer", "electronics", "tv", "gadget"),
     "electronics", "product"),
    (("shirt", "pants", "dress", "clothes", "clothing", "shoes"),
     "clothing", "product"),
    (("food", "bread", "milk", "grocery", "produce", "fruit"),
     "food", "product"),
    (("return", "refund", "complaint", "manager", "problem"),
     "service", "complaint"),
)
_DEFAULT = ("service", "inquiry")


class Expression(ABC):
    """A node of a request's expression tree."""

    @abstractmethod
    def interpret(self, context: MutableMapping[str, str]) -> str:
        """Return the node's meaning, recording anything useful in ``context``."""


@dataclass(frozen=True)
class KeywordExpression(Expression):
    """A single keyword; it means itself."""

    keyword: str

    def interpret(self, context: MutableMapping[str, str]) -> str:
        return self.keyword


@dataclass(frozen=True)
class RequestExpression(Expression):
    """A department and an action, read as ``department:action``."""

    department: Expression
    action: Expression

    def interpret(self, context: MutableMapping[str, str]) -> str:
        department = self.department.interpret(context)
        action = self.action.interpret(context)
        context["department"] = department
        context["action"] = action
        return f"{department}:{action}"


class RequestParser:
    """Builds a request expression from free text by spotting keywords."""

    def parse(self, customer_request: str) -> Expression:
        """Return the expression for a request; unknown requests go to service."""
        text = customer_request.translate(_ASCII_LOWER)
        department, action = next(
            (
                (dept, act)
                for keywords, dept, act in _RULES
                if any(keyword in text for keyword in keywords)
            ),
            _DEFAULT,
        )
        return RequestExpression(KeywordExpression(department), KeywordExpression(action))