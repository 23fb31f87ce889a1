"""Bracket checking, infix-to-postfix conversion and postfix evaluation."""

from __future__ import annotations

_OPENERS = "([{"
_CLOSERS = ")]}"
_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_matching_pair(opening: str, closing: str) -> bool:
    """Tell whether opening and closing form one of (), [] or {}."""
    return _PAIRS.get(closing) == opening


def is_valid_expression(expression: str) -> bool:
    """Check that the brackets in an expression are balanced and nested.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or not is_matching_pair(stack.pop(), ch):
                return False
    return not stack


def is_valid_brackets(text: str) -> bool:
    """Check a string made only of brackets.

    Every character that is not an opening bracket must close the most
    recent open one, so any other character makes the string invalid.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and is_matching_pair(stack[-1], ch):
            stack.pop()
        else:
            return False
    return not stack


def precedence(op: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if op == "^":
        return 3
    if op in "*/" and op:
        return 2
    if op in "+-" and op:
        return 1
    return -1


def is_right_associative(op: str) -> bool:
    """Tell whether an operator groups from the right."""
    return op == "^"


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Letters and digits are operands; every other character except the
    parentheses is handled as an operator.
    """
    stack: list[str] = []
    result: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            result.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while (
                stack
                and stack[-1] != "("
                and (
                    precedence(stack[-1]) > precedence(ch)
                    or (
                        precedence(stack[-1]) == precedence(ch)
                        and not is_right_associative(ch)
                    )
                )
            ):
                result.append(stack.pop())
            stack.append(ch)
    while stack:
        op = stack.pop()
        if op == "(":
            raise ValueError("unmatched '(' in expression")
        result.append(op)
    return "".join(result)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Each operator takes the top of the stack as its left operand and the
    item beneath it as its right operand. Division truncates toward zero.
    Characters that are neither digits nor operators are ignored.
    """
    stack: list[int] = []
    for ch in expression:
        if ch in "0123456789":
            stack.append(int(ch))
        elif ch in "+-*/":
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            a = stack.pop()
            b = stack.pop()
            if ch == "+":
                stack.append(a + b)
            elif ch == "-":
                stack.append(a - b)
            elif ch == "*":
                stack.append(a * b)
            else:
                if b == 0:
                    raise ZeroDivisionError("division by zero in expression")
                stack.append(_truncating_divide(a, b))
    if not stack:
        raise ValueError("expression has no value")
    return stack[-1]