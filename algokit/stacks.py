"""Stack-based puzzles: bracket matching, path simplification and RPN evaluation."""

from __future__ import annotations

from collections.abc import Iterable

_CLOSERS = {"(": ")", "{": "}", "[": "]"}
_OPERATORS = frozenset({"+", "-", "*", "/"})


def valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket must close the innermost
    open bracket, so stray characters make the string invalid.
    """
    expected: list[str] = []
    for char in s:
        closer = _CLOSERS.get(char)
        if closer is not None:
            expected.append(closer)
        elif not expected or expected.pop() != char:
            return False
    return not expected


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed run of round brackets in ``s``."""
    stack = [-1]
    longest = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
        elif char == ")":
            stack.pop()
            if stack:
                longest = max(longest, index - stack[-1])
            else:
                stack.append(index)
    return longest


def simplify_path(path: str) -> str:
    """Canonical form of a Unix-style absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation.

    Division truncates towards zero. Raises ``ValueError`` on malformed input.
    """
    stack: list[int] = []
    for token in tokens:
        if token not in _OPERATORS:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        if token == "+":
            stack.append(left + right)
        elif token == "-":
            stack.append(left - right)
        elif token == "*":
            stack.append(left * right)
        else:
            stack.append(_truncating_divide(left, right))
    if not stack:
        raise ValueError("expression is empty")
    return stack[-1]