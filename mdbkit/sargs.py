"""Search-argument trees built while parsing a SQL WHERE clause."""

from __future__ import annotations

import locale
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any


class SqlError(Exception):
    """Raised when a SQL statement cannot be parsed or evaluated."""


class Op(Enum):
    """Operators that can appear in a search-argument tree."""

    OR = "or"
    AND = "and"
    NOT = "not"
    EQUAL = "="
    GT = ">"
    LT = "<"
    GTEQ = ">="
    LTEQ = "<="
    LIKE = "like"
    ILIKE = "ilike"
    ISNULL = "is null"
    NOTNULL = "is not null"
    NEQ = "<>"


class ValueType(Enum):
    """Type of the constant stored in a search-argument node."""

    TEXT = "text"
    DOUBLE = "double"
    INT = "int"


@dataclass(eq=False)
class SargNode:
    """One node of a search-argument tree."""

    op: Op
    left: SargNode | None = None
    right: SargNode | None = None
    col_name: str | None = None
    col: Any = None
    value: Any = None
    val_type: ValueType | None = None


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _strtod(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _like(value: str, pattern: str, ignore_case: bool = False) -> bool:
    parts = []
    for ch in pattern:
        if ch == "%":
            parts.append(".*")
        elif ch == "_":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
    return re.fullmatch("".join(parts), value, flags) is not None


class SargBuilder:
    """Builds a search-argument tree bottom-up from a stack of nodes."""

    def __init__(self) -> None:
        self.stack: list[SargNode] = []
        self.tree: SargNode | None = None

    def push(self, node: SargNode) -> None:
        """Push a node; the most recently pushed node becomes the tree root."""
        self.stack.append(node)
        self.tree = node

    def pop(self) -> SargNode | None:
        """Remove and return the top node, or None if the stack is empty."""
        return self.stack.pop() if self.stack else None

    def add_sarg(self, col_name: str, op: Op, constant: str | None) -> SargNode:
        """Push a comparison of a column against a literal constant."""
        node = SargNode(op=op, col_name=col_name)
        if constant is not None:
            if constant.startswith("'"):
                node.value = constant[1:-1]
                node.val_type = ValueType.TEXT
            elif "." in constant:
                node.value = _strtod(constant)
                node.val_type = ValueType.DOUBLE
            else:
                node.value = _atoi(constant)
                node.val_type = ValueType.INT
        self.push(node)
        return node

    def _combine(self, op: Op, word: str) -> SargNode:
        left = self.pop()
        right = self.pop()
        if left is None or right is None:
            self.clear()
            raise SqlError(f"parse error near '{word}'")
        node = SargNode(op=op, left=left, right=right)
        self.push(node)
        return node

    def add_and(self) -> SargNode:
        """Join the two topmost nodes with AND."""
        return self._combine(Op.AND, "AND")

    def add_or(self) -> SargNode:
        """Join the two topmost nodes with OR."""
        return self._combine(Op.OR, "OR")

    def add_not(self) -> SargNode:
        """Negate the topmost node."""
        left = self.pop()
        if left is None:
            self.clear()
            raise SqlError("parse error near 'NOT'")
        node = SargNode(op=Op.NOT, left=left)
        self.push(node)
        return node

    def eval_expr(self, const1: str, op: Op, const2: str) -> SargNode:
        """Evaluate a comparison of two literals and push its truth value."""
        quoted1 = const1.startswith("'")
        quoted2 = const2.startswith("'")
        if quoted1 and quoted2:
            order = locale.strcoll(const1, const2)
            outcomes = {
                Op.EQUAL: lambda: order == 0,
                Op.GT: lambda: order > 0,
                Op.GTEQ: lambda: order >= 0,
                Op.LT: lambda: order < 0,
                Op.LTEQ: lambda: order <= 0,
                Op.LIKE: lambda: _like(const1, const2),
                Op.ILIKE: lambda: _like(const1, const2, ignore_case=True),
                Op.NEQ: lambda: order != 0,
            }
        elif not quoted1 and not quoted2:
            val1, val2 = _atoi(const1), _atoi(const2)
            outcomes = {
                Op.EQUAL: lambda: val1 == val2,
                Op.GT: lambda: val1 > val2,
                Op.GTEQ: lambda: val1 >= val2,
                Op.LT: lambda: val1 < val2,
                Op.LTEQ: lambda: val1 <= val2,
                Op.NEQ: lambda: val1 != val2,
            }
        else:
            self.clear()
            raise SqlError("Comparison of strings and numbers not allowed.")
        outcome = outcomes.get(op)
        if outcome is None:
            self.clear()
            raise SqlError("Illegal operator used for comparison of literals.")
        node = SargNode(
            op=Op.EQUAL, value=1 if outcome() else 0, val_type=ValueType.INT
        )
        self.push(node)
        return node

    def clear(self) -> None:
        """Discard every pending node and the tree."""
        self.stack.clear()
        self.tree = None


_DUMP_FORMATS = {
    Op.OR: lambda node: " or\n",
    Op.AND: lambda node: " and\n",
    Op.NOT: lambda node: " not\n",
    Op.LT: lambda node: f" < {node.value}\n",
    Op.GT: lambda node: f" > {node.value}\n",
    Op.LIKE: lambda node: f" like {node.value}\n",
    Op.ILIKE: lambda node: f" ilike {node.value}\n",
    Op.EQUAL: lambda node: f" = {node.value}\n",
}


def dump_node(node: SargNode, level: int = 0) -> str:
    """Render a search-argument tree as indented text."""
    mylevel = level + 1
    parts = []
    if not level:
        parts.append("root  ")
    parts.append("--->" * mylevel)
    fmt = _DUMP_FORMATS.get(node.op)
    if fmt is not None:
        parts.append(fmt(node))
    if node.left is not None:
        parts.append("left  ")
        parts.append(dump_node(node.left, mylevel))
    if node.right is not None:
        parts.append("right ")
        parts.append(dump_node(node.right, mylevel))
    return "".join(parts)