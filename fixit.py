"""Convert infix tokens to postfix tokens (Reverse Polish notation).

The conversion is the shunting-yard method: a single pass over the input with
one auxiliary stack for pending operators and group starts.

>>> class Op(str):
...     def precedence(self):
...         return {"+": 1, "-": 1, "*": 2, "/": 2}[self]
>>> tokens = [Operand("a"), BinaryOp(Op("+")), Operand("b"), BinaryOp(Op("*")), Operand("c")]
>>> " ".join(str(t.value if isinstance(t, Operand) else t.op) for t in convert(tokens))
'a b c * +'
>>> convert([GROUP_START, Operand("a")])
Traceback (most recent call last):
 ...
fixit.UnbalancedGroups: Unbalanced groups
"""
import logging
from typing import Iterable, List

from infix_tokens import (
    GROUP_END,
    GROUP_START,
    BinaryOp,
    BinaryOperator,
    GroupEnd,
    GroupStart,
    InfixToken,
    Operand,
    PostfixToken,
    _StackToken,
    _to_postfix,
)

__all__ = [
    "convert",
    "ConvertError",
    "UnbalancedGroups",
    "BinaryOperator",
    "InfixToken",
    "PostfixToken",
    "Operand",
    "BinaryOp",
    "GroupStart",
    "GroupEnd",
    "GROUP_START",
    "GROUP_END",
]

logger = logging.getLogger(__name__)


class ConvertError(ValueError):
    """An error during infix to postfix conversion."""


class UnbalancedGroups(ConvertError):
    """Group starts and group ends did not match up.

    `depth` is signed: positive for unclosed groups, negative for group ends
    without a group start. It is the net count when starts and ends differ in
    number, otherwise the lowest running depth reached.
    """

    def __init__(self, depth: int):
        super().__init__("Unbalanced groups")
        self.depth = depth

    def __repr__(self):
        return f"UnbalancedGroups({self.depth})"

    def __eq__(self, other):
        if not isinstance(other, UnbalancedGroups):
            return NotImplemented
        return self.depth == other.depth

    def __hash__(self):
        return hash((UnbalancedGroups, self.depth))


def _pops_before(top: _StackToken, op: BinaryOp) -> bool:
    # >= makes operators of equal precedence left-associative.
    return isinstance(top, BinaryOp) and top.precedence() >= op.precedence()


def convert(tokens: Iterable[InfixToken]) -> List[PostfixToken]:
    """Return the postfix form of the infix token stream `tokens`.

    `tokens` is consumed exactly once and may be any iterable. The only check
    made is that groups are properly nested; a stream with e.g. two adjacent
    operators is reordered as if it were valid.

    Raises `UnbalancedGroups` if a group is left open or closed without
    having been opened.

    >>> convert([])
    []
    >>> convert([Operand(1), Operand(2)])
    [Operand(value=1), Operand(value=2)]
    """
    result: List[PostfixToken] = []
    stack: List[_StackToken] = []
    depth = lowest = 0

    for token in tokens:
        if isinstance(token, Operand):
            result.append(token)
        elif isinstance(token, BinaryOp):
            while stack and _pops_before(stack[-1], token):
                result.append(_to_postfix(stack.pop()))
            stack.append(token)
        elif isinstance(token, GroupStart):
            stack.append(token)
            depth += 1
        elif isinstance(token, GroupEnd):
            while stack:
                last = stack.pop()
                if isinstance(last, GroupStart):
                    break
                result.append(_to_postfix(last))
            depth -= 1
            lowest = min(lowest, depth)
        else:
            raise TypeError(f"not an infix token: {token!r}")

    if depth or lowest:
        logger.debug("unbalanced groups: net depth %d, lowest depth %d", depth, lowest)
        raise UnbalancedGroups(depth or lowest)
    result.extend(_to_postfix(entry) for entry in reversed(stack))
    return result
