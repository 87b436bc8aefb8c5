"""Token types for infix and postfix arithmetic-like expressions.

An infix stream is made of `Operand`, `BinaryOp`, `GroupStart` and `GroupEnd`
tokens; a postfix stream only of `Operand` and `BinaryOp` tokens, since
operator placement alone encodes the order of application.

There is no unary operator token: unary operations are expected to have been
folded into an `Operand` already.
"""
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

T = TypeVar("T")
Op = TypeVar("Op", bound="BinaryOperator")


class BinaryOperator(Protocol):
    """What `convert` needs from the operator wrapped by a `BinaryOp`.

    `precedence` says how tightly the operator binds to its two operands;
    higher values are applied first. Only the relative order matters.

    >>> from enum import Enum
    >>> class ArithOp(Enum):
    ...     ADD = "+"
    ...     SUB = "-"
    ...     MUL = "*"
    ...     DIV = "/"
    ...
    ...     def precedence(self):
    ...         return 2 if self in (ArithOp.MUL, ArithOp.DIV) else 1
    >>> ArithOp.MUL.precedence() > ArithOp.SUB.precedence()
    True
    """

    def precedence(self) -> int:
        ...


@dataclass(frozen=True)
class Operand(Generic[T]):
    """A value to operate on: a scalar, a list, a function call, ...

    The payload is opaque, it is passed through untouched.
    """

    value: T


@dataclass(frozen=True)
class BinaryOp(Generic[Op]):
    """A binary operator, e.g. the addition of two values."""

    op: Op

    def precedence(self) -> int:
        return self.op.precedence()


@dataclass(frozen=True)
class GroupStart:
    """Abstract start of a group, `(` in a typical arithmetic expression."""


@dataclass(frozen=True)
class GroupEnd:
    """Abstract end of a group, `)` in a typical arithmetic expression."""


GROUP_START = GroupStart()
GROUP_END = GroupEnd()

InfixToken = Union[Operand, BinaryOp, GroupStart, GroupEnd]
PostfixToken = Union[Operand, BinaryOp]

# Entries of the auxiliary stack used while converting.
_StackToken = Union[BinaryOp, GroupStart]


def _to_postfix(entry: _StackToken) -> PostfixToken:
    # Group starts are always consumed by their group end (or the conversion
    # fails) before the stack gets drained.
    if isinstance(entry, BinaryOp):
        return entry
    if isinstance(entry, GroupStart):
        raise AssertionError("Unbalanced groups")
    raise TypeError(f"not a stack entry: {entry!r}")
