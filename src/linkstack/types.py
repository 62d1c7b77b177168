## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import TypeVar
from collections import namedtuple

T = TypeVar('T')

_END = object()


# Node type is a namedtuple to save memory, yet provide value/next accessors.
class Node(namedtuple('Node', ['value', 'next'])):
    __slots__ = ()

    def __new__(cls, value, next=_END):
        if next is _END:
            next = nil
        elif next is None:
            # By convention, the only terminator is the canonical `nil` below.
            if value is None:
                raise ValueError("Use the canonical `nil` instance to end a chain")
            raise TypeError("Node links must point to another Node or `nil`, not None.")
        if not isinstance(next, Node):
            raise TypeError(f"Node links must point to another Node or `nil`, not {type(next).__name__}.")
        return super(Node, cls).__new__(cls, value, next)

    def __repr__(self):
        if self is nil:
            return "< nil >"
        return f"Node({self.value!r})"

    def __bool__(self):
        raise TypeError("Node truth value is ambiguous; compare with `is nil` or `is not nil`.")


# All checks for the end of a chain must be done by comparing to this.
nil = Node._make((None, None))
