## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Generic, Iterable

from .types import Node, T, nil
from .errors import EmptyStructureError
from .formatting import describe_chain


class Stack(Generic[T]):
    """Last-in first-out container, built as a chain of `Node` cells.

    The stack only holds a reference to its `top` node, which is `nil` when empty.
    Following `next` from the top visits values from most to least recently pushed.
    Nodes are never shared between stacks nor modified after being linked, so
    `push` and `pop` only ever move the `top` reference by one hop.
    """

    __slots__ = ('top', '_size')

    def __init__(self):
        self.top: Node = nil
        self._size: int = 0

    @classmethod
    def from_values(cls, values: Iterable[T]) -> "Stack[T]":
        """Build a stack by pushing `values` in order; the last one ends on top."""
        stack = cls()
        stack.extend(values)
        return stack

    def is_empty(self) -> bool:
        return self.top is nil

    def push(self, value: T) -> None:
        self.top = Node(value, self.top)
        self._size += 1

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.push(value)

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyStructureError("Stack is empty!", stack_op='pop', stack=self)
        value, self.top = self.top
        self._size -= 1
        return value

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyStructureError("Stack is empty!", stack_op='peek', stack=self)
        return self.top.value

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self.top, self._size = nil, 0

    def describe(self) -> str:
        return describe_chain(self.top)

    def __len__(self):
        return self._size

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return f"<Stack size={self._size}: {self.describe()}>"
