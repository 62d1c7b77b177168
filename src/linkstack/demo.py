## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .stack import Stack
from .errors import EmptyStructureError
from .formatting import format_value


def run_demo(file=None) -> Stack:
    stack: Stack[int] = Stack()

    stack.push(10)
    stack.push(20)
    stack.push(30)
    print("After push 10, 20, 30:", file=file)
    print(stack, file=file)

    print(f"\nTop element peek: {stack.peek()}", file=file)

    print(f"\nPopped: {stack.pop()}", file=file)
    print(f"Popped: {stack.pop()}", file=file)
    print("After popping:", file=file)
    print(stack, file=file)

    print(f"\nIs stack empty? {format_value(stack.is_empty())}", file=file)

    # Drain the last item, then show that underflow surfaces to the caller.
    print(f"\nPopped: {stack.pop()}", file=file)
    print(f"Is stack empty? {format_value(stack.is_empty())}", file=file)
    try:
        stack.pop()
    except EmptyStructureError as exc:
        print(f"Error: {exc}", file=file)
    return stack
