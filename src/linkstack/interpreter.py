## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

from .stack import Stack
from .errors import StackError
from .parser import Command
from .formatting import format_value, show_command_and_stack

# Commands whose result is printed when running scripts; the others only mutate.
REPORTING = frozenset({'pop', 'peek', 'empty?', 'size', 'show'})


def execute_step(command: Command, stack: Stack) -> Any:
    """Apply a single command to `stack` and return its result (None for `push` and `clear`)."""
    match command.name:
        case 'push':
            stack.extend(command.args)
        case 'pop':
            return stack.pop()
        case 'peek':
            return stack.peek()
        case 'empty?':
            return stack.is_empty()
        case 'size':
            return stack.size()
        case 'show':
            return stack.describe()
        case 'clear':
            stack.clear()
        case _:
            raise NotImplementedError(f"Unknown command `{command.name}`.")
    return None


def execute(commands, stack: Stack | None = None, verbosity=0, stats=None, file=None) -> Stack:
    stack = Stack() if stack is None else stack

    step, deepest = 0, stack.size()
    for command in commands:
        if verbosity > 0:
            print(f"\033[90m{step:>3} :\033[0m  ", end='', file=file)
            show_command_and_stack(command, stack, file=file)

        step += 1
        try:
            result = execute_step(command, stack)
        except StackError as exc:
            exc.command = command
            exc.stack = stack
            raise
        if command.name in REPORTING:
            print(format_value(result), file=file)
        deepest = max(deepest, stack.size())

    if verbosity > 0:
        print(f"\033[90m{step:>3} :\033[0m  ", end='', file=file)
        show_command_and_stack(None, stack, file=file)
    if stats is not None:
        stats['steps'] = stats.get('steps', 0) + step
        stats['deepest'] = max(stats.get('deepest', 0), deepest)

    return stack
