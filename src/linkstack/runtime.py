## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

from .types import Node
from .stack import Stack
from .parser import Command, COMMAND_NAMES, parse
from .interpreter import execute, execute_step
from .formatting import chain_to_list


class Runtime:
    """Minimal runtime facade focused on embedding: one stack, driven by scripts."""

    def __init__(self, stack: Stack | None = None):
        self.stack = Stack() if stack is None else stack

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def run(self, source: str, filename: str | None = None,
            verbosity: int = 0, stats: dict | None = None, file=None) -> Stack:
        commands = list(parse(source, filename=filename))
        self.stack = execute(commands, self.stack, verbosity=verbosity, stats=stats, file=file)
        return self.stack

    def apply(self, name: str, *args: Any) -> Any:
        """Run one command without printing; returns what `pop`, `peek`, `empty?`,
        `size` or `show` report, and None for `push` and `clear`."""
        if name not in COMMAND_NAMES.values():
            raise ValueError(f"Unknown command `{name}`.")
        return execute_step(Command(name, args), self.stack)

    def reset(self) -> None:
        self.stack = Stack()

    # Conversion ──────────────────────────────────────────────────────────────────────────────
    def to_stack(self, values: list) -> Stack:
        """First item of `values` ends up on top, the same order `from_stack` returns."""
        return Stack.from_values(reversed(values))

    def from_stack(self, stack: Stack | Node) -> list:
        return chain_to_list(stack.top if isinstance(stack, Stack) else stack)
