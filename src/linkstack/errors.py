## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

__all__ = ['StackError', 'EmptyStructureError', 'CommandParseError', 'IncompleteCommand']


class StackError(Exception):
    def __init__(self, message: str = "", *, stack_op=None, command=None, stack=None):
        """Base class for all errors raised by stacks and their scripts."""
        super().__init__(message)
        self.stack_op: str = stack_op
        self.command: object = command
        self.stack: object = stack

class EmptyStructureError(StackError, IndexError):
    """Removal or inspection attempted on a stack with zero elements."""
    pass


class CommandParseError(StackError):
    """Script text that is not a sequence of commands.

    `meta` has the same shape as `Command.meta`, so a bad token and a failing
    command are reported from the same place in the source.
    """
    def __init__(self, message, *, token: str = '', meta: dict | None = None):
        super().__init__(message)
        self.token = token
        self.meta = meta or {}

    filename = property(lambda self: self.meta.get('filename'))
    line = property(lambda self: self.meta.get('line'))
    column = property(lambda self: self.meta.get('column'))


class IncompleteCommand(CommandParseError):
    """Input stopped in the middle of a command, e.g. `push` with no values yet."""
    pass
