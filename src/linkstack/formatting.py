## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import Node, nil


def chain_to_list(node: Node) -> list:
    """Collect the values of a chain from `node` down to (excluding) `nil`, top first."""
    result = []
    while node is not nil:
        value, node = node
        result.append(value)
    return result

def list_to_chain(values: list, base: Node = None) -> Node:
    # First item of the list ends up on top, matching `chain_to_list`.
    node = nil if base is None else base
    for value in reversed(values):
        node = Node(value, node)
    return node


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_value(it) -> str:
    if it is None: return 'null'
    if isinstance(it, bool): return str(it).lower()
    return str(it)

def format_literal(it) -> str:
    """Render a value the way it would be typed in a command script."""
    if isinstance(it, str):
        return '"' + it.replace('\\', '\\\\').replace('"', '\\"') + '"'
    return format_value(it)

def describe_chain(node: Node) -> str:
    parts = ['Top']
    while node is not nil:
        parts.append(format_value(node.value))
        node = node.next
    parts.append('null')
    return ' -> '.join(parts)

def show_stack(stack, width=72, end='\n', file=None):
    stack_str = describe_chain(stack.top)
    if width is not None and len(stack_str) > width:
        stack_str = stack_str[:width-2] + ' …'
    print(stack_str, end=end, file=file)

def show_command_and_stack(command, stack, width=40, file=None):
    cmd_str = format_command(command) if command is not None else '∅'
    if len(cmd_str) > width:
        cmd_str = cmd_str[:+width-2] + ' …'
    print(f"{cmd_str:<{width}} \033[36m <=> \033[0m ", end='', file=file)
    show_stack(stack, file=file)

def format_command(command) -> str:
    return ' '.join([command.name, *(format_literal(a) for a in command.args)])
