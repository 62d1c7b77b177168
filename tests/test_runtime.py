## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

import pytest

from linkstack.runtime import Runtime
from linkstack.stack import Stack
from linkstack.types import nil
from linkstack.errors import EmptyStructureError, CommandParseError


def test_runtime_run_keeps_stack_between_scripts():
    rt = Runtime()
    buf = io.StringIO()
    rt.run("push 1 2", file=buf)
    rt.run("push 3", file=buf)
    stack = rt.run("pop", file=buf)
    assert buf.getvalue() == "3\n"
    assert rt.from_stack(stack) == [2, 1]


def test_runtime_with_given_stack():
    stack = Stack.from_values([1])
    rt = Runtime(stack)
    rt.run("push 2", file=io.StringIO())
    assert rt.stack is stack
    assert stack.peek() == 2


def test_runtime_apply():
    rt = Runtime()
    assert rt.apply('push', 'a', 'b') is None
    assert rt.apply('peek') == 'b'
    assert rt.apply('empty?') is False
    assert rt.apply('pop') == 'b'
    assert rt.apply('size') == 1
    assert rt.apply('show') == 'Top -> a -> null'
    with pytest.raises(ValueError):
        rt.apply('rotate')


def test_runtime_errors_propagate():
    rt = Runtime()
    with pytest.raises(EmptyStructureError):
        rt.run("pop")
    with pytest.raises(CommandParseError):
        rt.run("push 1; jump")
    # A syntax error rejects the whole script before anything runs.
    assert rt.stack.is_empty()


def test_runtime_reset():
    rt = Runtime()
    rt.run("push 1")
    rt.reset()
    assert rt.stack.is_empty()


def test_runtime_conversions():
    rt = Runtime()
    stack = rt.to_stack([1, 2, 3])
    assert stack.peek() == 1
    assert rt.from_stack(stack) == [1, 2, 3]
    assert rt.from_stack(stack.top.next) == [2, 3]
    assert rt.from_stack(nil) == []


def test_runtime_apply_underflow():
    rt = Runtime()
    with pytest.raises(EmptyStructureError):
        rt.apply('peek')
