## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

import linkstack.api as L


def test_api_exports_types_and_errors():
    assert L.Stack().is_empty()
    assert L.Node(1).next is L.nil
    assert issubclass(L.EmptyStructureError, L.StackError)
    assert issubclass(L.IncompleteCommand, L.CommandParseError)


def test_api_default_runtime():
    L.reset()
    buf = io.StringIO()
    stack = L.run("push 4 5; pop", file=buf)
    assert buf.getvalue() == "5\n"
    assert L.from_stack(stack) == [4]
    L.reset()
    assert L.stack.is_empty()


def test_api_conversions():
    s = L.to_stack([1, 2])
    assert L.from_stack(s) == [1, 2]


def test_api_namespace_is_explicit():
    assert not hasattr(L, 'lark')
    assert 'EmptyStructureError' in L.__all__
    assert 'run' in dir(L)
    L.reset()
    L.apply('push', 1)
    assert L.apply('pop') == 1
