## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

from linkstack.types import Node, nil
from linkstack.stack import Stack
from linkstack.parser import Command
from linkstack import formatting as F


def test_chain_conversion_is_top_first():
    chain = F.list_to_chain([3, 2, 1])
    assert chain.value == 3
    assert F.chain_to_list(chain) == [3, 2, 1]
    assert F.chain_to_list(nil) == []
    assert F.list_to_chain([]) is nil


def test_list_to_chain_on_base():
    base = Node('bottom')
    chain = F.list_to_chain(['a', 'b'], base=base)
    assert F.chain_to_list(chain) == ['a', 'b', 'bottom']


def test_format_value_matches_script_output():
    assert F.format_value(True) == 'true'
    assert F.format_value(False) == 'false'
    assert F.format_value(None) == 'null'
    assert F.format_value('hi there') == 'hi there'
    assert F.format_value(1.5) == '1.5'


def test_format_literal_quotes_strings():
    assert F.format_literal('say "hi"') == '"say \\"hi\\""'
    assert F.format_literal(42) == '42'
    assert F.format_literal(None) == 'null'


def test_describe_chain():
    assert F.describe_chain(nil) == "Top -> null"
    assert F.describe_chain(Node(1, Node(2))) == "Top -> 1 -> 2 -> null"


def test_write_without_ansi():
    out = []
    write = F.write_without_ansi(out.append)
    write("\033[30;43m ERROR. \033[0m plain")
    assert out == [" ERROR.  plain"]


def test_show_stack_truncates_long_output():
    buf = io.StringIO()
    F.show_stack(Stack.from_values(range(100)), width=20, file=buf)
    line = buf.getvalue().rstrip('\n')
    assert line.startswith("Top -> 99")
    assert line.endswith(' …')
    assert len(line) == 20


def test_show_command_and_stack():
    buf = io.StringIO()
    F.show_command_and_stack(Command('push', (1, "a")), Stack.from_values([5]), file=buf)
    out = buf.getvalue()
    assert out.startswith('push 1 "a"')
    assert out.rstrip().endswith("Top -> 5 -> null")
