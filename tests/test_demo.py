## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

from linkstack.demo import run_demo


EXPECTED = """After push 10, 20, 30:
Top -> 30 -> 20 -> 10 -> null

Top element peek: 30

Popped: 30
Popped: 20
After popping:
Top -> 10 -> null

Is stack empty? false

Popped: 10
Is stack empty? true
Error: Stack is empty!
"""


def test_demo_transcript():
    buf = io.StringIO()
    stack = run_demo(file=buf)
    assert buf.getvalue() == EXPECTED
    assert stack.is_empty()
