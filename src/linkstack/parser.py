## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import ast
from pathlib import Path
from dataclasses import dataclass, field

import lark
from .errors import CommandParseError, IncompleteCommand


GRAMMAR = r"""start: (command | SEPARATOR)*
?command: push | pop | peek | is_empty | size | show | clear
push: PUSH value+
pop: POP
peek: PEEK
is_empty: EMPTY
size: SIZE
show: SHOW
clear: CLEAR
?value: FLOAT | INTEGER | STRING | TRUE | FALSE | NULL

// COMMENTS
COMMENT.11: /#[^\r\n]*/

// KEYWORDS
PUSH.9: "push"
POP.9: "pop"
PEEK.9: "peek"
EMPTY.9: "empty?"
SIZE.9: "size"
SHOW.9: "show"
CLEAR.9: "clear"
TRUE.9: "true"
FALSE.9: "false"
NULL.9: "null"

// TOKENS
SEPARATOR: ";"
STRING.8: /"(?:[^"\\\n]|\\[^\n])*"/
FLOAT.8: /-?(?:\d+\.\d+)(?:[eE][+-]?\d+)?/
INTEGER.8: /-?\d+/

// WHITESPACE
%import common.WS
%ignore WS
%ignore COMMENT
"""

COMMAND_NAMES = {'push': 'push', 'pop': 'pop', 'peek': 'peek', 'is_empty': 'empty?',
                 'size': 'size', 'show': 'show', 'clear': 'clear'}


@dataclass(frozen=True)
class Command:
    name: str                     # keyword as written in scripts, e.g. `empty?`
    args: tuple = ()              # literal values, only used by `push`
    meta: dict = field(default_factory=dict, compare=False)   # filename, line, column


_PARSER = None

def _get_parser() -> lark.Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)
    return _PARSER


def _token_meta(token: lark.Token, filename) -> dict:
    return {'filename': filename, 'line': token.line, 'column': token.column}


def _to_value(token: lark.Token, filename=None):
    match token.type:
        case 'INTEGER': return int(token.value)
        case 'FLOAT': return float(token.value)
        case 'STRING':
            # The lexer only checks quoting; escapes such as `\x4` can still be invalid.
            try:
                return ast.literal_eval(token.value)
            except (SyntaxError, ValueError) as exc:
                raise CommandParseError(f"Invalid string literal {token.value}: {exc.msg if isinstance(exc, SyntaxError) else exc}",
                                        token=token.value, meta=_token_meta(token, filename)) from None
        case 'TRUE': return True
        case 'FALSE': return False
        case 'NULL': return None
    raise NotImplementedError(f"Unexpected value token `{token.type}` from parser.")


def _convert_lark_error(exc: lark.exceptions.LarkError, source: str, filename) -> CommandParseError:
    meta = {'filename': filename, 'line': getattr(exc, 'line', None), 'column': getattr(exc, 'column', None)}
    if isinstance(exc, lark.exceptions.UnexpectedCharacters):
        # Whitespace is ignored by the lexer, so the offending word is never blank.
        return CommandParseError(str(exc), token=source[exc.pos_in_stream:].split(maxsplit=1)[0], meta=meta)
    token = getattr(exc, 'token', None)
    if token is None or token.type == '$END':
        return IncompleteCommand(str(exc), meta=meta)
    return CommandParseError(str(exc), token=token.value, meta=meta)


def parse(source: str, filename=None):
    """Parse a command script and yield one `Command` per statement, in order.

    The whole script is checked before the first command is yielded, so a bad
    literal near the end never leaves earlier commands half-applied.
    """
    try:
        tree = _get_parser().parse(source)
    except (lark.exceptions.UnexpectedInput, lark.exceptions.ParseError) as exc:
        raise _convert_lark_error(exc, source, filename) from None

    commands = []
    for node in tree.children:
        if isinstance(node, lark.Token):
            continue
        keyword, *values = node.children
        args = tuple(_to_value(v, filename) for v in values)
        commands.append(Command(COMMAND_NAMES[node.data], args, _token_meta(keyword, filename)))
    yield from commands


def format_source_context(meta: dict, token: str = '', source: str | None = None, around: int = 2) -> str:
    """Show the lines around `meta['line']`, with a caret under the offending `token`."""
    filename, line, column = meta.get('filename'), meta.get('line'), meta.get('column') or 1
    if not line or line < 1: return ""
    if source is None:
        if filename is None or not os.path.isfile(filename): return ""
        source = Path(filename).read_text(encoding='utf-8')

    lines = source.splitlines()
    result = [f"\033[97m  File \"{filename}\", line {line}\033[0m"]
    for number in range(max(1, line - around), min(len(lines), line + around) + 1):
        marker, colour = ('>', '\033[97m') if number == line else (' ', '\033[90m')
        result.append(f"{colour}  {marker} {number:>4} |\033[0m {lines[number-1]}")
        if number == line:
            underline = '^' + '~' * max(0, len(token) - 1)
            result.append(f"         | \033[1;33m{' ' * (column - 1)}{underline}\033[0m")
    return '\n'.join(result) + '\n'
