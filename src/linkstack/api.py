## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Module-level shortcuts: `linkstack.api.run(...)`, `.apply(...)`, `.stack`, etc. all
# act on one shared default `Runtime`.  Create your own `Runtime` for isolated stacks.
#

from .types import Node, nil
from .stack import Stack
from .errors import *
from .errors import __all__ as _error_names
from .runtime import Runtime

__all__ = ['Node', 'nil', 'Stack', 'Runtime', *_error_names]

_RUNTIME = Runtime()
_DELEGATED = ('stack', 'run', 'apply', 'reset', 'to_stack', 'from_stack')


def __getattr__(name):
    if name in _DELEGATED:
        return getattr(_RUNTIME, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
    return sorted([*globals(), *_DELEGATED])
