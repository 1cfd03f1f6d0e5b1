import sys
from typing import Any


_debug_trace_lookup = False


def set_debug_trace_lookup(b: bool):
    global _debug_trace_lookup
    _debug_trace_lookup = b


def debug_trace_lookup() -> bool:
    return _debug_trace_lookup


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)
