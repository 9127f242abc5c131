"""Render containers the way a debug trace expects and print them to stderr."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Mapping
from typing import Any, Iterable, TextIO


def _ordered(items: Iterable[Any]) -> list[Any]:
    """Return set items sorted when they are comparable, else in iteration order."""
    values = list(items)
    try:
        return sorted(values)
    except TypeError:
        return values


def _join(items: Iterable[Any]) -> str:
    return ", ".join(format_value(item) for item in items)


def format_value(value: Any) -> str:
    """Return a compact textual rendering of ``value``.

    Lists and deques become ``[a, b]``, tuples ``(a, b)``, mappings
    ``{k: v}`` and sets ``{a, b}``. Strings are shown without quotes,
    booleans as ``1``/``0`` and floats with six significant digits.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, (list, deque)):
        return f"[{_join(value)}]"
    if isinstance(value, tuple):
        return f"({_join(value)})"
    if isinstance(value, Mapping):
        body = ", ".join(
            f"{format_value(key)}: {format_value(item)}" for key, item in value.items()
        )
        return f"{{{body}}}"
    if isinstance(value, (set, frozenset)):
        return f"{{{_join(_ordered(value))}}}"
    return str(value)


def dbg_out(*args: Any, file: TextIO | None = None) -> None:
    """Write each argument preceded by a space, then a newline."""
    out = sys.stderr if file is None else file
    out.write("".join(f" {format_value(arg)}" for arg in args) + "\n")


def dbg(label: str, *args: Any, file: TextIO | None = None) -> None:
    """Write ``(label):`` followed by the values of ``args``."""
    out = sys.stderr if file is None else file
    out.write(f"({label}):")
    dbg_out(*args, file=out)