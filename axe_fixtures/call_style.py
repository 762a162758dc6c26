"""Calling conventions accepted by an engine's ``run``.

``run`` may be awaited for its result, or given a trailing ``(err, results)``
completion callback. The convention is decided once, where the call enters the
adapter, and carried as a ``CallStyle`` value from then on.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

CompletionCallback = Callable[[Optional[BaseException], Any], None]


@dataclass(frozen=True)
class Awaited:
    pass


@dataclass(frozen=True)
class Callback:
    fn: CompletionCallback


CallStyle = Union[Awaited, Callback]


def split_call_style(args: Tuple[Any, ...]) -> Tuple[Tuple[Any, ...], CallStyle]:
    """Split positional ``args`` into (leading args, call style).

    The last positional argument is treated as the completion callback
    whenever it is callable, regardless of how many arguments precede it.
    """
    if args and callable(args[-1]):
        return args[:-1], Callback(args[-1])
    return args, Awaited()


__all__ = ["Awaited", "Callback", "CallStyle", "CompletionCallback", "split_call_style"]
