"""Write sinks: where each productive tick's value ends up."""
from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """A settable destination for a number formatted with its unit."""

    def write(self, value: str) -> None:
        ...


class StyleSink:
    """One style property of one element: `element.style[prop] = value`."""

    def __init__(self, element: Any, prop: str) -> None:
        self.element = element
        self.prop = prop

    def write(self, value: str) -> None:
        self.element.style[self.prop] = value

    def __repr__(self) -> str:
        return f"StyleSink({self.element!r}, {self.prop!r})"


class AttrSink:
    """An attribute on any object: `setattr(obj, field, value)`."""

    def __init__(self, obj: Any, field: str) -> None:
        self.obj = obj
        self.field = field

    def write(self, value: str) -> None:
        setattr(self.obj, self.field, value)

    def __repr__(self) -> str:
        return f"AttrSink({self.obj!r}, {self.field!r})"


class CallbackSink:
    def __init__(self, fn: Callable[[str], None]) -> None:
        self.fn = fn

    def write(self, value: str) -> None:
        self.fn(value)

    def __repr__(self) -> str:
        return f"CallbackSink({self.fn!r})"


def as_sink(target: Sink | Callable[[str], None]) -> Sink:
    """Pass a Sink through unchanged; wrap a plain callable in CallbackSink."""
    if isinstance(target, Sink):
        return target
    if callable(target):
        return CallbackSink(target)
    raise TypeError(f"expected a Sink or a callable, got {type(target).__name__}")


def format_value(value: float, unit: str = "") -> str:
    """Join a number and its unit the way a style string expects.

    Integral values print as ints: 42.0 -> "42px", 1e21 -> every digit.
    Others use Python's shortest repr: 7.5 -> "7.5%", 1e-07 -> "1e-07px".
    """
    if float(value).is_integer():
        return f"{int(value)}{unit}"
    return f"{float(value)!r}{unit}"
