"""cadence-tween - Linear counter sweeps written to a property sink."""
from __future__ import annotations

from cadence_tween.components import TweenRun
from cadence_tween.runner import TweenHandle, run_tween
from cadence_tween.sinks import AttrSink, CallbackSink, Sink, StyleSink, as_sink, format_value

__all__ = [
    "TweenRun",
    "TweenHandle",
    "run_tween",
    "Sink",
    "StyleSink",
    "AttrSink",
    "CallbackSink",
    "as_sink",
    "format_value",
]
