"""Tests for write sinks and value formatting."""

import pytest

from cadence_tween import AttrSink, CallbackSink, Sink, StyleSink, as_sink, format_value


class Element:
    """Stand-in for a UI element with a style mapping."""

    def __init__(self):
        self.style = {}


class TestFormatValue:
    """Number + unit concatenation."""

    def test_integral_float_drops_fraction(self):
        assert format_value(42.0, "px") == "42px"

    def test_int(self):
        assert format_value(7, "%") == "7%"

    def test_fractional(self):
        assert format_value(7.5, "%") == "7.5%"

    def test_no_unit(self):
        assert format_value(3.0) == "3"

    def test_zero(self):
        assert format_value(0.0, "px") == "0px"

    def test_large_integral_prints_every_digit(self):
        assert format_value(1e21, "px") == "1000000000000000000000px"

    def test_tiny_value_uses_python_repr(self):
        assert format_value(1e-7, "px") == "1e-07px"


class TestSinks:
    def test_style_sink_sets_property(self):
        """StyleSink writes into element.style[prop]."""
        el = Element()
        StyleSink(el, "height").write("12px")
        assert el.style == {"height": "12px"}

    def test_attr_sink_sets_attribute(self):
        class Box:
            top = ""

        box = Box()
        AttrSink(box, "top").write("5vh")
        assert box.top == "5vh"

    def test_callback_sink(self):
        seen = []
        CallbackSink(seen.append).write("1px")
        assert seen == ["1px"]

    def test_style_sink_missing_style_raises(self):
        """Writing to an element without a style mapping fails loudly."""
        with pytest.raises(AttributeError):
            StyleSink(object(), "height").write("1px")


class TestAsSink:
    def test_sink_passes_through(self):
        sink = StyleSink(Element(), "width")
        assert as_sink(sink) is sink

    def test_callable_is_wrapped(self):
        seen = []
        sink = as_sink(seen.append)
        assert isinstance(sink, Sink)
        sink.write("2px")
        assert seen == ["2px"]

    def test_rejects_other_objects(self):
        with pytest.raises(TypeError):
            as_sink(42)
