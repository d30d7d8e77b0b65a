"""Unit tests for Ruby literal rendering."""

import pytest

from vocabwriter.domain.ruby_literals import (
    inspect_float,
    inspect_string,
    inspect_symbol,
    inspect_value,
    is_bare_symbol,
)


class TestInspectString:
    """Test double-quoted string rendering."""

    def test_plain_text(self):
        assert inspect_string("Person") == '"Person"'

    def test_quotes_and_backslashes_escaped(self):
        assert inspect_string('say "hi" \\o/') == '"say \\"hi\\" \\\\o/"'

    def test_control_characters(self):
        assert inspect_string("a\nb\tc") == '"a\\nb\\tc"'
        assert inspect_string("\x01") == '"\\u0001"'

    def test_interpolation_markers_escaped(self):
        assert inspect_string("#{x} #$y #@z #") == '"\\#{x} \\#$y \\#@z #"'

    def test_unicode_kept(self):
        assert inspect_string("café") == '"café"'


class TestInspectSymbol:
    """Test symbol rendering."""

    @pytest.mark.parametrize("name", ["Foo", "foo_bar", "_x", "valid?", "été"])
    def test_bare_symbols(self, name):
        assert is_bare_symbol(name)
        assert inspect_symbol(name) == f":{name}"

    @pytest.mark.parametrize("name", ["dc:creator", "1st", "foo-bar", "", "a b"])
    def test_quoted_symbols(self, name):
        assert not is_bare_symbol(name)
        assert inspect_symbol(name).startswith(':"')

    def test_quoted_symbol_text(self):
        assert inspect_symbol("dc:creator") == ':"dc:creator"'


class TestInspectValue:
    """Test generic value rendering."""

    def test_scalars(self):
        assert inspect_value(None) == "nil"
        assert inspect_value(True) == "true"
        assert inspect_value(False) == "false"
        assert inspect_value(42) == "42"
        assert inspect_value(1.5) == "1.5"

    def test_floats_with_exponent(self):
        assert inspect_float(1e20) == "1.0e+20"
        assert inspect_float(1e-05) == "1.0e-05"
        assert inspect_float(float("inf")) == "Infinity"
        assert inspect_float(float("nan")) == "NaN"

    def test_collections(self):
        assert inspect_value(["a", 1]) == '["a", 1]'
        assert inspect_value({"a": [True]}) == '{"a" => [true]}'
        assert inspect_value({}) == "{}"
