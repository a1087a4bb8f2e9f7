"""Unit tests for pocketutils.text.template.format_string."""

from collections import OrderedDict

from pocketutils.text.template import format_string


def test_positional_placeholders():
    assert format_string("{0}-{1}", ["a", "b"]) == "a-b"


def test_keyed_placeholders():
    assert format_string("{k}", {"k": "v"}) == "v"


def test_every_occurrence_is_replaced():
    assert format_string("{0}{0}{1}{0}", ("x", "y")) == "xxyx"
    assert format_string("{name} and {name}", {"name": "Ann"}) == "Ann and Ann"


def test_missing_placeholders_are_kept():
    assert format_string("{0} {1} {2}", ["only"]) == "only {1} {2}"
    assert format_string("{a} {b}", {"a": 1}) == "1 {b}"


def test_values_are_converted_to_str():
    assert format_string("{0}/{1}", [1, None]) == "1/None"


def test_any_mapping_is_keyed():
    assert format_string("{x}{y}", OrderedDict(x="1", y="2")) == "12"


def test_braces_are_not_format_fields():
    """Format specs and escaped braces are left untouched."""
    assert format_string("{0:>5} {{0}}", ["v"]) == "{0:>5} {v}"
