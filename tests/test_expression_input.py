"""
Tests for expression_input
"""

import pytest

from expression_input import ERROR_TOKEN, ExpressionInput, key_to_action


def _press(*actions):
    entry = ExpressionInput()
    for action in actions:
        entry.dispatch(action)
    return entry


class TestOperators:

    def test_only_minus_starts_expression(self):
        assert _press("operator:+").text == ""
        assert _press("operator:*").text == ""
        assert _press("operator:-").text == "-"

    def test_lone_minus_ignores_operators(self):
        assert _press("operator:-", "operator:+").text == "-"
        assert _press("operator:-", "operator:-").text == "-"

    def test_operator_replaces_previous(self):
        entry = _press("insert:7", "operator:+", "operator:*")
        assert entry.text == "7*"

    def test_operator_appends(self):
        assert _press("insert:7", "operator:%").text == "7%"

    def test_operator_after_error_starts_fresh(self):
        entry = _press("insert:.", "equals")
        assert entry.text == ERROR_TOKEN
        entry.dispatch("operator:-")
        assert entry.text == "-"

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            ExpressionInput().push_operator("^")


class TestEditing:

    def test_digits_and_double_zero(self):
        assert _press("insert:1", "insert:00", "insert:.", "insert:5").text == "100.5"

    def test_backspace(self):
        assert _press("insert:1", "insert:2", "backspace").text == "1"

    def test_backspace_on_empty(self):
        assert _press("backspace").text == ""

    def test_backspace_keeps_error(self):
        entry = _press("insert:3", "operator:+", "equals")
        assert entry.text == ERROR_TOKEN
        entry.dispatch("backspace")
        assert entry.text == ERROR_TOKEN

    def test_clear(self):
        assert _press("insert:9", "operator:*", "clear").text == ""

    def test_digit_clears_error(self):
        entry = _press("insert:1", "insert:.", "insert:.", "insert:2", "equals")
        assert entry.text == ERROR_TOKEN
        entry.dispatch("insert:4")
        assert entry.text == "4"

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            ExpressionInput().dispatch("sqrt")


class TestCalculate:

    def test_equals_shows_result(self):
        entry = _press("insert:2", "operator:*", "insert:7", "equals")
        assert entry.text == "14"

    def test_result_can_be_extended(self):
        entry = _press("insert:1", "insert:0", "operator:/", "insert:4", "equals")
        assert entry.text == "2.5"
        entry.dispatch("operator:*")
        entry.dispatch("insert:2")
        entry.dispatch("equals")
        assert entry.text == "5"

    def test_negative_result(self):
        entry = _press("operator:-", "insert:7", "operator:*", "insert:2", "equals")
        assert entry.text == "-14"

    def test_division_by_zero_shows_infinity(self):
        assert _press("insert:5", "operator:/", "insert:0", "equals").text == "Infinity"

    def test_empty_equals_does_nothing(self):
        assert _press("equals").text == ""

    def test_any_parse_error_becomes_error_token(self):
        assert _press("insert:5", "operator:%", "equals").text == ERROR_TOKEN

    def test_uses_given_engine(self):
        class _FakeEngine:
            def __init__(self):
                self.seen = []

            def evaluate(self, expression):
                self.seen.append(expression)
                return "42"

        engine = _FakeEngine()
        entry = ExpressionInput(engine)
        entry.dispatch("insert:1")
        entry.dispatch("equals")
        assert engine.seen == ["1"]
        assert entry.text == "42"


class TestKeyToAction:

    @pytest.mark.parametrize(
        "keysym, char, expected",
        [
            ("BackSpace", "\x08", "backspace"),
            ("Delete", "\x7f", "clear"),
            ("Escape", "\x1b", "clear"),
            ("Return", "\r", "equals"),
            ("KP_Enter", "\r", "equals"),
            ("equal", "=", "equals"),
            ("period", ".", "insert:."),
            ("comma", ",", "insert:."),
            ("7", "7", "insert:7"),
            ("KP_7", "7", "insert:7"),
            ("plus", "+", "operator:+"),
            ("minus", "-", "operator:-"),
            ("asterisk", "*", "operator:*"),
            ("slash", "/", "operator:/"),
            ("percent", "%", "operator:%"),
            ("c", "c", "clear"),
            ("C", "C", "clear"),
        ],
    )
    def test_mapped_keys(self, keysym, char, expected):
        assert key_to_action(keysym, char) == expected

    @pytest.mark.parametrize("keysym, char", [("Shift_L", ""), ("a", "a"), ("x", "x")])
    def test_ignored_keys(self, keysym, char):
        assert key_to_action(keysym, char) is None
