"""
Tests for the keypad ExpressionBuffer.
"""

import pytest

from backend.keycalc import Calculator, CalculatorConfig, ExpressionBuffer, Outcome


def type_keys(buffer, keys):
    """Feed digits and operators into a buffer."""
    for key in keys:
        if key.isdigit():
            buffer.append_digit(key)
        elif key == ".":
            buffer.append_decimal()
        else:
            buffer.append_operator(key)


class TestExpressionBuffer:
    """Tests for ExpressionBuffer."""

    def test_initial_state(self):
        """Test a fresh buffer."""
        buffer = ExpressionBuffer()
        assert buffer.expression == ""
        assert buffer.result == "0"
        assert buffer.is_preview is False

    def test_digits_preview(self):
        """Test typing digits previews the number."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "12")
        assert buffer.expression == "12"
        assert buffer.result == "12"
        assert buffer.is_preview is True

    def test_operator_replaces_trailing_operator(self):
        """Test consecutive operators replace each other."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "12+")
        buffer.append_operator("×")
        assert buffer.expression == "12×"

    def test_live_preview(self):
        """Test the result line follows the expression."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "12×3")
        assert buffer.result == "36"
        type_keys(buffer, "+4")
        assert buffer.result == "40"

    def test_leading_zero_replaced(self):
        """Test a lone zero is replaced by the next digit."""
        buffer = ExpressionBuffer()
        buffer.expression = "0"
        buffer.append_digit("7")
        assert buffer.expression == "7"

    def test_unknown_operator(self):
        """Test unknown operator symbols are rejected."""
        with pytest.raises(ValueError):
            ExpressionBuffer().append_operator("^")

    def test_decimal_once_per_number(self):
        """Test only one decimal point per number."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "1..5")
        assert buffer.expression == "1.5"
        type_keys(buffer, "+.5")
        assert buffer.expression == "1.5+.5"
        assert buffer.result == "2"

    def test_clear_entry(self):
        """Test clear entry removes the last token."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "12+34")
        buffer.clear_entry()
        assert buffer.expression == "12+"
        assert buffer.result == "12"

    def test_clear_entry_empty(self):
        """Test clear entry on an empty expression."""
        buffer = ExpressionBuffer()
        buffer.clear_entry()
        assert buffer.expression == ""
        assert buffer.result == "0"

    def test_backspace(self):
        """Test backspace removes one character."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "12+3")
        buffer.backspace()
        assert buffer.expression == "12+"
        buffer.backspace()
        buffer.backspace()
        assert buffer.expression == "1"
        assert buffer.result == "1"
        buffer.backspace()
        assert buffer.expression == ""
        assert buffer.result == "0"

    def test_all_clear(self):
        """Test all clear resets both lines."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "9×9")
        buffer.all_clear()
        assert buffer.expression == ""
        assert buffer.result == "0"
        assert buffer.is_preview is False

    def test_finalize_chains(self):
        """Test a final result becomes the next expression."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "5+5")
        result = buffer.finalize()
        assert result.value == 10
        assert buffer.expression == "10"
        assert buffer.result == "10"
        assert buffer.is_preview is False
        type_keys(buffer, "÷4")
        assert buffer.finalize().value == 2.5
        assert buffer.expression == "2.5"

    def test_finalize_negative_result_chains(self):
        """Test a negative result can be used in the next calculation."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "2-5")
        buffer.finalize()
        type_keys(buffer, "-1")
        assert buffer.finalize().value == -4

    def test_finalize_small_result_chains(self):
        """Test a result shown in exponent form can be used in the next calculation."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "1÷10000000")
        result = buffer.finalize()
        assert result.value == 1e-07
        assert buffer.result == "1e-07"
        assert buffer.expression == "0.0000001"
        type_keys(buffer, "+1")
        assert buffer.finalize().value == 1.0000001

    def test_finalize_empty(self):
        """Test finalizing an empty expression."""
        buffer = ExpressionBuffer()
        result = buffer.finalize()
        assert result.outcome == Outcome.EMPTY
        assert buffer.result == ""
        assert buffer.expression == ""

    def test_finalize_invalid(self):
        """Test an invalid expression keeps the input."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "2+")
        result = buffer.finalize()
        assert result.outcome == Outcome.INVALID_EXPRESSION
        assert buffer.result == "Error"
        assert buffer.expression == "2+"

    def test_division_by_zero_then_digit(self):
        """Test typing after a division error starts over."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "8÷0")
        buffer.finalize()
        assert buffer.result == "Error: Div by 0"
        buffer.append_digit("5")
        assert buffer.expression == "5"
        assert buffer.result == "5"

    def test_division_by_zero_then_operator(self):
        """Test an operator after a division error clears first."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "8÷0")
        buffer.finalize()
        buffer.append_operator("-")
        type_keys(buffer, "4")
        assert buffer.expression == "-4"
        assert buffer.result == "-4"

    def test_preview_ignores_errors(self):
        """Test a failing preview keeps the previous result."""
        buffer = ExpressionBuffer()
        type_keys(buffer, "8÷")
        assert buffer.result == "8"
        buffer.append_digit("0")
        assert buffer.result == "8"

    def test_custom_calculator(self):
        """Test the buffer uses the given calculator."""
        config = CalculatorConfig(precision=2)
        buffer = ExpressionBuffer(Calculator(config))
        type_keys(buffer, "10÷3")
        assert buffer.result == "3.33"
