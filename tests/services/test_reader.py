"""Tests for TypedReader — the type-checking and range-checking loops."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from repval.domain.element import ElementBinding
from repval.domain.errors import InputExhausted, RangeViolation, TypeMismatch
from repval.domain.kinds import ValueKind
from repval.domain.states import ReadState
from repval.output.console import get_output
from repval.services.reader import TypedReader, validated_read

MakeReader = Callable[..., TypedReader]

TYPE_MSG = "Invalid data type"
RANGE_MSG = "Invalid range"


class TestReadTyped:
    def test_valid_first_token(self, make_reader: MakeReader) -> None:
        reader = make_reader("7\n")
        assert reader.read_typed(ValueKind.INTEGER) == 7
        assert get_output(reader.console) == ""
        assert reader.state is ReadState.ACCEPTED

    def test_scenario_pizza_then_seven(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza\n7\n")
        assert reader.read_typed(ValueKind.INTEGER) == 7
        output = get_output(reader.console)
        assert output.count(TYPE_MSG) == 1
        assert "should be a whole number" in output

    def test_invalid_tokens_never_reoffered(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza\n3.5\nx\n12\n")
        assert reader.read_typed(ValueKind.INTEGER) == 12
        tokens = [f.token for f in reader.last_faults if isinstance(f, TypeMismatch)]
        assert tokens == ["pizza", "3.5", "x"]

    def test_rest_of_bad_line_is_discarded(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza 7\n9\n")
        assert reader.read_typed(ValueKind.INTEGER) == 9

    def test_float_message(self, make_reader: MakeReader) -> None:
        reader = make_reader("abc\n2.5\n")
        assert reader.read_typed(ValueKind.FLOAT) == 2.5
        assert "should be a fractional number, try again:" in get_output(reader.console)

    def test_custom_expected_text(self, make_reader: MakeReader) -> None:
        reader = make_reader("x\n1\n")
        reader.read_typed(ValueKind.INTEGER, expected="a menu choice")
        assert "should be a menu choice" in get_output(reader.console)

    def test_long_line_discard_is_bounded(self, make_reader: MakeReader) -> None:
        # Only the first 10 characters of the bad line are discarded.
        reader = make_reader("bad xxxxx 4\n", discard_limit=10)
        assert reader.read_typed(ValueKind.INTEGER) == 4
        assert len(reader.last_faults) == 1

    def test_input_exhausted_propagates(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza\n")
        with pytest.raises(InputExhausted):
            reader.read_typed(ValueKind.INTEGER)
        assert reader.state is ReadState.AWAITING_INPUT

    def test_oversized_digit_run_is_a_type_fault(self, make_reader: MakeReader) -> None:
        reader = make_reader("9" * 5000 + "\n7\n", discard_limit=6000)
        assert reader.read_typed(ValueKind.INTEGER) == 7
        assert get_output(reader.console).count(TYPE_MSG) == 1

    def test_oversized_digit_run_with_default_discard(self, make_reader: MakeReader) -> None:
        reader = make_reader("9" * 5000 + "\n7\n")
        assert reader.read_typed(ValueKind.INTEGER) == 7
        assert all(isinstance(f, TypeMismatch) for f in reader.last_faults)

    @pytest.mark.parametrize(
        "kind,text,value",
        [
            (ValueKind.INTEGER, "\u0663\n7\n", 7),
            (ValueKind.FLOAT, "\u0661\u0660.5\n2.5\n", 2.5),
        ],
    )
    def test_non_ascii_digits_rejected(
        self, make_reader: MakeReader, kind: ValueKind, text: str, value: float
    ) -> None:
        reader = make_reader(text)
        assert reader.read_typed(kind) == value
        assert get_output(reader.console).count(TYPE_MSG) == 1

    def test_stream_is_clear_after_recovery(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza\n7\n")
        reader.read_typed(ValueKind.INTEGER)
        assert reader.stream.good


class TestReadInRange:
    def test_scenario_out_of_range_then_valid(self, make_reader: MakeReader) -> None:
        reader = make_reader("11\n7\n")
        assert reader.read_in_range(ValueKind.INTEGER, 6, 10) == 7
        output = get_output(reader.console)
        assert output.count(RANGE_MSG) == 1
        assert "should be between 6 and 10, try again:" in output

    def test_scenario_float_boundary(self, make_reader: MakeReader) -> None:
        reader = make_reader("3.5\nabc\n5.5\n6.0\n")
        assert reader.read_in_range(ValueKind.FLOAT, 5.5, 42.8) == 5.5
        output = get_output(reader.console)
        assert output.count(TYPE_MSG) == 1
        assert output.count(RANGE_MSG) == 1
        assert "between 5.5 and 42.8" in output
        assert reader.stream.pending.strip() == ""
        assert reader.read_typed(ValueKind.FLOAT) == 6.0

    @pytest.mark.parametrize("token,value", [("6", 6), ("10", 10)])
    def test_bounds_are_inclusive(self, make_reader: MakeReader, token: str, value: int) -> None:
        reader = make_reader(f"{token}\n")
        assert reader.read_in_range(ValueKind.INTEGER, 6, 10) == value
        assert reader.last_faults == []

    def test_range_message_count_matches_out_of_range_tokens(
        self, make_reader: MakeReader
    ) -> None:
        reader = make_reader("1\n2\n99\n-5\n8\n")
        assert reader.read_in_range(ValueKind.INTEGER, 6, 10) == 8
        assert get_output(reader.console).count(RANGE_MSG) == 4
        values = [f.value for f in reader.last_faults if isinstance(f, RangeViolation)]
        assert values == [1, 2, 99, -5]

    def test_type_failure_after_range_failure(self, make_reader: MakeReader) -> None:
        reader = make_reader("11\npizza\n7\n")
        assert reader.read_in_range(ValueKind.INTEGER, 6, 10) == 7
        kinds = [type(f) for f in reader.last_faults]
        assert kinds == [RangeViolation, TypeMismatch]

    def test_invalid_bounds(self, make_reader: MakeReader) -> None:
        reader = make_reader("7\n")
        with pytest.raises(ValueError, match="greater than high"):
            reader.read_in_range(ValueKind.INTEGER, 10, 6)
        assert reader.stream.pending == ""

    def test_character_range(self, make_reader: MakeReader) -> None:
        reader = make_reader("A\nab\nq\n")
        assert reader.read_in_range(ValueKind.CHARACTER, "a", "z") == "q"
        output = get_output(reader.console)
        assert output.count(TYPE_MSG) == 1
        assert output.count(RANGE_MSG) == 1

    def test_string_range(self, make_reader: MakeReader) -> None:
        reader = make_reader("Zeta\nBeta\n")
        assert reader.read_in_range(ValueKind.STRING, "Alpha", "Omega") == "Beta"

    def test_boolean_range_message_uses_words(self, make_reader: MakeReader) -> None:
        reader = make_reader("false\ntrue\n")
        assert reader.read_in_range(ValueKind.BOOLEAN, True, True) is True
        assert "between true and true" in get_output(reader.console)


class TestElement:
    def test_boolean_element_accepts_word(self, make_reader: MakeReader) -> None:
        reader = make_reader("true\n")
        binding = ElementBinding(kind="boolean")
        assert reader.read_element(binding) is True
        assert reader.last_faults == []

    def test_element_message_names_binding(self, make_reader: MakeReader) -> None:
        reader = make_reader("maybe\n0\n")
        binding = ElementBinding(kind="boolean")
        assert reader.read_element(binding) is False
        assert "should be an element (boolean), try again:" in get_output(reader.console)

    def test_element_in_range_uses_binding_bounds(self, make_reader: MakeReader) -> None:
        reader = make_reader("16\n53\n17\n")
        assert reader.read_element_in_range(ElementBinding()) == 17
        assert "between 17 and 52" in get_output(reader.console)


class TestFreshCycle:
    def test_second_read_starts_clean(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza\n7\n8\n")
        assert reader.read_typed(ValueKind.INTEGER) == 7
        assert len(reader.last_faults) == 1
        assert reader.read_typed(ValueKind.INTEGER) == 8
        assert reader.last_faults == []
        assert reader.state is ReadState.ACCEPTED


class TestValidatedRead:
    def test_success_counts_faults(self, make_reader: MakeReader) -> None:
        reader = make_reader("x\n11\n7\n")
        result = validated_read(reader, ValueKind.INTEGER, low=6, high=10)
        assert result.ok
        assert result.data == {
            "kind": "integer",
            "value": 7,
            "low": 6,
            "high": 10,
            "type_faults": 1,
            "range_faults": 1,
        }

    def test_type_only(self, make_reader: MakeReader) -> None:
        reader = make_reader("2.5\n")
        result = validated_read(reader, ValueKind.DOUBLE)
        assert result.ok
        assert "low" not in result.data

    def test_exhausted_is_error_result(self, make_reader: MakeReader) -> None:
        reader = make_reader("pizza\n")
        result = validated_read(reader, ValueKind.INTEGER)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INPUT_EXHAUSTED"
        assert result.error.detail["faults"] == 1
