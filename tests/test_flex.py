"""Tests for the FlexInt and FlexBool tolerant scalars."""

import math

import pytest

from unifi_rest.exceptions import UnifiDataError, UnifiDecodeError
from unifi_rest.flex import TRUTHY_TOKENS, FlexBool, FlexInt, format_float, parse_float


class TestFlexIntNumbers:
    """Tests for FlexInt decoding JSON numbers."""

    def test_integer(self) -> None:
        """Test that an integer keeps its value and renders without a fraction."""
        flex = FlexInt.unmarshal_json(b"42")
        assert flex.val == 42.0
        assert flex.txt == "42"

    def test_fraction(self) -> None:
        """Test that a fraction renders in shortest form."""
        flex = FlexInt.unmarshal_json(b"3.5")
        assert flex.val == 3.5
        assert flex.txt == "3.5"

    def test_trailing_zeros_dropped(self) -> None:
        """Test that 2.50 renders as 2.5 and 7.0 as 7."""
        assert FlexInt.unmarshal_json(b"2.50").txt == "2.5"
        assert FlexInt.unmarshal_json(b"7.0").txt == "7"

    def test_large_number_has_no_exponent(self) -> None:
        """Test that large values render as plain decimals."""
        assert FlexInt.unmarshal_json(b"1e21").txt == "1000000000000000000000"

    def test_small_number_has_no_exponent(self) -> None:
        """Test that small values render as plain decimals."""
        assert FlexInt.unmarshal_json(b"0.0000001").txt == "0.0000001"

    def test_negative(self) -> None:
        """Test that negative numbers keep their sign."""
        flex = FlexInt.unmarshal_json(b"-12.25")
        assert flex.val == -12.25
        assert flex.txt == "-12.25"

    def test_negative_zero(self) -> None:
        """Test that -0 keeps its sign in the text."""
        flex = FlexInt.unmarshal_json(b"-0")
        assert flex.txt == "-0"
        assert math.copysign(1.0, flex.val) == -1.0

    def test_huge_integer_raises(self) -> None:
        """Test that an integer beyond the float range fails to decode."""
        with pytest.raises(UnifiDecodeError):
            FlexInt.unmarshal_json(b"1" + b"0" * 400)

    def test_str_accepted(self) -> None:
        """Test that raw JSON may be given as str."""
        assert FlexInt.unmarshal_json("10").val == 10.0


class TestFlexIntStrings:
    """Tests for FlexInt decoding JSON strings."""

    def test_numeric_string(self) -> None:
        """Test that a numeric string parses."""
        flex = FlexInt.unmarshal_json(b'"42"')
        assert flex.val == 42.0
        assert flex.txt == "42"

    def test_text_is_verbatim(self) -> None:
        """Test that string text is kept exactly as sent."""
        flex = FlexInt.unmarshal_json(b'"007.50"')
        assert flex.val == 7.5
        assert flex.txt == "007.50"

    def test_unparseable_string(self) -> None:
        """Test that an unparseable string yields zero without error."""
        flex = FlexInt.unmarshal_json(b'"abc"')
        assert flex.val == 0.0
        assert flex.txt == "abc"

    def test_empty_string(self) -> None:
        """Test that an empty string yields zero."""
        flex = FlexInt.unmarshal_json(b'""')
        assert flex.val == 0.0
        assert flex.txt == ""

    @pytest.mark.parametrize("text", [" 42", "42 ", "1_000"])
    def test_padding_and_separators_are_unparseable(self, text: str) -> None:
        """Test that padded or digit-separated strings yield zero."""
        assert parse_float(text) == 0.0


class TestFlexIntNullAndErrors:
    """Tests for FlexInt null handling and decode failures."""

    def test_null(self) -> None:
        """Test that null decodes to zero with text 0."""
        flex = FlexInt.unmarshal_json(b"null")
        assert flex.val == 0.0
        assert flex.txt == "0"

    @pytest.mark.parametrize("raw", [b"[1, 2]", b'{"a": 1}', b"true", b"false", b"[]"])
    def test_wrong_kind_raises(self, raw: bytes) -> None:
        """Test that arrays, objects and booleans fail with the raw bytes attached."""
        with pytest.raises(UnifiDecodeError) as exc_info:
            FlexInt.unmarshal_json(raw)
        assert exc_info.value.raw == raw
        assert "cannot unmarshal to FlexInt" in str(exc_info.value)

    @pytest.mark.parametrize("raw", [b"{", b"NaN", b"Infinity", b""])
    def test_invalid_json_raises(self, raw: bytes) -> None:
        """Test that malformed JSON fails to decode."""
        with pytest.raises(UnifiDecodeError):
            FlexInt.unmarshal_json(raw)

    def test_decode_error_is_data_error(self) -> None:
        """Test that UnifiDecodeError is a UnifiDataError."""
        with pytest.raises(UnifiDataError):
            FlexInt.unmarshal_json(b"[]")


class TestFlexIntFromValue:
    """Tests for FlexInt.from_value."""

    def test_int(self) -> None:
        """Test that a decoded int becomes a float."""
        flex = FlexInt.from_value(5)
        assert flex == FlexInt(5.0, "5")

    def test_bool_rejected(self) -> None:
        """Test that a decoded bool is not accepted as a number."""
        with pytest.raises(UnifiDecodeError) as exc_info:
            FlexInt.from_value(True)
        assert exc_info.value.raw == b"true"

    def test_list_rejected(self) -> None:
        """Test that a decoded list fails."""
        with pytest.raises(UnifiDecodeError):
            FlexInt.from_value([1])

    def test_none(self) -> None:
        """Test that None decodes like null."""
        assert FlexInt.from_value(None) == FlexInt(0.0, "0")


class TestFlexIntBehaviour:
    """Tests for FlexInt conversions."""

    def test_default(self) -> None:
        """Test that the default is zero with text 0."""
        assert FlexInt() == FlexInt(0.0, "0")

    def test_conversions(self) -> None:
        """Test str, int and float conversions."""
        flex = FlexInt.unmarshal_json(b'"12.9"')
        assert str(flex) == "12.9"
        assert int(flex) == 12
        assert float(flex) == 12.9

    def test_immutable(self) -> None:
        """Test that a decoded FlexInt cannot be changed."""
        flex = FlexInt.unmarshal_json(b"1")
        with pytest.raises(AttributeError):
            flex.val = 2.0

    def test_format_float(self) -> None:
        """Test shortest round-trip rendering."""
        assert format_float(0.1) == "0.1"
        assert format_float(100.0) == "100"
        assert format_float(1.5e-5) == "0.000015"


class TestFlexBool:
    """Tests for FlexBool."""

    @pytest.mark.parametrize(
        "raw", [b'"1"', b'"true"', b'"YES"', b'"Armed"', b'"active"', b'"Enabled"', b'"ready"', b'"UP"', b'"ok"']
    )
    def test_truthy(self, raw: bytes) -> None:
        """Test that truthy tokens decode to True."""
        assert FlexBool.unmarshal_json(raw).val is True

    @pytest.mark.parametrize(
        "raw", [b'"0"', b'"false"', b'"no"', b'"disarmed"', b'""', b'"inactive"', b'"disabled"', b'"maybe"']
    )
    def test_falsy(self, raw: bytes) -> None:
        """Test that everything else decodes to False."""
        assert FlexBool.unmarshal_json(raw).val is False

    @pytest.mark.parametrize("token", sorted(TRUTHY_TOKENS))
    def test_case_insensitive(self, token: str) -> None:
        """Test that every vocabulary token matches in any case."""
        for spelling in (token, token.upper(), token.title()):
            assert FlexBool.unmarshal_json(f'"{spelling}"').val is True

    def test_raw_literals(self) -> None:
        """Test unquoted JSON literals."""
        assert FlexBool.unmarshal_json(b"true") == FlexBool(True, "true")
        assert FlexBool.unmarshal_json(b"1") == FlexBool(True, "1")
        assert FlexBool.unmarshal_json(b"false") == FlexBool(False, "false")
        assert FlexBool.unmarshal_json(b"null") == FlexBool(False, "null")

    @pytest.mark.parametrize(
        "raw, text",
        [
            (b'"Armed"', "Armed"),
            (b'"Not Armed"', "Not Armed"),
            (b'" up "', " up "),
            (b'"ok', "ok"),
            (b'ok"', "ok"),
            (b'""yes""', '"yes"'),
        ],
    )
    def test_text_preserved(self, raw: bytes, text: str) -> None:
        """Test that one layer of quotes is stripped and the rest kept."""
        assert FlexBool.unmarshal_json(raw).txt == text

    def test_padded_token_is_false(self) -> None:
        """Test that surrounding spaces are not trimmed before matching."""
        assert FlexBool.unmarshal_json(b'" up "').val is False

    def test_malformed_never_raises(self) -> None:
        """Test that malformed JSON is accepted as text."""
        flex = FlexBool.unmarshal_json(b"{not json")
        assert flex.val is False
        assert flex.txt == "{not json"

    def test_from_value(self) -> None:
        """Test decoding values already produced by json.loads."""
        assert FlexBool.from_value(True) == FlexBool(True, "true")
        assert FlexBool.from_value(1) == FlexBool(True, "1")
        assert FlexBool.from_value(0) == FlexBool(False, "0")
        assert FlexBool.from_value(None) == FlexBool(False, "null")
        assert FlexBool.from_value("Enabled") == FlexBool(True, "Enabled")

    def test_conversions(self) -> None:
        """Test str and bool conversions."""
        flex = FlexBool.unmarshal_json(b'"Ready"')
        assert str(flex) == "Ready"
        assert bool(flex) is True
        assert bool(FlexBool()) is False
