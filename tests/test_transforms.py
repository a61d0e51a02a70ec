"""Tests for the field coercers in dtokit.data.transforms."""

from datetime import datetime, timedelta, timezone

import pytest

from dtokit import (
    UNDEFINED,
    MalformedInputError,
    copy_from,
    empty_string_to_null,
    empty_string_to_undefined,
    json_string_to_object,
    null_to_undefined,
    string_to_array,
    string_to_boolean,
    string_to_date,
    string_to_integer,
    string_to_null,
    string_to_number,
    undefined_to_null,
)


class TestStringToBoolean:
    """Test boolean coercion."""

    @pytest.mark.parametrize("raw", ["true", "TRUE", " True ", "tRuE"])
    def test_true_values(self, raw):
        assert string_to_boolean(raw, "flag", {}) is True

    @pytest.mark.parametrize("raw", ["false", "FALSE", " False\n"])
    def test_false_values(self, raw):
        assert string_to_boolean(raw, "flag", {}) is False

    def test_invalid_value(self):
        with pytest.raises(MalformedInputError) as exc_info:
            string_to_boolean("yes", "DEBUG", {})

        assert exc_info.value.field == "DEBUG"
        assert "Value of DEBUG must be 'true' or 'false' but got yes" in str(exc_info.value)

    def test_non_string_passes_through(self):
        assert string_to_boolean(True, "flag", {}) is True
        assert string_to_boolean(None, "flag", {}) is None
        assert string_to_boolean(UNDEFINED, "flag", {}) is UNDEFINED


class TestStringToNumbers:
    """Test integer and number coercion."""

    def test_integer(self):
        assert string_to_integer("42", "port", {}) == 42
        assert string_to_integer(" -7 ", "offset", {}) == -7

    @pytest.mark.parametrize("raw", ["abc", "4.5", "", "12abc", "1_000"])
    def test_integer_invalid(self, raw):
        with pytest.raises(MalformedInputError, match="must be an integer"):
            string_to_integer(raw, "port", {})

    def test_integer_non_string(self):
        assert string_to_integer(8, "port", {}) == 8

    def test_number(self):
        assert string_to_number("42", "n", {}) == 42
        assert isinstance(string_to_number("42", "n", {}), int)
        assert string_to_number("4.5", "n", {}) == 4.5
        assert string_to_number("1e3", "n", {}) == 1000.0

    @pytest.mark.parametrize("raw", ["abc", "nan", "", "  "])
    def test_number_invalid(self, raw):
        with pytest.raises(MalformedInputError, match="Value of ratio must be a number"):
            string_to_number(raw, "ratio", {})

    def test_number_non_string(self):
        assert string_to_number(1.5, "ratio", {}) == 1.5


class TestStringToDate:
    """Test date coercion."""

    def test_date_only(self):
        assert string_to_date("2024-03-01", "start", {}) == datetime(2024, 3, 1)

    def test_utc_suffix(self):
        result = string_to_date("2024-03-01T10:20:30Z", "start", {})

        assert result == datetime(2024, 3, 1, 10, 20, 30, tzinfo=timezone.utc)

    def test_offset(self):
        result = string_to_date("2024-03-01T10:20:30+02:00", "start", {})

        assert result.utcoffset() == timedelta(hours=2)

    def test_invalid(self):
        with pytest.raises(MalformedInputError, match="must be a valid date string"):
            string_to_date("not a date", "start", {})

    def test_non_string(self):
        moment = datetime(2024, 1, 1)

        assert string_to_date(moment, "start", {}) is moment


class TestStringToArray:
    """Test delimited string splitting."""

    def test_default_comma_split(self):
        transform = string_to_array()

        assert transform("a, b ,c", "hosts", {}) == ["a", "b", "c"]

    def test_custom_delimiter(self):
        transform = string_to_array(delimiter=";")

        assert transform("a;b", "hosts", {}) == ["a", "b"]

    def test_number_elements(self):
        transform = string_to_array(element_type="number")

        assert transform("1, 2.5, 3", "ports", {}) == [1, 2.5, 3]

    def test_number_element_error_names_index(self):
        transform = string_to_array(element_type="number")

        with pytest.raises(MalformedInputError) as exc_info:
            transform("1,x,3", "ports", {})

        assert "Value of ports[1] must be a number but got 'x'" in str(exc_info.value)

    def test_unknown_element_type(self):
        with pytest.raises(ValueError, match="Unknown element_type"):
            string_to_array(element_type="date")

    def test_non_string(self):
        transform = string_to_array()

        assert transform(["a"], "hosts", {}) == ["a"]


class TestSentinelTransforms:
    """Test null, undefined and empty-string conversions."""

    def test_string_to_null(self):
        assert string_to_null("null", "k", {}) is None
        assert string_to_null("NULL", "k", {}) == "NULL"
        assert string_to_null("value", "k", {}) == "value"

    def test_null_to_undefined(self):
        assert null_to_undefined(None, "k", {}) is UNDEFINED
        assert null_to_undefined(0, "k", {}) == 0

    def test_undefined_to_null(self):
        assert undefined_to_null(UNDEFINED, "k", {}) is None
        assert undefined_to_null("", "k", {}) == ""

    def test_empty_string_to_null(self):
        assert empty_string_to_null("", "k", {}) is None
        assert empty_string_to_null(" ", "k", {}) == " "

    def test_empty_string_to_undefined(self):
        assert empty_string_to_undefined("", "k", {}) is UNDEFINED
        assert empty_string_to_undefined(None, "k", {}) is None

    def test_undefined_is_falsy_singleton(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"
        assert type(UNDEFINED)() is UNDEFINED


class TestJsonStringToObject:
    """Test JSON parsing."""

    def test_object(self):
        assert json_string_to_object('{"a": [1, 2]}', "extra", {}) == {"a": [1, 2]}

    def test_malformed(self):
        with pytest.raises(MalformedInputError, match="must be valid JSON"):
            json_string_to_object("{bad", "extra", {})

    def test_non_string(self):
        value = {"a": 1}

        assert json_string_to_object(value, "extra", {}) is value


class TestCopyFrom:
    """Test copying values across fields."""

    def test_overwrites_by_default(self):
        transform = copy_from("source")

        assert transform("current", "target", {"source": "copied"}) == "copied"

    def test_undefined_source_keeps_value(self):
        transform = copy_from("source")

        assert transform("current", "target", {}) == "current"

    def test_copy_undefined(self):
        transform = copy_from("source", copy_undefined=True)

        assert transform("current", "target", {}) is UNDEFINED

    def test_none_source_is_copied(self):
        transform = copy_from("source")

        assert transform("current", "target", {"source": None}) is None

    def test_no_overwrite_keeps_defined_value(self):
        transform = copy_from("source", overwrite=False)

        assert transform("current", "target", {"source": "copied"}) == "current"

    def test_no_overwrite_fills_undefined(self):
        transform = copy_from("source", overwrite=False)

        assert transform(UNDEFINED, "target", {"source": "copied"}) == "copied"
