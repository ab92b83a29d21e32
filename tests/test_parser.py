"""Tests for identity number parsing."""

import pytest

from idcn.core.errors import ErrorKind, InvalidFormatError, InvalidLengthError
from idcn.core.parser import parse_id_card


class TestParse18:
    """Tests for the 18-digit form."""

    def test_fields(self):
        record = parse_id_card("110101199003077758")

        assert record.region_code == "110101"
        assert record.birth_code == "19900307"
        assert record.order_code == "775"
        assert record.check_char == "8"
        assert record.source_length == 18
        assert record.body == "11010119900307775"

    def test_uppercase_x_normalized(self):
        assert parse_id_card("11010119900307109X").check_char == "x"
        assert parse_id_card("11010119900307109x").check_char == "x"

    @pytest.mark.parametrize(
        "raw",
        [
            "a10101199003077758",
            "11010119900307775A",
            "1101011990030777 8",
            "11010119900307775Y",
            "１10101199003077758",  # full-width digit
        ],
    )
    def test_invalid_format(self, raw):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_id_card(raw)
        assert exc_info.value.kind is ErrorKind.INVALID_FORMAT


class TestParse15:
    """Tests for the 15-digit form."""

    def test_fields_and_century(self):
        record = parse_id_card("110101900307775")

        assert record.region_code == "110101"
        assert record.birth_code == "19900307"
        assert record.order_code == "775"
        assert record.check_char is None
        assert record.source_length == 15

    def test_x_not_allowed(self):
        with pytest.raises(InvalidFormatError):
            parse_id_card("11010190030777X")


class TestLength:
    """Tests for length rejection."""

    @pytest.mark.parametrize("raw", ["", "12345", "1101019003077751", "1101011990030777581"])
    def test_invalid_length(self, raw):
        with pytest.raises(InvalidLengthError) as exc_info:
            parse_id_card(raw)
        assert exc_info.value.kind is ErrorKind.INVALID_LENGTH
