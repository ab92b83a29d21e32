"""Unit tests for the identity number recognizer."""

import pytest

from idcn.recognizers.zh_id_card import ChineseIdCardRecognizer, validate_chinese_id_card


class TestChineseIdCardRecognizer:
    """Tests for Chinese ID card recognizer."""

    @pytest.fixture
    def recognizer(self):
        """Create recognizer instance."""
        return ChineseIdCardRecognizer()

    def test_supported_entity(self, recognizer):
        assert recognizer.supported_entities == ["ZH_ID_CARD"]
        assert "身份证号" in recognizer.context

    def test_valid_id_card(self, recognizer):
        assert recognizer.validate_result("110101199003077758") is True

    def test_fifteen_digit(self, recognizer):
        assert recognizer.validate_result("110101900307775") is True

    def test_invalid_checksum(self, recognizer):
        assert recognizer.validate_result("110101199003077750") is False

    def test_invalid_birthday(self, recognizer):
        """The regex admits Feb 30; the validator does not."""
        assert recognizer.validate_result("110101199002307758") is False

    def test_lowercase_x(self, recognizer):
        assert recognizer.validate_result("11010119900307109X") is True
        assert recognizer.validate_result("11010119900307109x") is True

    def test_analyze_finds_valid_number(self, recognizer):
        text = "张三的身份证号是110101199003077758，请核对。"
        results = recognizer.analyze(text, entities=["ZH_ID_CARD"])

        assert len(results) == 1
        assert text[results[0].start:results[0].end] == "110101199003077758"
        assert results[0].score == 1.0

    def test_analyze_drops_invalid_number(self, recognizer):
        results = recognizer.analyze("证件号110101199003077750", entities=["ZH_ID_CARD"])
        assert results == []


class TestValidateChineseIdCard:
    """Tests for standalone validation function."""

    def test_valid_id(self):
        assert validate_chinese_id_card("110101199003077758") is True

    def test_invalid_id(self):
        assert validate_chinese_id_card("110101199003077750") is False
        assert validate_chinese_id_card("12345") is False
