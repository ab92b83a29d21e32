"""Presidio recognizers for identity numbers."""

from idcn.recognizers.zh_id_card import ChineseIdCardRecognizer, validate_chinese_id_card

__all__ = ["ChineseIdCardRecognizer", "validate_chinese_id_card"]
