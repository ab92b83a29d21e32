"""
Chinese ID Card (Resident Identity Card) Recognizer

Recognizes 18- and 15-digit Chinese national ID numbers in free text.
Matches are confirmed with the full validator: birth date plausibility and,
for the 18-digit form, the ISO 7064:1983 MOD 11-2 check character.
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from idcn.core.validator import is_valid


class ChineseIdCardRecognizer(PatternRecognizer):
    """Recognizer for Chinese Resident Identity Card numbers.

    Example:
        >>> recognizer = ChineseIdCardRecognizer()
        >>> results = recognizer.analyze("身份证号110101199003077758", ["ZH_ID_CARD"])
    """

    PATTERNS = [
        Pattern(
            name="zh_id_card_18",
            regex=r"(?<![0-9])[1-9]\d{5}(?:18|19|20)\d{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}[\dXx](?![0-9Xx])",
            score=0.7,
        ),
        Pattern(
            name="zh_id_card_15",
            regex=r"(?<![0-9])[1-9]\d{7}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}(?![0-9Xx])",
            score=0.4,
        ),
    ]

    CONTEXT = [
        "身份证",
        "身份证号",
        "身份证号码",
        "证件号",
        "证件号码",
        "ID",
        "id",
        "identity",
        "身份",
        "证号",
        "居民身份证",
        "公民身份号码",
    ]

    def __init__(
        self,
        supported_language: str = "zh",
        context: Optional[list[str]] = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            supported_language: Language code (default: zh).
            context: Additional context words.
        """
        context_words = list(self.CONTEXT) + (context or [])

        super().__init__(
            supported_entity="ZH_ID_CARD",
            patterns=self.PATTERNS,
            context=context_words,
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Validate a matched number.

        Returns:
            True if valid, False otherwise.
        """
        return is_valid(pattern_text)


def validate_chinese_id_card(id_number: str) -> bool:
    """Standalone validation function for Chinese ID card numbers.

    Example:
        >>> validate_chinese_id_card("110101199003077758")
        True
    """
    recognizer = ChineseIdCardRecognizer()
    result = recognizer.validate_result(id_number)
    return result is True
