"""Text helpers for keeping identity numbers out of logs."""

import re


def mask_id_card(id_card: str) -> str:
    """Mask an identity number, keeping the first 6 and last 4 characters.

    Args:
        id_card: Identity number (any length).

    Returns:
        Masked string; inputs shorter than 10 characters are fully masked.

    Examples:
        >>> mask_id_card("110101199003077758")
        '110101********7758'
        >>> mask_id_card("12345")
        '*****'
    """
    if len(id_card) >= 10:
        return f"{id_card[:6]}{'*' * (len(id_card) - 10)}{id_card[-4:]}"
    return "*" * len(id_card)


def sanitize_for_logging(text: str, max_length: int = 100) -> str:
    """Mask any embedded identity numbers, then truncate.

    A number cut by the truncation is still masked.

    Examples:
        >>> sanitize_for_logging("证件号 110101199003077758")
        '证件号 110101********7758'
    """
    if not text:
        return ""

    text = re.sub(
        r"(?<!\d)\d{17}[\dXx](?!\d)|(?<!\d)\d{15}(?![\dXx])",
        lambda m: mask_id_card(m.group(0)),
        text,
    )

    if len(text) > max_length:
        text = text[: max(0, max_length - 3)] + "..."

    return text

