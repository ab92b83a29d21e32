"""
Check character for 18-digit identity numbers.

ISO 7064:1983 MOD 11-2 over the 17-digit body.
"""

# Weights for checksum calculation, positions 0..16
WEIGHTS = [7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2]

# Indexed by (weighted sum mod 11); "x" is kept lowercase
CHECK_CODES = ["1", "0", "x", "9", "8", "7", "6", "5", "4", "3", "2"]


def calculate_check_code(body: str) -> str:
    """Compute the check character of a 17-digit body.

    Args:
        body: First 17 characters of an identity number, digits only.

    Returns:
        Check character, a digit or lowercase "x".

    Raises:
        ValueError: If body is not exactly 17 decimal digits.

    Example:
        >>> calculate_check_code("11010119900307771")
        '5'
    """
    if len(body) != 17 or not all("0" <= c <= "9" for c in body):
        raise ValueError(f"Checksum body must be 17 digits, got {len(body)} characters")

    total = sum(int(body[i]) * WEIGHTS[i] for i in range(17))
    return CHECK_CODES[total % 11]


def normalize_check_code(char: str) -> str:
    """Normalize a check character for comparison ("X" -> "x")."""
    return "x" if char in ("X", "x") else char
