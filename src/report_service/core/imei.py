"""
IMEI helpers.

Validation runs server-side on every path that accepts an IMEI; the browser
form's own check is a convenience only. Full IMEIs never go to the logs.
"""

from typing import Any

IMEI_LENGTH = 15


def is_valid_imei(value: Any) -> bool:
    """
    Check if a value is a valid 15-digit IMEI using the Luhn check digit.

    The algorithm:
    - exactly 15 ASCII digits
    - double every digit at an odd (0-indexed) position, minus 9 if above 9
    - the sum of all digits must be divisible by 10

    Never raises; anything else simply yields False.
    """
    if not isinstance(value, str) or len(value) != IMEI_LENGTH:
        return False
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    if not (value.isascii() and value.isdigit()):
        return False

    total = 0
    for i, ch in enumerate(value):
        digit = int(ch)
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def mask_imei(imei: str) -> str:
    """Keep the first 8 digits (the type allocation code) and hide the rest."""
    return imei[:8] + "*" * max(0, len(imei) - 8)
