"""Input gate for cause numbers.

Only the letters used by supported prefixes (D-1-DC, D-1-GN) are allowed.
Digits and punctuation always pass; malformed digit runs are left to the
classifier's fallback.
"""

import re

ALLOWED_LETTERS = frozenset("DCGN")

INVALID_LETTERS_MESSAGE = "This cause/case number isn't ours (invalid letters)."


class InvalidCharacterSet(ValueError):
    """Raised when input carries letters outside the supported prefixes.

    Attributes:
        raw: The rejected input
        letters: Offending letters, in order of first appearance
    """

    def __init__(self, raw: str, letters: str) -> None:
        super().__init__(INVALID_LETTERS_MESSAGE)
        self.raw = raw
        self.letters = letters


def check_character_set(raw: str) -> None:
    """Reject input containing letters other than D, C, G, N.

    Args:
        raw: Raw input string

    Raises:
        InvalidCharacterSet: If any other A-Z letter is present
    """
    letters = re.sub(r"[^A-Z]", "", raw.upper())
    bad = "".join(dict.fromkeys(ch for ch in letters if ch not in ALLOWED_LETTERS))
    if bad:
        raise InvalidCharacterSet(raw, bad)


def collect_input(raw: str) -> str | None:
    """Trim and gate one line of user input.

    Args:
        raw: Input exactly as typed

    Returns:
        Trimmed input, or None if blank (caller should do nothing)

    Raises:
        InvalidCharacterSet: If the gate rejects the input
    """
    trimmed = raw.strip()
    if not trimmed:
        return None
    check_character_set(trimmed)
    return trimmed
