"""
Small, focused text cleaning utilities.
"""

import re


_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace into single ASCII spaces.

    Example:
        >>> normalize_whitespace("a\\u00a0b\\u200bb")
        'a bb'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = re.sub(r"\s+", " ", clean)
    return clean.strip()


def split_words(value: str) -> list[str]:
    """Return the whitespace-separated words of ``value``.

    Example:
        >>> split_words("  INT. HOUSE\\t- DAY ")
        ['INT.', 'HOUSE', '-', 'DAY']
    """

    clean = normalize_whitespace(value)
    if not clean:
        return []
    return clean.split(" ")
