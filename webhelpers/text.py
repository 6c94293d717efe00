"""String helpers for normalizing, formatting and checking user-facing text.

Every function here is pure: it reads only its arguments and the module
constants below, and returns a new value.
"""

import re
import unicodedata

from .core.validation import is_valid_email, is_valid_url


DEFAULT_TRUNCATE_SUFFIX = "..."
SLUG_SEPARATOR = "-"

SPECIAL_CHARS_PATTERN = re.compile(r'[^a-zA-Z0-9\-,\s]', re.ASCII)
SLUG_WHITESPACE_PATTERN = re.compile(r'\s+', re.ASCII)
WHITESPACE_PATTERN = re.compile(r'\s+')
MULTIPLE_DASHES_PATTERN = re.compile(r'-+')
COMBINING_MARKS_PATTERN = re.compile('[\u0300-\u036f]+')

CHAR_MAPPINGS = {
    "àâäáãå": "a",
    "éèêëẽ": "e",
    "îïíĩ": "i",
    "ôöóõ": "o",
    "ùûüúũ": "u",
    "ÿý": "y",
    "ç": "c",
    "ñ": "n",
    "ß": "ss",
}

_ACCENT_TABLE = str.maketrans(
    {char: replacement for accented, replacement in CHAR_MAPPINGS.items() for char in accented}
)

__all__ = [
    "capitalize_words",
    "center",
    "get_initials",
    "is_valid_email",
    "is_valid_url",
    "mask",
    "remove_accents",
    "remove_whitespace",
    "replace_accented_chars",
    "reverse_preserve_words",
    "slugify",
    "truncate",
]


def _require_single_char(name: str, value: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def remove_accents(text: str) -> str:
    """Strip diacritical marks via canonical decomposition and lowercase.

    Args:
        text: Input text

    Returns:
        Lowercased text with combining marks removed
    """
    decomposed = unicodedata.normalize("NFD", text)
    return COMBINING_MARKS_PATTERN.sub("", decomposed).lower()


def slugify(text: str, lowercase: bool = True) -> str:
    """Convert text to a URL-friendly slug.

    Args:
        text: Input text
        lowercase: Whether to lowercase before normalizing

    Returns:
        Hyphen-separated slug with no leading or trailing hyphens
    """
    if lowercase:
        text = text.lower()
    slug = remove_accents(text)
    slug = SPECIAL_CHARS_PATTERN.sub("", slug)
    slug = SLUG_WHITESPACE_PATTERN.sub(SLUG_SEPARATOR, slug)
    slug = MULTIPLE_DASHES_PATTERN.sub(SLUG_SEPARATOR, slug)
    return slug.strip(SLUG_SEPARATOR)


def truncate(text: str, max_length: int, suffix: str = DEFAULT_TRUNCATE_SUFFIX) -> str:
    """Shorten text to ``max_length`` characters, ending with ``suffix``.

    When the suffix alone does not fit, the suffix is returned as is.
    Negative lengths behave like zero.
    """
    max_length = max(max_length, 0)
    if len(text) <= max_length:
        return text
    adjusted_length = max_length - len(suffix)
    if adjusted_length <= 0:
        return suffix
    return text[:adjusted_length] + suffix


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def capitalize_words(text: str) -> str:
    # Splits on single spaces only, so runs of spaces survive as empty words.
    return " ".join(_capitalize(word) for word in text.split(" "))


def get_initials(text: str, uppercase: bool = True) -> str:
    """Return the first letter of each space-separated word."""
    initials = "".join(word[0] for word in text.strip().split(" ") if word.strip())
    return initials.upper() if uppercase else initials


def mask(text: str, start: int, mask_char: str = "*") -> str:
    """Hide everything from index ``start`` on, e.g. for card numbers.

    Args:
        text: Text to mask
        start: Number of leading characters left visible; negative means 0
        mask_char: Single replacement character

    Returns:
        Masked text of the same length, or ``text`` unchanged when ``start``
        is past its end

    Raises:
        ValueError: If ``mask_char`` is not exactly one character.
    """
    _require_single_char("mask_char", mask_char)
    if start >= len(text):
        return text
    start = max(start, 0)
    return text[:start] + mask_char * (len(text) - start)


def remove_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub("", text)


def replace_accented_chars(text: str) -> str:
    """Replace accented characters using the fixed ``CHAR_MAPPINGS`` table.

    Narrower than ``remove_accents``: only the listed lowercase characters
    are touched and case is preserved.
    """
    return text.translate(_ACCENT_TABLE)


def center(text: str, width: int, pad_char: str = " ") -> str:
    """Pad text on both sides to ``width``; an odd pad goes on the right.

    Raises:
        ValueError: If ``pad_char`` is not exactly one character.
    """
    _require_single_char("pad_char", pad_char)
    if len(text) >= width:
        return text
    left_pad = (width - len(text)) // 2
    right_pad = width - len(text) - left_pad
    return pad_char * left_pad + text + pad_char * right_pad


def reverse_preserve_words(text: str) -> str:
    """Reverse the characters of each word, keeping the word order."""
    return " ".join(word[::-1] for word in text.split(" "))
