"""Input sanitization and email validation for user-supplied text."""

import re

PAGE_NAME_MAX_LENGTH = 255
ENTRY_FIELD_MAX_LENGTH = 75

# Tag-like substrings, including an unterminated tag at the end of the string.
_TAG_PATTERN = re.compile(r"</?[^>]+(>|$)")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@.]+$")


def sanitize(text: str) -> str:
    """Trim surrounding whitespace, then strip HTML-tag-like substrings.

    Trimming happens first, so whitespace left behind by a removed tag is kept:
    ``sanitize("<b> Al </b>")`` returns ``" Al "``.
    """
    return _TAG_PATTERN.sub("", text.strip())


def is_valid_email(text: str) -> bool:
    """Return True if *text* looks like ``local@domain.tld``.

    Rejects a missing ``@``, a domain without a dot, and embedded whitespace.
    """
    return _EMAIL_PATTERN.match(text.strip()) is not None
