"""
URL slug generation.
"""

import re
import unicodedata

_INVALID_CHARS_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATOR_RUN_RE = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """
    Convert text to a URL-safe slug.

    Accented letters are folded to their ASCII base letter; any other
    character outside ``[a-z0-9]``, whitespace, ``_`` and ``-`` is dropped.
    Runs of separators collapse into one hyphen.

    Args:
        text: Text to convert.

    Returns:
        Slug of lower-case ASCII letters, digits and single hyphens, with no
        leading or trailing hyphen. Empty when nothing usable remains.

    Examples:
        >>> slugify("  Hello, World! 2024  ")
        'hello-world-2024'
    """
    if not text:
        return ""

    folded = unicodedata.normalize("NFKD", text)
    folded = folded.encode("ascii", "ignore").decode("ascii")

    slug = folded.lower().strip()
    slug = _INVALID_CHARS_RE.sub("", slug)
    slug = _SEPARATOR_RUN_RE.sub("-", slug)
    return slug.strip("-")
