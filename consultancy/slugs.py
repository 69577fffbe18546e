"""URL slug generation and validation.

A title is lowercased and trimmed, then everything except ASCII letters,
digits, underscores, whitespace and hyphens is dropped. Runs of whitespace,
underscores and hyphens become a single hyphen, and hyphens left at either
end are stripped.

Whitespace is the JavaScript set rather than Python's str.isspace(), so slugs
match the ones the frontend builds: U+FEFF separates words, while the ASCII
information separators \\x1c-\\x1f are dropped like any other symbol.

generate_slug() may return "" (e.g. for "!!!"), and is_valid_slug("") is
False. Callers that need an identifier must supply their own fallback.
"""

import re

WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = re.escape(WHITESPACE)

_STRIP_RE = re.compile(rf"[^a-z0-9_{_WS}-]")
_SEPARATOR_RE = re.compile(rf"[{_WS}_-]+")
_SLUG_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def generate_slug(text: str | None) -> str:
    """Convert a title to a URL-friendly slug.

    "Audit & Compliance Services" → "audit-compliance-services"
    """
    if not text:
        return ""
    text = text.lower()
    text = text.strip(WHITESPACE)
    text = _STRIP_RE.sub("", text)
    text = _SEPARATOR_RE.sub("-", text)
    return text.strip("-")


def is_valid_slug(candidate: str | None) -> bool:
    """True if candidate is non-empty lowercase alnum groups joined by single hyphens."""
    if not candidate:
        return False
    return _SLUG_RE.fullmatch(candidate) is not None
