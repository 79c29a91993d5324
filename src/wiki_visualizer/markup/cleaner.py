# ABOUTME: Strips reference tags and wiki formatting tokens from wikitable markup
# ABOUTME: Pure text transform; matches both raw and XML-escaped (&lt; &quot;) page sources

import re

_OPEN = r"(?:<|&lt;)"
_CLOSE = r"(?:>|&gt;)"

# <ref name="a">...</ref>; the opening tag may not be self-closing
REF_TAG_PATTERN = re.compile(
    rf"{_OPEN}ref(?:erences)?\b(?:(?!/{_CLOSE})[^>])*?{_CLOSE}.*?{_OPEN}/ref(?:erences)?\s*{_CLOSE}",
    re.IGNORECASE | re.DOTALL,
)

# <ref name="a" />
REF_SELF_CLOSING_PATTERN = re.compile(rf"{_OPEN}ref(?:(?!{_CLOSE})[^>])*?/{_CLOSE}", re.IGNORECASE | re.DOTALL)

# align="right" | and the escaped align=&quot;right&quot; |
ALIGN_ATTRIBUTE_PATTERN = re.compile(r"align=(?:&quot;|\").*?\|", re.IGNORECASE | re.DOTALL)

# Removed in this order so that ''''' (bold italic) disappears entirely
FORMATTING_TOKENS = ("[[", "]]", "'''", "''")

_UNESCAPED_QUOTE = re.compile(r"(?<!\\)'")


def remove_matches(pattern: re.Pattern[str], text: str) -> str:
    """Delete every distinct match of ``pattern`` from ``text``."""
    for match in dict.fromkeys(m.group(0) for m in pattern.finditer(text)):
        text = text.replace(match, "")
    return text


def _strip_once(text: str) -> str:
    text = remove_matches(REF_TAG_PATTERN, text)
    text = remove_matches(REF_SELF_CLOSING_PATTERN, text)
    for token in FORMATTING_TOKENS:
        text = text.replace(token, "")
    return remove_matches(ALIGN_ATTRIBUTE_PATTERN, text)


def escape_quotes(text: str) -> str:
    """Prefix single quotes with a backslash, leaving already-escaped ones alone."""
    return _UNESCAPED_QUOTE.sub(r"\\'", text)


def clean(text: str) -> str:
    """Remove references, wikilink brackets, bold/italic quotes and align attributes.

    Removal passes repeat until the text stops changing, because deleting one
    token can join its neighbours into another (``[''[`` becomes ``[[``).
    Single quotes left over are escaped for embedding in a script string,
    so ``clean(clean(text)) == clean(text)``.
    """
    previous = None
    while text != previous:
        previous = text
        text = _strip_once(text)
    return escape_quotes(text)
