from __future__ import annotations

import re
from typing import Optional

from ..config import ACCESS_MODIFIERS, TERMINATING_MODIFIERS


_PUBLIC_RE = re.compile(r"\bpublic\b")
_TERMINATING_RE = re.compile(r"\b(?:" + "|".join(TERMINATING_MODIFIERS) + r")\b")
_LEADING_ACCESS_RE = re.compile(r"^\s*(?:(?:" + "|".join(ACCESS_MODIFIERS) + r")\s+)+")

# `) where T : ...` following a parameter list, up to the end of the signature
_WHERE_CLAUSE_RE = re.compile(r"\)\s*where\s+\w+\s*:.*$", re.DOTALL)


def is_public_line(text: str) -> bool:
    return bool(_PUBLIC_RE.search(text))


def has_modifier(text: str, modifier: str) -> bool:
    """Whole-word match of `modifier` (e.g. "public", "protected internal")."""
    words = modifier.split()
    if not words:
        return False
    pattern = r"\b" + r"\s+".join(re.escape(w) for w in words) + r"\b"
    return re.search(pattern, text) is not None


def is_method(signature: Optional[str]) -> bool:
    """True when the signature ends with a parameter list.

    A trailing generic constraint clause and body opener are ignored, so
    `Foo<T>(int a) where T : class {` counts as a method.
    """
    if not signature:
        return False
    text = signature.strip()
    if text.endswith("{"):
        text = text[:-1].rstrip()
    match = _WHERE_CLAUSE_RE.search(text)
    if match:
        text = text[: match.start() + 1]
    return text.endswith(")")


def is_terminating(text: str) -> bool:
    """Whether a forward scan should stop at this line.

    Blank lines and lines declaring a protected/private/internal member mark
    the boundary of the member being scanned.
    """
    if not text.strip():
        return True
    return bool(_TERMINATING_RE.search(text))


def strip_access_modifiers(signature: str) -> str:
    return _LEADING_ACCESS_RE.sub("", signature, count=1)
