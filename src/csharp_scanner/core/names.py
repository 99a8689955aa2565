from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ..config import MEMBER_MODIFIERS, TYPE_KEYWORDS, TYPE_MODIFIERS
from .delimiters import iter_top_level, skip_group, split_top_level
from .document import ErrorReporter
from .models import Lookup, NotFound

logger = logging.getLogger(__name__)


_NAMESPACE_RE = re.compile(r"\bnamespace\s+(@?[\w.]+)")

_DECL_PREFIX = (
    r"(?:^|(?<=[;{}]))[ \t]*"
    r"(?:\[[^\]\n]*\]\s*)*"
    r"(?:(?:" + "|".join(TYPE_MODIFIERS) + r")\s+)*"
)
_CLASS_RE = re.compile(_DECL_PREFIX + r"class\s+(@?\w+)", re.MULTILINE)
_TYPE_DECL_RE = re.compile(
    _DECL_PREFIX + r"(?:" + "|".join(TYPE_KEYWORDS) + r")(?:\s+(?:class|struct))?\s+(@?\w+)",
    re.MULTILINE,
)

_MODIFIER_RE = re.compile(r"(" + "|".join(MEMBER_MODIFIERS) + r")\s+")
_TYPE_NAME_RE = re.compile(r"@?(?:\w|\.|::)+")
_IDENTIFIER_RE = re.compile(r"@?[\w.]+")
_WS_RE = re.compile(r"\s*")


@dataclass(frozen=True)
class MemberHead:
    """The leading part of a member declaration, up to what follows its name.

    `boundary` is one of "(", "{", "=>", "=", ";" or "" when the text ends
    before it; `name` is empty when the text ends before the name.
    `has_modifiers` is set when at least one modifier keyword was skipped.
    """

    name: str
    name_start: int
    boundary: str
    boundary_index: int
    has_modifiers: bool = False


def _skip_ws(text: str, pos: int) -> int:
    return _WS_RE.match(text, pos).end()


def _incomplete(text: str) -> MemberHead:
    return MemberHead("", len(text), "", len(text))


def _read_boundary(text: str, pos: int) -> Optional[str]:
    if pos >= len(text):
        return ""
    if text.startswith("=>", pos):
        return "=>"
    ch = text[pos]
    if ch in "({=;":
        return ch
    if ch == ",":
        # `int a, b;` declares fields
        return ";"
    return None


def parse_member_head(text: str) -> Optional[MemberHead]:
    """Skip attributes, modifiers and the return type; locate the member name."""
    pos = _skip_ws(text, 0)
    while pos < len(text) and text[pos] == "[":
        close = text.find("]", pos)
        if close < 0:
            return None
        pos = _skip_ws(text, close + 1)

    has_modifiers = False
    while True:
        match = _MODIFIER_RE.match(text, pos)
        if not match:
            break
        has_modifiers = True
        pos = _skip_ws(text, match.end())

    if pos >= len(text):
        return _incomplete(text)

    type_start = pos
    is_tuple = text[pos] == "("
    if is_tuple:
        pos = skip_group(text, pos)
    else:
        match = _TYPE_NAME_RE.match(text, pos)
        if not match:
            return None
        pos = match.end()
    while pos < len(text):
        ch = text[pos]
        if ch == "<":
            pos = skip_group(text, pos)
        elif ch in "?*":
            pos += 1
        elif ch == "[":
            close = text.find("]", pos)
            if close < 0:
                return _incomplete(text)
            pos = close + 1
        else:
            break
    type_end = pos

    pos = _skip_ws(text, pos)
    if not is_tuple and pos < len(text) and text[pos] == "(":
        # constructor: the "return type" is the member name
        return MemberHead(text[type_start:type_end], type_start, "(", pos, has_modifiers)

    match = _IDENTIFIER_RE.match(text, pos)
    if not match:
        return _incomplete(text) if pos >= len(text) else None
    if match.start() == type_end and not is_tuple:
        return None
    name_start, pos = match.start(), match.end()
    name = match.group(0)
    if pos < len(text) and text[pos] == "<":
        pos = skip_group(text, pos)
    pos = _skip_ws(text, pos)

    boundary = _read_boundary(text, pos)
    if boundary is None:
        return None
    return MemberHead(name, name_start, boundary, pos, has_modifiers)


def _report(error: NotFound, reporter: Optional[ErrorReporter]) -> None:
    logger.warning(error.message)
    if reporter is not None:
        reporter.show_error_message(error.message)


def find_namespace(text: str) -> Lookup[str]:
    match = _NAMESPACE_RE.search(text)
    if not match:
        return Lookup(error=NotFound("namespace", "Could not find the namespace in the current file."))
    return Lookup(value=match.group(1))


def get_namespace(text: str, reporter: Optional[ErrorReporter] = None) -> Optional[str]:
    lookup = find_namespace(text)
    if not lookup.ok:
        _report(lookup.error, reporter)
    return lookup.value


def find_class_name(text: str) -> Lookup[str]:
    match = _CLASS_RE.search(text)
    if not match:
        return Lookup(error=NotFound("class", "Could not find the class name in the current file."))
    return Lookup(value=match.group(1))


def get_class_name(text: str, reporter: Optional[ErrorReporter] = None) -> Optional[str]:
    lookup = find_class_name(text)
    if not lookup.ok:
        _report(lookup.error, reporter)
    return lookup.value


def _base_list_end(text: str, start: int) -> int:
    for index, ch in iter_top_level(text, start):
        if ch in "{;":
            return index
        if (
            text.startswith("where", index)
            and (index == 0 or not (text[index - 1].isalnum() or text[index - 1] == "_"))
            and (index + 5 >= len(text) or not (text[index + 5].isalnum() or text[index + 5] == "_"))
        ):
            return index
    return len(text)


def get_inherited_names(text: str, include_base_classes: bool) -> List[str]:
    """Names listed after the `:` of the first type declaration, in source order.

    Generic arguments are stripped. The first entry is taken to be the base
    class and is dropped when `include_base_classes` is false; nothing tells a
    lone interface apart from a base class here.
    """
    match = _TYPE_DECL_RE.search(text)
    if not match:
        logger.debug("no type declaration found, no inherited names")
        return []

    pos = match.end()
    # generic parameters, then a record's primary constructor
    pos = skip_group(text, pos)
    pos = skip_group(text, _skip_ws(text, pos))
    pos = _skip_ws(text, pos)
    if pos >= len(text) or text[pos] != ":":
        return []

    start = pos + 1
    end = _base_list_end(text, start)
    names = []
    for entry in split_top_level(text[start:end]):
        name = re.split(r"[<(]", entry, maxsplit=1)[0].strip()
        if name:
            names.append(name)

    if not include_base_classes:
        names = names[1:]
    return names


def get_member_name(text: str) -> Optional[str]:
    """Identifier following the return type, or None.

    A declaration may end right after its name, as the signatures returned
    by the scanner do. That form needs a modifier in front of the type so
    two bare words are not read as a member.
    """
    head = parse_member_head(text)
    if head is None or not head.name:
        return None
    if not head.boundary and not head.has_modifiers:
        return None
    return head.name
