from __future__ import annotations

import bisect
import logging
import re
from typing import List, Optional, Sequence, Tuple, Union

from .classifiers import has_modifier, is_terminating
from .delimiters import DelimiterBalancer, find_block_end, find_closing, iter_top_level, strip_line_comment
from .models import MethodBlock, PropertyBlock, Signature, SignatureType, SourceText
from .names import parse_member_head

logger = logging.getLogger(__name__)

Block = Union[MethodBlock, PropertyBlock]

_NO_SPACE_AFTER = ("(", ",", "<", ".")
_NO_SPACE_BEFORE = (")", ",", ">", ".")


def normalize_signature(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def find_statement_end(lines: Sequence[str], line_index: int, column: int) -> int:
    """Line holding the `;` that ends the statement starting at (line_index, column)."""
    balancer = DelimiterBalancer(track_angles=False)
    text = lines[line_index][column:]
    for index in range(line_index, len(lines)):
        if index > line_index:
            text = lines[index]
        for ch in text:
            was_top = balancer.at_top_level()
            if balancer.feed(ch) and was_top and ch == ";":
                return index
        balancer.feed("\n")
    return len(lines) - 1


class _Accumulator:
    """Trimmed declaration lines, `//` comments dropped, joined into one string
    with a map back to (line, column) so body delimiters can be located in
    the document."""

    def __init__(self) -> None:
        self.text = ""
        self._starts: List[int] = []
        self._origins: List[Tuple[int, int]] = []

    def append(self, line_index: int, line: str) -> None:
        line = strip_line_comment(line)
        piece = line.strip()
        if not piece:
            return
        if self.text and not (self.text.endswith(_NO_SPACE_AFTER) or piece.startswith(_NO_SPACE_BEFORE)):
            self.text += " "
        self._starts.append(len(self.text))
        self._origins.append((line_index, len(line) - len(line.lstrip())))
        self.text += piece

    def position_of(self, index: int) -> Tuple[int, int]:
        segment = bisect.bisect_right(self._starts, index) - 1
        line_index, column = self._origins[segment]
        return line_index, column + index - self._starts[segment]


def _find_body_opener(text: str, start: int) -> Optional[Tuple[int, str]]:
    for index, ch in iter_top_level(text, start):
        if ch == "{" or ch == ";":
            return index, ch
        if text.startswith("=>", index):
            return index, "=>"
    return None


def _body_end(lines: Sequence[str], position: Tuple[int, int], opener: str) -> int:
    line_index, column = position
    if opener == "{":
        return find_block_end(lines, line_index, column)
    if opener == "=>":
        return find_statement_end(lines, line_index, column)
    return line_index


def scan_block(required_modifier: str, document, start_line: int) -> Optional[Block]:
    """Read the member declared at `start_line` in a single structural pass.

    Continuation lines are accumulated until the declaration shows what it
    is: a parameter list makes it a method, `{` a full property and `=>` an
    expression-bodied property. The returned span covers the method body or
    the property's accessors. Fields, lines without `required_modifier` and
    declarations cut short by a terminating line give None.
    """
    source = SourceText.from_document(document)
    lines = source.lines
    if not 0 <= start_line < len(lines):
        raise IndexError(f"line {start_line} is outside the document (0..{len(lines) - 1})")
    if not has_modifier(lines[start_line], required_modifier):
        return None

    acc = _Accumulator()
    for index in range(start_line, len(lines)):
        line = lines[index]
        if index > start_line and is_terminating(line):
            logger.debug("declaration at line %d cut short at line %d", start_line, index)
            return None
        acc.append(index, line)
        text = acc.text

        head = parse_member_head(text)
        if head is None:
            return None
        if head.boundary in ("=", ";"):
            logger.debug("line %d declares a field", start_line)
            return None
        if not head.boundary:
            continue

        if head.boundary == "(":
            close = find_closing(text, head.boundary_index)
            if close < 0:
                continue
            found = _find_body_opener(text, close + 1)
            if found is None:
                continue
            opener_index, opener = found
            end_line = _body_end(lines, acc.position_of(opener_index), opener)
            return MethodBlock(start_line, end_line, normalize_signature(text[:opener_index]))

        kind = SignatureType.FULL_PROPERTY if head.boundary == "{" else SignatureType.LAMBA_PROPERTY
        end_line = _body_end(lines, acc.position_of(head.boundary_index), head.boundary)
        return PropertyBlock(kind, start_line, end_line, normalize_signature(text[: head.boundary_index]))

    return None


def get_full_signature_of_line(required_modifier: str, document, start_line: int) -> Signature:
    block = scan_block(required_modifier, document, start_line)
    if block is None:
        return Signature.unknown()
    return block.signature
