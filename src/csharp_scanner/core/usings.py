from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from ..config import DEFAULT_LINE_ENDING

_USING_RE = re.compile(
    r"^[ \t]*(?:global[ \t]+)?using[ \t]+(?:static[ \t]+)?"
    r"(?:@?\w+[ \t]*=[ \t]*)?[\w.:<>, \t]+;[ \t]*\r?\n?$"
)
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+$")


def get_line_ending(document) -> str:
    text = document.get_text()
    newline = text.find("\n")
    if newline > 0 and text[newline - 1] == "\r":
        return "\r\n"
    return DEFAULT_LINE_ENDING


def _using_block(text: str) -> Tuple[int, int, List[str]]:
    """Character span of the leading using-block and its lines.

    Blank lines before the first using are skipped; the block ends at the
    first line that is not a using directive.
    """
    start = end = 0
    statements: List[str] = []
    for match in _LINE_RE.finditer(text):
        line = match.group(0)
        if _USING_RE.match(line):
            if not statements:
                start = match.start()
            statements.append(line)
            end = match.end()
        elif statements or line.strip():
            break
    return start, end, statements


def get_using_statements_from_text(text: str) -> List[str]:
    return _using_block(text)[2]


def get_using_statements(document) -> List[str]:
    return get_using_statements_from_text(document.get_text())


def replace_using_statements_from_text(text: str, new_statements: Iterable[str], line_ending: str) -> str:
    """Swap the leading using-block for `new_statements`.

    Each statement is terminated with `line_ending`. With no using-block in
    `text` the statements are inserted at the top.
    """
    start, end, _ = _using_block(text)
    block = "".join(statement.rstrip("\r\n") + line_ending for statement in new_statements)
    return text[:start] + block + text[end:]
