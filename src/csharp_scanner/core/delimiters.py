from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple


OPENERS = {"<": "angle", "(": "paren", "{": "brace"}
CLOSERS = {">": "angle", ")": "paren", "}": "brace"}


class DelimiterBalancer:
    """Tracks how many `<>`, `()` and `{}` groups are open, left to right.

    Counters never go negative: an unmatched closer is ignored. Characters
    inside string/char literals and comments are not counted.
    """

    def __init__(self, track_angles: bool = True) -> None:
        self.angle = 0
        self.paren = 0
        self.brace = 0
        self._track_angles = track_angles
        self._quote: Optional[str] = None
        self._verbatim = False
        self._verbatim_quote_seen = False
        self._escaped = False
        self._line_comment = False
        self._block_comment = False
        self._prev = ""
        self._before_prev = ""

    @property
    def depth(self) -> int:
        return self.angle + self.paren + self.brace

    def at_top_level(self) -> bool:
        return self.depth == 0

    def feed(self, ch: str) -> bool:
        """Process one character. Returns True when it was part of the code."""
        prev, before_prev = self._prev, self._before_prev
        self._before_prev, self._prev = prev, ch

        if self._verbatim_quote_seen:
            self._verbatim_quote_seen = False
            if ch == '"':
                # "" inside a verbatim string is an escaped quote
                self._quote = '"'
                return False
            self._verbatim = False

        if ch == "\n":
            self._line_comment = False
            if self._quote is not None and not self._verbatim:
                # regular literals cannot span lines; recover at the line break
                self._quote = None
            return False
        if self._line_comment:
            return False
        if self._block_comment:
            if prev == "*" and ch == "/":
                self._block_comment = False
                self._prev = ""
            return False

        if self._quote is not None:
            if self._verbatim:
                if ch == '"':
                    self._quote = None
                    self._verbatim_quote_seen = True
            elif self._escaped:
                self._escaped = False
            elif ch == "\\":
                self._escaped = True
            elif ch == self._quote:
                self._quote = None
            return False

        if ch in ("\"", "'"):
            self._quote = ch
            # @"..." and the interpolated @$"..." / $@"..." forms
            self._verbatim = ch == '"' and (prev == "@" or (prev == "$" and before_prev == "@"))
            return False
        if prev == "/" and ch == "/":
            self._line_comment = True
            return False
        if prev == "/" and ch == "*":
            self._block_comment = True
            self._prev = ""
            return False

        if ch in OPENERS:
            kind = OPENERS[ch]
            if kind != "angle" or self._track_angles:
                setattr(self, kind, getattr(self, kind) + 1)
        elif ch in CLOSERS:
            kind = CLOSERS[ch]
            if kind == "angle" and (not self._track_angles or prev == "="):
                # `=>` is a lambda arrow, not a closer
                return True
            setattr(self, kind, max(0, getattr(self, kind) - 1))
        return True

    def feed_text(self, text: str) -> None:
        for ch in text:
            self.feed(ch)

    @property
    def in_line_comment(self) -> bool:
        return self._line_comment


def strip_line_comment(line: str) -> str:
    """`line` without a trailing `//` comment; `//` inside literals is kept."""
    balancer = DelimiterBalancer()
    for index, ch in enumerate(line):
        balancer.feed(ch)
        if balancer.in_line_comment:
            return line[: index - 1]
    return line


def iter_top_level(text: str, start: int = 0) -> Iterator[Tuple[int, str]]:
    """Yield (index, char) for code characters at depth zero relative to `start`.

    Openers of top-level groups are yielded, their contents and closers are not.
    """
    balancer = DelimiterBalancer()
    for index in range(start, len(text)):
        was_top = balancer.at_top_level()
        is_code = balancer.feed(text[index])
        if was_top and is_code:
            yield index, text[index]


def find_closing(text: str, open_index: int) -> int:
    """Index of the closer matching the opener at `open_index`, or -1."""
    kind = OPENERS.get(text[open_index])
    if kind is None:
        return -1
    balancer = DelimiterBalancer()
    for index in range(open_index, len(text)):
        balancer.feed(text[index])
        if getattr(balancer, kind) == 0:
            return index
    return -1


def skip_group(text: str, index: int) -> int:
    """Index just past a balanced `<...>` or `(...)` group starting at `index`."""
    if index >= len(text) or text[index] not in "<(":
        return index
    close = find_closing(text, index)
    return len(text) if close < 0 else close + 1


def split_top_level(text: str, separator: str = ",") -> List[str]:
    pieces: List[str] = []
    last = 0
    for index, ch in iter_top_level(text):
        if ch == separator:
            pieces.append(text[last:index])
            last = index + 1
    pieces.append(text[last:])
    return pieces


def find_block_end(lines: Sequence[str], line_index: int, column: int) -> int:
    """Line on which the brace opened at (line_index, column) is closed.

    An unterminated block runs to the last line.
    """
    balancer = DelimiterBalancer(track_angles=False)
    text = lines[line_index][column:]
    for index in range(line_index, len(lines)):
        if index > line_index:
            text = lines[index]
        for ch in text:
            balancer.feed(ch)
            if balancer.brace == 0:
                return index
        balancer.feed("\n")
    return len(lines) - 1
