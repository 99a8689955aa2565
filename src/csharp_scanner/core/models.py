from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar

from ..config import DEFAULT_LINE_ENDING


T = TypeVar("T")


@dataclass(frozen=True)
class TextLine:
    text: str


@dataclass(frozen=True)
class SourceText:
    """Immutable snapshot of a document: its lines plus the detected line ending."""

    lines: Tuple[str, ...]
    line_ending: str = DEFAULT_LINE_ENDING

    @classmethod
    def from_text(cls, raw: str) -> "SourceText":
        newline = raw.find("\n")
        if newline > 0 and raw[newline - 1] == "\r":
            line_ending = "\r\n"
        else:
            line_ending = DEFAULT_LINE_ENDING
        lines = [line[:-1] if line.endswith("\r") else line for line in raw.split("\n")]
        return cls(lines=tuple(lines), line_ending=line_ending)

    @classmethod
    def from_document(cls, document: Any) -> "SourceText":
        if isinstance(document, SourceText):
            return document
        return cls.from_text(document.get_text())

    # Document protocol, so a snapshot can stand in for a live document

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> TextLine:
        return TextLine(self.lines[index])

    def get_text(self) -> str:
        return self.line_ending.join(self.lines)


@dataclass(frozen=True)
class CursorPosition:
    line: int
    character: int = 0  # reserved, the scanner only looks at `line`

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(f"cursor position must be non-negative, got {self.line}:{self.character}")


@dataclass
class Editor:
    """The active editor: a document plus the cursor's active position."""

    document: Any
    cursor: CursorPosition


class SignatureType(str, Enum):
    METHOD = "Method"
    FULL_PROPERTY = "FullProperty"
    LAMBA_PROPERTY = "LambaProperty"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Signature:
    text: Optional[str]
    signature_type: SignatureType

    @classmethod
    def unknown(cls) -> "Signature":
        return cls(text=None, signature_type=SignatureType.UNKNOWN)


@dataclass(frozen=True)
class MethodBlock:
    """A method found by the block scanner; the span includes its body."""

    start_line: int
    end_line: int
    text: str

    @property
    def signature_type(self) -> SignatureType:
        return SignatureType.METHOD

    def contains(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line

    @property
    def signature(self) -> Signature:
        return Signature(text=self.text, signature_type=self.signature_type)


@dataclass(frozen=True)
class PropertyBlock:
    """A full or expression-bodied property found by the block scanner."""

    kind: SignatureType  # FULL_PROPERTY or LAMBA_PROPERTY
    start_line: int
    end_line: int
    text: str

    @property
    def signature_type(self) -> SignatureType:
        return self.kind

    def contains(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line

    @property
    def signature(self) -> Signature:
        return Signature(text=self.text, signature_type=self.kind)


@dataclass(frozen=True)
class NotFound:
    """A structural fact that is absent from the scanned text."""

    subject: str  # e.g. "namespace", "class"
    message: str


@dataclass(frozen=True)
class Lookup(Generic[T]):
    value: Optional[T] = None
    error: Optional[NotFound] = None

    @property
    def ok(self) -> bool:
        return self.error is None
