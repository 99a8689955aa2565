from __future__ import annotations

from typing import List, Protocol

from .models import TextLine


class Document(Protocol):
    """What the scanner needs from a host editor's document."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> TextLine: ...

    def get_text(self) -> str: ...


class ErrorReporter(Protocol):
    def show_error_message(self, message: str) -> None: ...


class CollectingErrorReporter:
    """Error reporter that keeps messages so a boundary layer can return them."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def show_error_message(self, message: str) -> None:
        self.messages.append(message)
