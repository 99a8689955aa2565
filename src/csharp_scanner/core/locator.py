from __future__ import annotations

import logging
from typing import Optional

from ..config import LOCATOR_MODIFIER
from .classifiers import is_public_line, strip_access_modifiers
from .models import Editor, MethodBlock, PropertyBlock, Signature, SourceText
from .signatures import Block, scan_block

logger = logging.getLogger(__name__)


def get_current_line(editor: Optional[Editor]) -> Optional[str]:
    if editor is None:
        return None
    source = SourceText.from_document(editor.document)
    line = editor.cursor.line
    if line >= source.line_count:
        return None
    return source.lines[line].strip()


def find_enclosing_block(editor: Editor) -> Optional[Block]:
    """The public member whose span holds the cursor, if any.

    Walks up from the cursor to the nearest public line and scans the member
    declared there. A member that ends above the cursor does not count, so a
    property declared above a method body is never reported for it.
    """
    source = SourceText.from_document(editor.document)
    cursor_line = min(editor.cursor.line, source.line_count - 1)
    for index in range(cursor_line, -1, -1):
        if not is_public_line(source.lines[index]):
            continue
        block = scan_block(LOCATOR_MODIFIER, source, index)
        if block is None or not block.contains(editor.cursor.line):
            logger.debug("cursor at line %d is not inside the member at line %d", editor.cursor.line, index)
            return None
        return block
    return None


def _body_relative(block: Block) -> Signature:
    return Signature(text=strip_access_modifiers(block.text), signature_type=block.signature_type)


def get_method_signature_text(editor: Editor) -> Optional[Signature]:
    block = find_enclosing_block(editor)
    if isinstance(block, MethodBlock):
        return _body_relative(block)
    return None


def get_property_signature_text(editor: Editor) -> Optional[Signature]:
    block = find_enclosing_block(editor)
    if isinstance(block, PropertyBlock):
        return _body_relative(block)
    return None
