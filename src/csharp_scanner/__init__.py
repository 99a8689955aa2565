"""Heuristic structural scanning of C# source text."""

from .core.classifiers import is_method, is_public_line, is_terminating
from .core.document import CollectingErrorReporter
from .core.locator import (
    find_enclosing_block,
    get_current_line,
    get_method_signature_text,
    get_property_signature_text,
)
from .core.models import (
    CursorPosition,
    Editor,
    Lookup,
    MethodBlock,
    NotFound,
    PropertyBlock,
    Signature,
    SignatureType,
    SourceText,
)
from .core.names import (
    find_class_name,
    find_namespace,
    get_class_name,
    get_inherited_names,
    get_member_name,
    get_namespace,
)
from .core.signatures import get_full_signature_of_line, scan_block
from .core.usings import (
    get_line_ending,
    get_using_statements,
    get_using_statements_from_text,
    replace_using_statements_from_text,
)

__all__ = [
    "CollectingErrorReporter",
    "CursorPosition",
    "Editor",
    "Lookup",
    "MethodBlock",
    "NotFound",
    "PropertyBlock",
    "Signature",
    "SignatureType",
    "SourceText",
    "find_class_name",
    "find_enclosing_block",
    "find_namespace",
    "get_class_name",
    "get_current_line",
    "get_full_signature_of_line",
    "get_inherited_names",
    "get_line_ending",
    "get_member_name",
    "get_method_signature_text",
    "get_namespace",
    "get_property_signature_text",
    "get_using_statements",
    "get_using_statements_from_text",
    "is_method",
    "is_public_line",
    "is_terminating",
    "replace_using_statements_from_text",
    "scan_block",
]
