# Line ending used when a document has no line break to infer one from
DEFAULT_LINE_ENDING = "\n"

# Modifier a member must carry to be picked up by the cursor locator
LOCATOR_MODIFIER = "public"

# Access modifiers that mark the start of a new, non-public member.
# A line carrying one of these ends a forward scan.
TERMINATING_MODIFIERS = ["protected", "private", "internal"]

ACCESS_MODIFIERS = ["public", *TERMINATING_MODIFIERS]

# Keywords that may precede a member's return type
MEMBER_MODIFIERS = ACCESS_MODIFIERS + [
    "static",
    "virtual",
    "override",
    "abstract",
    "sealed",
    "async",
    "new",
    "readonly",
    "extern",
    "unsafe",
    "partial",
    "required",
    "volatile",
    "const",
    "event",
]

# Keywords that may precede a type declaration keyword
TYPE_MODIFIERS = ACCESS_MODIFIERS + [
    "static",
    "abstract",
    "sealed",
    "partial",
    "unsafe",
    "new",
    "file",
    "readonly",
    "ref",
]

# Declarations whose base list is read by get_inherited_names
TYPE_KEYWORDS = ["class", "struct", "interface", "record"]

# HTTP boundary
API_TITLE = "C# Structural Scanner"
LOG_LEVEL = "INFO"
