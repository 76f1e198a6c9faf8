#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdtree library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Placeholder Tokens - Forward-reference syntax used inside raw text
3. Construct Names - Keys of the callback and element override tables
4. Element Defaults - Tags and property names for the built-in callbacks
5. Dependencies - Packages required by the markdown entry point
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableAlignment = Literal["left", "center", "right"]

# =============================================================================
# Placeholder Tokens
# =============================================================================

PLACEHOLDER_TEMPLATE = "{{{{{element_id}}}}}"

# Matches exactly one token; the group captures the element id
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\d+)\}\}")

# Splits raw text while keeping the tokens as their own pieces
PLACEHOLDER_SPLIT_PATTERN = re.compile(r"(\{\{\d+\}\})")

# Character references substituted for braces in literal text
BRACE_ESCAPES = {"{": "&#123;", "}": "&#125;"}

# =============================================================================
# Construct Names
# =============================================================================

CONSTRUCT_NAMES: tuple[str, ...] = (
    "code",
    "html",
    "paragraph",
    "blockquote",
    "link",
    "br",
    "hr",
    "strong",
    "del",
    "em",
    "heading",
    "list",
    "listitem",
    "table",
    "thead",
    "tbody",
    "tablerow",
    "tablecell",
    "codespan",
    "image",
)

# =============================================================================
# Element Defaults
# =============================================================================

RAW_HTML_CONTAINER_TAG = "div"
INNER_HTML_PROP = "inner_html"
CLASS_NAME_PROP = "class_name"
CONTEXT_PROP = "context"
KEY_PROP = "key"

TABLE_ALIGN_CLASS_PREFIX = "text-"
CODE_LANGUAGE_CLASS_PREFIX = "language-"

HEADING_ID_SEPARATOR = "-"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
