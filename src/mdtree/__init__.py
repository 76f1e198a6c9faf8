#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdtree - convert markdown into a tree of UI elements and a table of contents.

A markdown parser reports constructs children-first. mdtree turns each
construct into an element as soon as it is reported and hands the parser a
placeholder token in its place; the enclosing construct later resolves the
tokens embedded in its raw text and adopts the elements as children. Headings
are collected into a nested table of contents along the way.

Examples
--------
Basic usage:

    >>> from mdtree import markdown_to_elements
    >>> result = markdown_to_elements("# Intro\\n\\nSome *text*.")
    >>> [element.type for element in result.tree]
    ['h1', 'p']
    >>> result.toc_dicts()
    [{'id': 'intro', 'title': 'Intro', 'level': 1, 'children': []}]

Host element factory:

    >>> from mdtree import ElementOptions
    >>> options = ElementOptions(create_element=lambda tag, props, children: (tag, props, children))
    >>> markdown_to_elements("hello", options).tree
    [('p', {'key': 0}, ['hello'])]

"""

from mdtree.callbacks import DEFAULT_CALLBACKS, CallbackSet
from mdtree.converter import MarkdownElementConverter, RenderResult, create_renderer, markdown_to_elements
from mdtree.elements import Element, create_element
from mdtree.exceptions import (
    DependencyError,
    IntegrityError,
    InvalidOptionsError,
    MdTreeError,
    ValidationError,
)
from mdtree.options import ElementOptions
from mdtree.substitution import PlaceholderEngine, placeholder
from mdtree.toc import TocNode, heading_slug, iter_toc, record_heading
from mdtree.tracker import ElementTracker

__version__ = "0.1.0"

__all__ = [
    "CallbackSet",
    "DEFAULT_CALLBACKS",
    "DependencyError",
    "Element",
    "ElementOptions",
    "ElementTracker",
    "IntegrityError",
    "InvalidOptionsError",
    "MarkdownElementConverter",
    "MdTreeError",
    "PlaceholderEngine",
    "RenderResult",
    "TocNode",
    "ValidationError",
    "create_element",
    "create_renderer",
    "heading_slug",
    "iter_toc",
    "markdown_to_elements",
    "placeholder",
    "record_heading",
]
