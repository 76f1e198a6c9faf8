#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/converter.py
"""Markdown to element tree converter.

This module is the public entry point. It runs one mistune pass per call
with a fresh :class:`ElementTracker` and returns the top-level element
forest, the element table and the table of contents.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Optional, Union

from mdtree.constants import DEPS_MARKDOWN
from mdtree.exceptions import InvalidOptionsError
from mdtree.options import ElementOptions
from mdtree.toc import TocNode
from mdtree.tracker import ElementTracker
from mdtree.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

MarkdownInput = Union[str, Path, IO[bytes], IO[str], bytes]


@dataclass
class RenderResult:
    """Output of one conversion pass.

    Parameters
    ----------
    tree : list
        Elements without a parent, in document order
    elements : dict[int, Any]
        Every tracked element by identifier, adopted ones included
    toc : list of TocNode
        Nested table of contents

    """

    tree: list[Any]
    elements: dict[int, Any]
    toc: list[TocNode]

    def toc_dicts(self) -> list[dict[str, Any]]:
        """Return the table of contents as nested ``{id, title, level, children}`` dicts."""
        return [node.to_dict() for node in self.toc]


class MarkdownElementConverter:
    r"""Convert Markdown into host elements and a table of contents.

    Parameters
    ----------
    options : ElementOptions or None, default = None
        Conversion options

    Examples
    --------
        >>> converter = MarkdownElementConverter()
        >>> result = converter.parse("# Hello\\n\\nThis is **bold**.")
        >>> [element.type for element in result.tree]
        ['h1', 'p']

    """

    def __init__(self, options: ElementOptions | None = None):
        """Initialize the converter with options."""
        if options is not None and not isinstance(options, ElementOptions):
            raise InvalidOptionsError(
                converter_name="markdown",
                expected_type=ElementOptions,
                received_type=type(options),
            )
        self.options: ElementOptions = options or ElementOptions()

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: MarkdownInput) -> RenderResult:
        """Convert markdown input in a single pass.

        Parameters
        ----------
        input_data : str, Path, bytes or file-like
            Markdown content, or the path of a markdown file

        Returns
        -------
        RenderResult
            Top-level elements, element table and table of contents

        Raises
        ------
        IntegrityError
            If a placeholder cannot be resolved

        """
        from mdtree.renderer import create_markdown, create_renderer

        markdown_content = self._load_text_content(input_data)

        tracker = ElementTracker(context=self.options.context)
        markdown = create_markdown(create_renderer(tracker, self.options), self.options)

        with debug_timer(logger, "Conversion (markdown)"):
            markdown(markdown_content)

        logger.debug(
            "Converted %d elements, %d top-level, %d TOC roots",
            len(tracker.elements),
            len(tracker.tree),
            len(tracker.toc),
        )
        return RenderResult(tree=tracker.tree, elements=tracker.elements, toc=tracker.toc)

    @staticmethod
    def _load_text_content(input_data: MarkdownInput) -> str:
        """Load markdown text from a string, path, bytes or stream.

        A string is treated as a path only when it names an existing file.
        """
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8-sig")
        elif isinstance(input_data, Path):
            return input_data.read_text(encoding="utf-8-sig")
        elif isinstance(input_data, str):
            # Long or multi-line strings cannot be paths
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return path.read_text(encoding="utf-8-sig")
                except OSError:
                    pass
            return input_data
        else:
            data = input_data.read()
            if isinstance(data, bytes):
                return data.decode("utf-8-sig")
            return data


def markdown_to_elements(markdown_content: MarkdownInput, options: Optional[ElementOptions] = None) -> RenderResult:
    r"""Convert Markdown to elements in one step.

    Parameters
    ----------
    markdown_content : str, Path, bytes or file-like
        Markdown to convert
    options : ElementOptions or None, default = None
        Conversion options

    Returns
    -------
    RenderResult
        Top-level elements, element table and table of contents

    Examples
    --------
    >>> from mdtree import markdown_to_elements
    >>> result = markdown_to_elements("# Title\\n\\n## Part")
    >>> result.toc_dicts()[0]["children"][0]["id"]
    'title-part'

    """
    return MarkdownElementConverter(options).parse(markdown_content)


@requires_dependencies("markdown", DEPS_MARKDOWN)
def create_renderer(tracker: ElementTracker, options: Optional[ElementOptions] = None) -> Any:
    """Build a mistune renderer writing into a caller-owned tracker.

    For hosts that drive mistune themselves. The tracker must be fresh and
    serves a single pass.

    Examples
    --------
        >>> import mistune
        >>> tracker = ElementTracker()
        >>> markdown = mistune.create_markdown(renderer=create_renderer(tracker))
        >>> _ = markdown("*hi*")
        >>> [element.type for element in tracker.tree]
        ['p']

    """
    from mdtree.renderer import create_renderer as build_renderer

    return build_renderer(tracker, options or ElementOptions())
