#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/renderer.py
"""mistune renderer that drives the conversion callbacks.

mistune renders a token by first rendering its children to strings and
then calling the renderer method for the token with the joined result.
:class:`ElementRenderer` maps each of those methods onto a construct
callback, so every string flowing back into mistune is either a placeholder
token or escaped literal text.

Literal text is HTML-escaped and its braces are replaced by character
references. Resolution unescapes it again, and text written by the author
can never be mistaken for a placeholder token.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import mistune
from mistune.util import escape as escape_text
from mistune.util import safe_entity

from mdtree.callbacks import CallbackSet
from mdtree.constants import BRACE_ESCAPES
from mdtree.substitution import PlaceholderEngine

if TYPE_CHECKING:
    from mdtree.options import ElementOptions
    from mdtree.tracker import ElementTracker

logger = logging.getLogger(__name__)


def _escape_braces(text: str) -> str:
    for char, reference in BRACE_ESCAPES.items():
        text = text.replace(char, reference)
    return text


def escape_literal(text: str) -> str:
    """Escape author text, keeping entity references it already contains."""
    return _escape_braces(safe_entity(text))


def escape_code(text: str) -> str:
    """Escape code span text, where entity references are literal."""
    return _escape_braces(escape_text(text))


class ElementRenderer(mistune.HTMLRenderer):
    """Route mistune render calls to a :class:`CallbackSet`.

    Parameters
    ----------
    callbacks : CallbackSet
        Dispatch table of the current pass

    """

    def __init__(self, callbacks: CallbackSet) -> None:
        """Bind the renderer to one pass."""
        super().__init__(escape=False)
        self.callbacks = callbacks
        self._table_head = ""
        self._table_body = ""

    # Inline level

    def text(self, text: str) -> str:
        return escape_literal(text)

    def emphasis(self, text: str) -> str:
        return self.callbacks("em", text)

    def strong(self, text: str) -> str:
        return self.callbacks("strong", text)

    def strikethrough(self, text: str) -> str:
        return self.callbacks("del", text)

    def link(self, text: str, url: str, title: Optional[str] = None) -> str:
        return self.callbacks("link", url, title, text)

    def image(self, text: str, url: str, title: Optional[str] = None) -> str:
        return self.callbacks("image", url, title, text)

    def codespan(self, text: str) -> str:
        return self.callbacks("codespan", escape_code(text))

    def linebreak(self) -> str:
        return self.callbacks("br")

    def softbreak(self) -> str:
        return "\n"

    def inline_html(self, html: str) -> str:
        return self.callbacks("html", html)

    # Block level

    def paragraph(self, text: str) -> str:
        return self.callbacks("paragraph", text)

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        return self.callbacks("heading", text, level)

    def blank_line(self) -> str:
        return ""

    def thematic_break(self) -> str:
        return self.callbacks("hr")

    def block_text(self, text: str) -> str:
        return text

    def block_code(self, code: str, info: Optional[str] = None) -> str:
        language = None
        if info and info.strip():
            language = info.strip().split(None, 1)[0]
        return self.callbacks("code", code, language)

    def block_quote(self, text: str) -> str:
        return self.callbacks("blockquote", text)

    def block_html(self, html: str) -> str:
        return self.callbacks("html", html)

    def block_error(self, text: str) -> str:
        logger.debug("Rendering block error as paragraph")
        return self.callbacks("paragraph", escape_literal(text))

    def list(self, text: str, ordered: bool, **attrs: Any) -> str:
        return self.callbacks("list", text, ordered)

    def list_item(self, text: str) -> str:
        return self.callbacks("listitem", text)

    # Tables (mistune table plugin)

    def table(self, text: str) -> str:
        # pipe tables cannot nest, so one pending head/body pair is enough
        header, body = self._table_head, self._table_body
        self._table_head = self._table_body = ""
        return self.callbacks("table", header, body)

    def table_head(self, text: str) -> str:
        # mistune puts header cells straight under table_head, without a row
        self._table_head = self.callbacks("thead", self.callbacks("tablerow", text))
        return self._table_head

    def table_body(self, text: str) -> str:
        self._table_body = self.callbacks("tbody", text)
        return self._table_body

    def table_row(self, text: str) -> str:
        return self.callbacks("tablerow", text)

    def table_cell(self, text: str, align: Optional[str] = None, head: bool = False) -> str:
        return self.callbacks("tablecell", text, {"header": head, "align": align})


def create_renderer(tracker: ElementTracker, options: ElementOptions) -> ElementRenderer:
    """Build a renderer writing into ``tracker``.

    Parameters
    ----------
    tracker : ElementTracker
        Fresh tracker owned by the caller for one pass
    options : ElementOptions
        Conversion options

    Returns
    -------
    ElementRenderer
        Renderer to hand to :func:`mistune.create_markdown`

    """
    engine = PlaceholderEngine(tracker, options)
    return ElementRenderer(CallbackSet(engine, options.overrides))


def create_markdown(renderer: ElementRenderer, options: ElementOptions) -> mistune.Markdown:
    """Build a mistune instance with the plugins enabled by ``options``."""
    plugins = []
    if options.parse_strikethrough:
        plugins.append("strikethrough")
    if options.parse_tables:
        plugins.append("table")

    return mistune.create_markdown(escape=False, hard_wrap=options.hard_wrap, renderer=renderer, plugins=plugins)
