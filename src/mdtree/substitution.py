#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/substitution.py
"""Element creation and placeholder resolution.

The markdown parser reports constructs children-first. Every construct is
turned into an element straight away, registered in the tracker under a
fresh id, and represented to the parser by the placeholder token
``{{id}}``. The parser splices that token into the raw text of the
enclosing construct. When the enclosing construct is converted, its raw
text is split back into literal text and tokens, and each token's element
is adopted: it leaves the top-level forest and becomes a child.

"""

from __future__ import annotations

import html
import logging
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Sequence, Union

from mdtree.constants import (
    CONTEXT_PROP,
    KEY_PROP,
    PLACEHOLDER_PATTERN,
    PLACEHOLDER_SPLIT_PATTERN,
    PLACEHOLDER_TEMPLATE,
)

if TYPE_CHECKING:
    from mdtree.options import ElementOptions
    from mdtree.tracker import ElementTracker

logger = logging.getLogger(__name__)

RawChildren = Union[str, Sequence[str], None]


def placeholder(element_id: int) -> str:
    """Return the placeholder token for an element id."""
    return PLACEHOLDER_TEMPLATE.format(element_id=element_id)


class PlaceholderEngine:
    """Create tracked elements and splice them back in through placeholders.

    Parameters
    ----------
    tracker : ElementTracker
        State of the current pass
    options : ElementOptions
        Host factory, element overrides and highlighter

    """

    def __init__(self, tracker: ElementTracker, options: ElementOptions) -> None:
        """Bind the engine to one pass."""
        self.tracker = tracker
        self.options = options

    def element_type(self, key: str) -> Any:
        """Return the element type registered for ``key``, or None."""
        return self.options.elements.get(key)

    def create_element(
        self,
        tag: Any,
        props: Optional[dict[str, Any]] = None,
        children: RawChildren = None,
        element_type: Optional[str] = None,
    ) -> str:
        """Build, register and return the placeholder of a new element.

        Parameters
        ----------
        tag : Any
            Tag used when no override is registered
        props : dict or None
            Construct-specific properties
        children : str, sequence of str, or None
            Raw text holding literal text and placeholder tokens. A sequence
            is resolved part by part and the results kept in order.
        element_type : str, optional
            Key looked up in the element overrides, defaults to ``tag``

        Returns
        -------
        str
            Placeholder token of the new element

        """
        override = self.element_type(element_type or tag)
        resolved: Optional[list[Any]] = None
        text = ""

        if children:
            if isinstance(children, str):
                text = self.plain_text(children)
                resolved = self.resolve_placeholders(children)
            else:
                text = "".join(self.plain_text(part) for part in children)
                resolved = [self.resolve_placeholders(part) for part in children]

        def build(element_id: int) -> Any:
            element_props = {KEY_PROP: element_id, **(props or {})}
            if override is not None:
                element_props[CONTEXT_PROP] = self.tracker.context
            return self.options.create_element(override if override is not None else tag, element_props, resolved)

        element_id, _ = self.tracker.create(build, text=text)
        return placeholder(element_id)

    def register(self, factory: Callable[[int], Any], text: str = "") -> str:
        """Register an element built by ``factory(element_id)`` and return its placeholder."""
        element_id, _ = self.tracker.create(factory, text=text)
        return placeholder(element_id)

    def _pieces(self, text: str) -> Iterator[tuple[Optional[int], str]]:
        for piece in PLACEHOLDER_SPLIT_PATTERN.split(text):
            match = PLACEHOLDER_PATTERN.fullmatch(piece)
            if match:
                yield int(match.group(1)), piece
            elif piece:
                yield None, piece

    def resolve_placeholders(self, text: str) -> list[Any]:
        """Turn raw text into children, adopting every referenced element.

        Literal pieces are HTML-unescaped; empty pieces are dropped.

        Examples
        --------
            >>> engine.resolve_placeholders("a {{2}} b {{5}} c")  # doctest: +SKIP
            ['a ', <element 2>, ' b ', <element 5>, ' c']

        Raises
        ------
        IntegrityError
            If a token names an unknown or already adopted element

        """
        children: list[Any] = []
        for element_id, piece in self._pieces(text):
            if element_id is not None:
                children.append(self.tracker.remove(element_id))
            else:
                children.append(html.unescape(piece))
        return children

    def plain_text(self, text: str, adopt: bool = False) -> str:
        """Flatten raw text to plain text.

        Tokens are replaced by the plain text of their elements. With
        ``adopt`` the referenced elements are also taken out of the tree,
        for raw text that collapses into a string attribute.
        """
        parts = []
        for element_id, piece in self._pieces(text):
            if element_id is None:
                parts.append(html.unescape(piece))
                continue
            if adopt:
                self.tracker.remove(element_id)
            parts.append(self.tracker.text_content.get(element_id, ""))
        return "".join(parts)
