#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/toc.py
"""Table of contents construction from heading events.

Headings arrive one at a time, in document order, with arbitrary level
jumps. Each heading extends a breadcrumb of slugs (one per open level)
that becomes its anchor id, and is attached to the nested TOC forest under
the most recently opened heading of a strictly lower level.

Examples
--------
    >>> from mdtree.tracker import ElementTracker
    >>> tracker = ElementTracker()
    >>> record_heading(tracker, "Hello World", 1)
    'hello-world'
    >>> record_heading(tracker, "Sub", 2)
    'hello-world-sub'
    >>> record_heading(tracker, "Other", 1)
    'other'

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from mdtree.constants import HEADING_ID_SEPARATOR

if TYPE_CHECKING:
    from mdtree.tracker import ElementTracker

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass
class TocNode:
    """One entry of the table of contents.

    Parameters
    ----------
    id : str
        Anchor id of the heading element
    title : str
        Plain heading text
    level : int
        Heading level (1-6)
    children : list of TocNode
        Entries nested under this heading

    """

    id: str
    title: str
    level: int
    children: list[TocNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the entry and its descendants as plain nested dicts."""
        return {
            "id": self.id,
            "title": self.title,
            "level": self.level,
            "children": [child.to_dict() for child in self.children],
        }


def heading_slug(title: str) -> str:
    """Lowercase the title and collapse whitespace runs into single hyphens."""
    return _WHITESPACE_RUN.sub("-", title).lower()


def _insertion_point(toc: list[TocNode], level: int) -> list[TocNode]:
    if not toc or toc[-1].level >= level:
        return toc

    node = toc[-1]
    while node.children and node.children[-1].level < level:
        node = node.children[-1]
    return node.children


def record_heading(tracker: ElementTracker, title: str, level: int) -> str:
    """Register a heading in the breadcrumb and the TOC forest.

    Parameters
    ----------
    tracker : ElementTracker
        State of the current pass
    title : str
        Plain heading text
    level : int
        Heading level

    Returns
    -------
    str
        The heading's anchor id, the breadcrumb slugs joined with hyphens

    """
    del tracker.current_heading_path[max(level - 1, 0) :]
    tracker.current_heading_path.append(heading_slug(title))
    heading_id = HEADING_ID_SEPARATOR.join(tracker.current_heading_path)

    _insertion_point(tracker.toc, level).append(TocNode(id=heading_id, title=title, level=level))
    logger.debug("Recorded heading %r at level %d", heading_id, level)

    return heading_id


def iter_toc(nodes: Iterable[TocNode], depth: int = 0) -> Iterator[tuple[int, TocNode]]:
    """Walk a TOC forest depth-first, yielding ``(depth, node)`` pairs."""
    for node in nodes:
        yield depth, node
        yield from iter_toc(node.children, depth + 1)
