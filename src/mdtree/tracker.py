#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/tracker.py
"""Per-pass element bookkeeping.

An :class:`ElementTracker` holds every piece of mutable state one document
conversion needs: the id counter, the id-indexed element table, the ordered
top-level forest, the heading breadcrumb and the table of contents. A fresh
tracker is built for every pass and thrown away afterwards.

Elements stay in ``elements`` for the whole pass. Membership in ``tree``
is what changes: every element starts out top-level and leaves ``tree``
when a parent adopts it through its placeholder.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from mdtree.exceptions import IntegrityError

if TYPE_CHECKING:
    from mdtree.toc import TocNode

logger = logging.getLogger(__name__)

ElementFactory = Callable[[int], Any]


class ElementTracker:
    """Mutable state of a single conversion pass.

    Parameters
    ----------
    context : Any, optional
        Ambient host context handed to overridden element types

    Attributes
    ----------
    next_id : int
        Identifier given to the next allocation
    elements : dict[int, Any]
        Every tracked element keyed by identifier
    tree : list
        Elements that currently have no parent, in creation order
    current_heading_path : list[str]
        Slug of each open heading level, index 0 being level 1
    toc : list[TocNode]
        Root nodes of the table of contents
    text_content : dict[int, str]
        Plain text of each tracked element

    """

    def __init__(self, context: Any = None) -> None:
        """Initialize empty pass state."""
        self.context = context
        self.next_id = 0
        self.elements: dict[int, Any] = {}
        self.tree: list[Any] = []
        self.current_heading_path: list[str] = []
        self.toc: list[TocNode] = []
        self.text_content: dict[int, str] = {}
        self._failed = False

    def _allocate_id(self) -> int:
        if self._failed:
            raise IntegrityError("Tracker cannot be reused after an integrity error")
        element_id = self.next_id
        self.next_id += 1
        return element_id

    def create(self, factory: ElementFactory, text: str = "") -> tuple[int, Any]:
        """Allocate an id, build the element and make it top-level.

        Parameters
        ----------
        factory : callable
            Called with the new id, returns the element
        text : str, default ""
            Plain text of the element, used for heading titles and alt text

        Returns
        -------
        tuple[int, Any]
            The identifier and the element

        """
        element_id = self._allocate_id()
        element = factory(element_id)
        self.elements[element_id] = element
        self.text_content[element_id] = text
        self.tree.append(element)
        logger.debug("Created element %d", element_id)
        return element_id, element

    def append_raw(self, factory: ElementFactory) -> Any:
        """Append an element to the tree without registering it for adoption.

        The id is still consumed so element keys stay unique across the pass.
        """
        element_id = self._allocate_id()
        element = factory(element_id)
        self.tree.append(element)
        logger.debug("Appended raw element %d", element_id)
        return element

    def remove(self, element_id: int) -> Any:
        """Take the element registered under ``element_id`` out of the tree.

        Parameters
        ----------
        element_id : int
            Identifier of the element being adopted

        Returns
        -------
        Any
            The adopted element

        Raises
        ------
        IntegrityError
            If no element has this id or it was already adopted

        """
        if self._failed:
            raise IntegrityError("Tracker cannot be reused after an integrity error", element_id=element_id)

        if element_id not in self.elements:
            self._failed = True
            raise IntegrityError(f"Placeholder refers to unknown element {element_id}", element_id=element_id)

        element = self.elements[element_id]
        for index, candidate in enumerate(self.tree):
            if candidate is element:
                del self.tree[index]
                logger.debug("Adopted element %d", element_id)
                return element

        self._failed = True
        raise IntegrityError(f"Element {element_id} has already been adopted", element_id=element_id)

    def is_adopted(self, element_id: int) -> bool:
        """Return True when a tracked element no longer sits at the top level."""
        element = self.elements[element_id]
        return not any(candidate is element for candidate in self.tree)
