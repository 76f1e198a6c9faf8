#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/elements.py
"""Default host element type and factory.

The conversion core treats elements as opaque values built by a host
factory with the signature ``factory(type, props, children)``. Hosts with
their own UI layer pass their own factory through
:class:`mdtree.options.ElementOptions`; this module supplies a plain
dataclass-based one so the package works out of the box.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

Child = Union[str, "Element"]


@dataclass(eq=False)
class Element:
    """A typed node with properties and ordered children.

    Parameters
    ----------
    type : Any
        Tag name (e.g. ``"p"``) or a host component registered as an override
    props : dict, default = empty dict
        Element properties; always carries ``key``
    children : list or None, default = None
        Text and element children in document order, or None for
        childless elements such as ``br`` and ``hr``

    """

    type: Any
    props: dict[str, Any] = field(default_factory=dict)
    children: Optional[list[Child]] = None

    @property
    def key(self) -> Any:
        """Return the identity key assigned at creation."""
        return self.props.get("key")

    def iter_elements(self) -> Iterator[Element]:
        """Yield this element and all descendant elements depth-first."""
        yield self
        for child in self.children or []:
            if isinstance(child, Element):
                yield from child.iter_elements()

    def find_all(self, element_type: Any) -> list[Element]:
        """Return every element of the given type in this subtree."""
        return [element for element in self.iter_elements() if element.type == element_type]

    def text_content(self) -> str:
        """Concatenate the text of this subtree."""
        parts = []
        for child in self.children or []:
            if isinstance(child, Element):
                parts.append(child.text_content())
            else:
                parts.append(child)
        return "".join(parts)


def _flatten_children(children: Any) -> Optional[list[Child]]:
    if children is None:
        return None

    flattened: list[Child] = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flattened.extend(child)
        else:
            flattened.append(child)
    return flattened


def create_element(element_type: Any, props: Optional[dict[str, Any]] = None, children: Any = None) -> Element:
    """Build an :class:`Element`.

    Children resolved independently per part (a table's header and body)
    arrive as a list of lists and are flattened one level, keeping order.

    Parameters
    ----------
    element_type : Any
        Tag name or host component
    props : dict or None
        Element properties
    children : list or None
        Resolved children

    Returns
    -------
    Element
        The new element

    """
    return Element(type=element_type, props=dict(props or {}), children=_flatten_children(children))
