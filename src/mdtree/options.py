#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/options.py
"""Configuration options for markdown-to-element conversion.

:class:`ElementOptions` is the option bag every pass reads: the host element
factory, an optional syntax highlighter, element type overrides keyed by
construct, replacement callbacks keyed by construct, the ambient context
handed to overridden element types, and the mistune features to enable.

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdtree.constants import CONSTRUCT_NAMES
from mdtree.elements import create_element as default_create_element
from mdtree.exceptions import ValidationError

Highlighter = Callable[[Optional[str], str], str]


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ElementOptions(CloneFrozenMixin):
    """Options controlling how markdown constructs become elements.

    Parameters
    ----------
    create_element : callable
        Host factory called as ``create_element(type, props, children)``
    highlight : callable or None, default None
        Syntax highlighter called as ``highlight(language, code)``; its output
        is injected into fenced code elements as pre-escaped markup
    elements : mapping, default empty
        Replacement element type per construct key (``"p"``, ``"code"``,
        ``"codespan"``, ...). Overridden elements also receive ``context``.
    overrides : mapping, default empty
        Replacement callback per construct name, called as
        ``override(engine, *args)``
    context : Any, default None
        Ambient host context passed to overridden element types
    parse_tables : bool, default True
        Enable GFM pipe tables
    parse_strikethrough : bool, default True
        Enable ``~~strikethrough~~``
    hard_wrap : bool, default False
        Treat every newline inside a paragraph as a line break

    Examples
    --------
        >>> options = ElementOptions(highlight=lambda lang, code: f"<b>{code}</b>")
        >>> no_tables = options.create_updated(parse_tables=False)

    """

    create_element: Callable[..., Any] = field(
        default=default_create_element,
        metadata={"help": "Host element factory: create_element(type, props, children)", "importance": "core"},
    )
    highlight: Optional[Highlighter] = field(
        default=None,
        metadata={"help": "Syntax highlighter for fenced code: highlight(language, code) -> markup"},
    )
    elements: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Element type overrides keyed by construct key (e.g. 'code', 'codespan', 'p')"},
    )
    overrides: Mapping[str, Callable[..., str]] = field(
        default_factory=dict,
        metadata={"help": "Replacement callbacks keyed by construct name", "importance": "advanced"},
    )
    context: Any = field(
        default=None,
        metadata={"help": "Ambient context passed to overridden element types"},
    )
    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse GFM pipe tables"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse ~~strikethrough~~ spans"},
    )
    hard_wrap: bool = field(
        default=False,
        metadata={"help": "Turn every newline inside a paragraph into a line break"},
    )

    def __post_init__(self) -> None:
        """Validate callables and override keys.

        Raises
        ------
        ValidationError
            If a factory, highlighter or override is not callable, or an
            override names an unknown construct.

        """
        if not callable(self.create_element):
            raise ValidationError(
                "create_element must be callable",
                parameter_name="create_element",
                parameter_value=self.create_element,
            )

        if self.highlight is not None and not callable(self.highlight):
            raise ValidationError(
                "highlight must be callable or None",
                parameter_name="highlight",
                parameter_value=self.highlight,
            )

        for name, override in self.overrides.items():
            if name not in CONSTRUCT_NAMES:
                raise ValidationError(
                    f"Unknown construct '{name}' in overrides. Valid constructs: {', '.join(CONSTRUCT_NAMES)}",
                    parameter_name="overrides",
                    parameter_value=name,
                )
            if not callable(override):
                raise ValidationError(
                    f"Override for '{name}' must be callable",
                    parameter_name="overrides",
                    parameter_value=override,
                )
