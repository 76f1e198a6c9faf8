#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/callbacks.py
"""Default conversion callback for every markdown construct.

Each callback takes the pass's :class:`PlaceholderEngine` followed by the
construct's parsed fields, builds the element, and returns the string the
parser splices into the enclosing construct (a placeholder token, or an
empty string for raw HTML).

:class:`CallbackSet` is the dispatch table. Any single construct can be
replaced through ``ElementOptions.overrides`` without touching the others;
replacements use the same ``fn(engine, *args)`` signature.

"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from mdtree.constants import (
    CLASS_NAME_PROP,
    CODE_LANGUAGE_CLASS_PREFIX,
    CONSTRUCT_NAMES,
    INNER_HTML_PROP,
    KEY_PROP,
    RAW_HTML_CONTAINER_TAG,
    TABLE_ALIGN_CLASS_PREFIX,
)
from mdtree.exceptions import ValidationError
from mdtree.toc import record_heading

if TYPE_CHECKING:
    from mdtree.substitution import PlaceholderEngine

Callback = Callable[..., str]


def code(engine: PlaceholderEngine, text: str, language: Optional[str] = None) -> str:
    """Fenced code block.

    An element override registered under ``code`` receives the raw ``code``
    and ``language`` as properties. Otherwise a ``pre`` wraps a ``code``
    element holding either the highlighted markup or the code as text.
    """
    component = engine.element_type("code")
    if component is not None:
        return engine.create_element(component, {"code": text, "language": language}, element_type="code")

    options = engine.options
    code_props: dict[str, Any] = {}
    code_children: Optional[list[str]] = [text]
    if language:
        code_props[CLASS_NAME_PROP] = f"{CODE_LANGUAGE_CLASS_PREFIX}{language}"
    if options.highlight is not None:
        code_props[INNER_HTML_PROP] = options.highlight(language, text)
        code_children = None

    def build(element_id: int) -> Any:
        inner = options.create_element("code", code_props, code_children)
        return options.create_element("pre", {KEY_PROP: element_id}, [inner])

    return engine.register(build, text=text)


def html(engine: PlaceholderEngine, raw: str) -> str:
    """Raw HTML, kept as pre-formed markup in a container at the top level."""
    create = engine.options.create_element
    engine.tracker.append_raw(
        lambda element_id: create(RAW_HTML_CONTAINER_TAG, {KEY_PROP: element_id, INNER_HTML_PROP: raw}, None)
    )
    return ""


def paragraph(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("p", None, text)


def blockquote(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("blockquote", None, text)


def link(engine: PlaceholderEngine, href: str, title: Optional[str], text: str) -> str:
    return engine.create_element("a", {"href": href, "title": title}, text)


def br(engine: PlaceholderEngine) -> str:
    return engine.create_element("br")


def hr(engine: PlaceholderEngine) -> str:
    return engine.create_element("hr")


def strong(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("strong", None, text)


def del_(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("del", None, text)


def em(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("em", None, text)


def heading(engine: PlaceholderEngine, text: str, level: int) -> str:
    """Heading; also registered in the breadcrumb and the table of contents."""
    heading_id = record_heading(engine.tracker, engine.plain_text(text), level)
    return engine.create_element(f"h{level}", {"id": heading_id}, text)


def list_(engine: PlaceholderEngine, body: str, ordered: bool) -> str:
    return engine.create_element("ol" if ordered else "ul", None, body)


def listitem(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("li", None, text)


def table(engine: PlaceholderEngine, header: str, body: str) -> str:
    """Table; header and body arrive already wrapped by thead/tbody."""
    return engine.create_element("table", None, [header, body])


def thead(engine: PlaceholderEngine, content: str) -> str:
    return engine.create_element("thead", None, content)


def tbody(engine: PlaceholderEngine, content: str) -> str:
    return engine.create_element("tbody", None, content)


def tablerow(engine: PlaceholderEngine, content: str) -> str:
    return engine.create_element("tr", None, content)


def tablecell(engine: PlaceholderEngine, content: str, flags: Mapping[str, Any]) -> str:
    """Table cell; ``th`` for header cells, alignment class only when aligned."""
    tag = "th" if flags.get("header") else "td"
    align = flags.get("align")
    props = {CLASS_NAME_PROP: f"{TABLE_ALIGN_CLASS_PREFIX}{align}"} if align else None
    return engine.create_element(tag, props, content)


def codespan(engine: PlaceholderEngine, text: str) -> str:
    return engine.create_element("code", None, text, element_type="codespan")


def image(engine: PlaceholderEngine, href: str, title: Optional[str], text: str) -> str:
    # alt is a plain attribute, so inline markup in it is flattened and adopted
    alt = engine.plain_text(text, adopt=True)
    return engine.create_element("img", {"src": href, "alt": alt})


DEFAULT_CALLBACKS: dict[str, Callback] = {
    "code": code,
    "html": html,
    "paragraph": paragraph,
    "blockquote": blockquote,
    "link": link,
    "br": br,
    "hr": hr,
    "strong": strong,
    "del": del_,
    "em": em,
    "heading": heading,
    "list": list_,
    "listitem": listitem,
    "table": table,
    "thead": thead,
    "tbody": tbody,
    "tablerow": tablerow,
    "tablecell": tablecell,
    "codespan": codespan,
    "image": image,
}


class CallbackSet:
    """Per-pass dispatch table from construct name to callback.

    Parameters
    ----------
    engine : PlaceholderEngine
        Engine of the current pass, passed as first argument to every callback
    overrides : mapping, optional
        Replacement callbacks keyed by construct name

    Examples
    --------
        >>> callbacks = CallbackSet(engine, {"hr": lambda engine: engine.create_element("div")})
        >>> token = callbacks("paragraph", "hello")

    """

    def __init__(self, engine: PlaceholderEngine, overrides: Optional[Mapping[str, Callback]] = None) -> None:
        """Merge overrides over the default callbacks."""
        self.engine = engine
        self._callbacks: dict[str, Callback] = dict(DEFAULT_CALLBACKS)
        for name, override in (overrides or {}).items():
            if name not in CONSTRUCT_NAMES:
                raise ValidationError(
                    f"Unknown construct '{name}' in overrides", parameter_name="overrides", parameter_value=name
                )
            self._callbacks[name] = override

    def get(self, name: str) -> Callback:
        """Return the callback for ``name`` bound to the engine."""
        try:
            callback = self._callbacks[name]
        except KeyError:
            raise ValidationError(
                f"Unknown construct '{name}'", parameter_name="name", parameter_value=name
            ) from None
        return partial(callback, self.engine)

    def __call__(self, name: str, *args: Any) -> str:
        """Invoke the callback for ``name``."""
        return self.get(name)(*args)
