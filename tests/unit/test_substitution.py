#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for element creation and placeholder resolution."""

import pytest

from mdtree.elements import Element
from mdtree.exceptions import IntegrityError
from mdtree.options import ElementOptions
from mdtree.substitution import PlaceholderEngine, placeholder
from mdtree.tracker import ElementTracker


@pytest.mark.unit
class TestPlaceholder:
    """Test token formatting."""

    def test_token_format(self) -> None:
        """Test tokens wrap the id in double braces."""
        assert placeholder(0) == "{{0}}"
        assert placeholder(17) == "{{17}}"


@pytest.mark.unit
class TestCreateElement:
    """Test element creation."""

    def test_returns_placeholder_and_registers(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test the new element is tracked and top-level."""
        token = engine.create_element("p", None, "hello")

        assert token == "{{0}}"
        element = tracker.elements[0]
        assert isinstance(element, Element)
        assert element.type == "p"
        assert element.props == {"key": 0}
        assert element.children == ["hello"]
        assert tracker.tree == [element]

    def test_childless_element(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test elements without raw text get no children."""
        engine.create_element("hr")

        assert tracker.elements[0].children is None

    def test_empty_text_gives_no_children(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test empty raw text is treated like absent children."""
        engine.create_element("td", None, "")

        assert tracker.elements[0].children is None

    def test_props_merged_after_key(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test construct properties are merged with the key."""
        engine.create_element("a", {"href": "/x", "title": None}, "x")

        assert tracker.elements[0].props == {"key": 0, "href": "/x", "title": None}

    def test_children_adopted(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test placeholders in raw text become children and leave the tree."""
        em = engine.create_element("em", None, "world")
        engine.create_element("p", None, f"hello {em}!")

        paragraph = tracker.elements[1]
        assert paragraph.children == ["hello ", tracker.elements[0], "!"]
        assert tracker.tree == [paragraph]

    def test_sequence_children_resolved_per_part(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test each raw text part is resolved independently and in order."""
        head = engine.create_element("thead", None, "h")
        body = engine.create_element("tbody", None, "b")

        def capture(element_type, props, children):
            return {"type": element_type, "children": children}

        capturing = PlaceholderEngine(tracker, ElementOptions(create_element=capture))
        capturing.create_element("table", None, [head, body])

        table = tracker.elements[2]
        assert table["children"] == [[tracker.elements[0]], [tracker.elements[1]]]
        assert tracker.tree == [table]

    def test_plain_text_recorded(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test the text shadow includes the text of adopted children."""
        em = engine.create_element("em", None, "big")
        engine.create_element("p", None, f"a {em} &amp; b")

        assert tracker.text_content[1] == "a big & b"


@pytest.mark.unit
class TestElementOverrides:
    """Test element type overrides and context."""

    def test_override_replaces_type_and_adds_context(self, tracker: ElementTracker) -> None:
        """Test a registered override is used and receives the context."""
        tracker.context = {"theme": "dark"}
        engine = PlaceholderEngine(tracker, ElementOptions(elements={"p": "Paragraph"}))

        engine.create_element("p", None, "x")

        element = tracker.elements[0]
        assert element.type == "Paragraph"
        assert element.props == {"key": 0, "context": {"theme": "dark"}}

    def test_no_context_without_override(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test plain tags never receive the context property."""
        engine.create_element("p", None, "x")

        assert "context" not in tracker.elements[0].props

    def test_element_type_key_differs_from_tag(self, tracker: ElementTracker) -> None:
        """Test the override lookup uses the element type key when given."""
        engine = PlaceholderEngine(tracker, ElementOptions(elements={"codespan": "InlineCode"}))

        engine.create_element("code", None, "x", element_type="codespan")
        engine.create_element("code", None, "y")

        assert tracker.elements[0].type == "InlineCode"
        assert tracker.elements[1].type == "code"


@pytest.mark.unit
class TestResolvePlaceholders:
    """Test raw text resolution."""

    def test_document_order_preserved(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test text and elements interleave exactly as written."""
        for index in range(6):
            engine.create_element("span", None, f"s{index}")

        children = engine.resolve_placeholders("a {{2}} b {{5}} c")

        assert children == ["a ", tracker.elements[2], " b ", tracker.elements[5], " c"]
        assert tracker.elements[2] not in tracker.tree
        assert tracker.elements[5] not in tracker.tree
        assert len(tracker.tree) == 4

    def test_adjacent_tokens_have_no_empty_text(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test empty pieces between tokens are dropped."""
        first = engine.create_element("li", None, "a")
        second = engine.create_element("li", None, "b")

        children = engine.resolve_placeholders(first + second)

        assert children == [tracker.elements[0], tracker.elements[1]]

    def test_entities_decoded(self, engine: PlaceholderEngine) -> None:
        """Test literal pieces are HTML-unescaped."""
        assert engine.resolve_placeholders("Tom &amp; Jerry &lt;3 &#123;x&#125;") == ["Tom & Jerry <3 {x}"]

    def test_empty_text(self, engine: PlaceholderEngine) -> None:
        """Test empty raw text yields no children."""
        assert engine.resolve_placeholders("") == []

    def test_unknown_id_raises(self, engine: PlaceholderEngine) -> None:
        """Test a token without a tracked element is an integrity fault."""
        with pytest.raises(IntegrityError) as exc_info:
            engine.resolve_placeholders("x {{3}}")

        assert exc_info.value.element_id == 3

    def test_double_resolution_raises(self, engine: PlaceholderEngine) -> None:
        """Test re-resolving an adopted element is an integrity fault."""
        token = engine.create_element("em", None, "x")
        engine.resolve_placeholders(token)

        with pytest.raises(IntegrityError):
            engine.resolve_placeholders(token)


@pytest.mark.unit
class TestPlainText:
    """Test raw text flattening."""

    def test_plain_text_does_not_adopt_by_default(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test flattening leaves elements in the tree."""
        token = engine.create_element("em", None, "World")

        assert engine.plain_text(f"Hello {token}") == "Hello World"
        assert tracker.tree == [tracker.elements[0]]

    def test_plain_text_with_adoption(self, engine: PlaceholderEngine, tracker: ElementTracker) -> None:
        """Test flattening with adoption removes the elements."""
        token = engine.create_element("em", None, "alt")

        assert engine.plain_text(f"an {token}", adopt=True) == "an alt"
        assert tracker.tree == []
